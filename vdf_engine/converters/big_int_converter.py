"""Converter between big integers and their transport encoding."""

import base64
import binascii

from ..errors import DecodeError
from ..mpc import MPC
from ..mpc.types import MPZ


class BigIntConverter:
    """Standard base64 over minimal big-endian bytes."""

    @staticmethod
    def encode(value: MPZ) -> str:
        """Encode a non-negative integer.

        Args:
            value (MPZ): The integer to encode

        Returns:
            str: Base64 text; zero encodes as "AA=="
        """
        return base64.b64encode(MPC.to_bytes(value)).decode("ascii")

    @staticmethod
    def decode(text: str) -> MPZ:
        """Decode a transport field back to an integer.

        Args:
            text (str): Base64 text

        Returns:
            MPZ: The decoded integer

        Raises:
            DecodeError: If the text is not valid base64 or decodes to no bytes
        """
        if not isinstance(text, (str, bytes)):
            raise DecodeError(f"Expected base64 text, got {type(text).__name__}")
        try:
            raw = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Base64 decode error: {e}") from e
        if not raw:
            raise DecodeError("Empty bytes")
        return MPC.from_bytes(raw)
