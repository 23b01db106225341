import hashlib
from typing import Union

from ..mpc import MPC
from ..mpc.types import MPZ

DIGEST_BITS = 256  # SHA-256 output width


class InputHasher:
    """Derives the challenge value x from a public input."""

    @staticmethod
    def digest(data: Union[bytes, str]) -> bytes:
        """SHA-256 digest of the input. Text is hashed as UTF-8.

        Args:
            data (Union[bytes, str]): The public input

        Returns:
            bytes: The 32-byte digest
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"input must be bytes or str, not {type(data).__name__}")
        return hashlib.sha256(data).digest()

    @staticmethod
    def hash_to_int(data: Union[bytes, str]) -> MPZ:
        """Digest reinterpreted as a big-endian integer, with no reduction.

        The group modulus must be wider than DIGEST_BITS for this to be a
        canonical group element; GroupContext enforces that.

        Args:
            data (Union[bytes, str]): The public input

        Returns:
            MPZ: The challenge value x
        """
        return MPC.from_bytes(InputHasher.digest(data))
