from abc import ABC, abstractmethod
from ..types import MPZ


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            MPZ: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value
            mod (MPZ): Modulus value

        Returns:
            MPZ: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def square_mod(value: MPZ, mod: MPZ) -> MPZ:
        """Compute (value * value) % mod.

        Args:
            value (MPZ): Value to square
            mod (MPZ): Modulus value

        Returns:
            MPZ: The reduced square
        """

    @staticmethod
    @abstractmethod
    def mul_mod(a: MPZ, b: MPZ, mod: MPZ) -> MPZ:
        """Compute (a * b) % mod.

        Args:
            a (MPZ): First factor
            b (MPZ): Second factor
            mod (MPZ): Modulus value

        Returns:
            MPZ: The reduced product
        """

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp over the integers, without reduction.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value

        Returns:
            MPZ: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def is_even(value: MPZ) -> bool:
        """Check whether a value is even."""

    @staticmethod
    @abstractmethod
    def bit_length(value: MPZ) -> int:
        """Number of bits needed to represent a non-negative value (0 for zero)."""

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes) -> MPZ:
        """Interpret bytes as a big-endian unsigned integer.

        Args:
            data (bytes): Big-endian bytes

        Returns:
            MPZ: The decoded integer
        """

    @staticmethod
    @abstractmethod
    def to_bytes(value: MPZ) -> bytes:
        """Minimal big-endian encoding of a non-negative integer.

        Zero encodes as a single zero byte.

        Args:
            value (MPZ): Non-negative integer to encode

        Returns:
            bytes: Big-endian bytes without superfluous leading zeros
        """
