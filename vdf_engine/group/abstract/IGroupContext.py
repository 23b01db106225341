from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IGroupContext(ABC):
    """Abstract base class defining arithmetic in Z/NZ for a fixed modulus N."""

    @abstractmethod
    def get_N(self) -> MPZ:
        """Get the modulus N.

        Returns:
            MPZ: The modulus N
        """

    @abstractmethod
    def powmod(self, base: MPZ, exp: MPZ) -> MPZ:
        """Compute base^exp mod N.

        Args:
            base (MPZ): Base value
            exp (MPZ): Non-negative exponent

        Returns:
            MPZ: The reduced power
        """

    @abstractmethod
    def mul(self, a: MPZ, b: MPZ) -> MPZ:
        """Compute a * b mod N.

        Args:
            a (MPZ): First factor
            b (MPZ): Second factor

        Returns:
            MPZ: The reduced product
        """

    @abstractmethod
    def square(self, value: MPZ) -> MPZ:
        """Compute value^2 mod N. One step of the delay computation.

        Args:
            value (MPZ): Value to square

        Returns:
            MPZ: The reduced square
        """
