from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IRandom(ABC):
    """Abstract base class defining the interface for random number generation."""

    @staticmethod
    @abstractmethod
    def get_random_bits(bit_size: int) -> MPZ:
        """Get a uniformly random non-negative integer below 2**bit_size.

        Args:
            bit_size (int): Number of random bits.

        Returns:
            MPZ: A random integer drawn from a secure source
        """

    @staticmethod
    @abstractmethod
    def get_random_range(low: MPZ, high: MPZ) -> MPZ:
        """Get a uniformly random integer in the closed range [low, high].

        Args:
            low (MPZ): Inclusive lower bound
            high (MPZ): Inclusive upper bound

        Returns:
            MPZ: A random integer drawn from a secure source
        """
