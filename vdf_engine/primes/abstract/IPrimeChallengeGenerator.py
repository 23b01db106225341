from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IPrimeChallengeGenerator(ABC):
    """Abstract base class defining the interface for challenge prime generation."""

    @abstractmethod
    def generate_prime(self, bits: int) -> MPZ:
        """Sample a random probable prime of exactly the given bit length.

        Args:
            bits (int): Bit length of the prime

        Returns:
            MPZ: A probable prime with bit_length() == bits

        Raises:
            PrimeGenerationExhausted: If the attempt budget runs out
        """
