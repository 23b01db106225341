from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IPrimalityTester(ABC):
    """Abstract base class defining the interface for probabilistic primality testing."""

    @staticmethod
    @abstractmethod
    def is_probable_prime(n: MPZ, rounds: int) -> bool:
        """Test n for primality with independently sampled witnesses.

        A False result is certain. A True result is probabilistic: a
        composite n survives all rounds with probability at most 4^-rounds.

        Args:
            n (MPZ): Candidate, n >= 0
            rounds (int): Number of witnesses, rounds >= 1

        Returns:
            bool: False if n is composite (or n <= 1), True if n is probably prime
        """
