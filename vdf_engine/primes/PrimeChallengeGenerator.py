import logging

from ..errors import PrimeGenerationExhausted
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import GENERATION_ROUNDS, PRIME_GENERATION_ATTEMPTS
from ..random import Random
from .PrimalityTester import PrimalityTester
from .abstract.IPrimalityTester import IPrimalityTester
from .abstract.IPrimeChallengeGenerator import IPrimeChallengeGenerator

logger = logging.getLogger(__name__)


class PrimeChallengeGenerator(IPrimeChallengeGenerator):
    """Implementation of challenge prime generation by rejection sampling."""

    def __init__(
        self,
        tester: IPrimalityTester = PrimalityTester,
        rounds: int = GENERATION_ROUNDS,
        max_attempts: int = PRIME_GENERATION_ATTEMPTS,
    ) -> None:
        """Initialize the generator.

        Args:
            tester (IPrimalityTester): Primality test applied to each candidate
            rounds (int): Miller-Rabin rounds per candidate
            max_attempts (int): Candidates sampled before giving up
        """
        self._tester = tester
        self._rounds = rounds
        self._max_attempts = max_attempts

    def generate_prime(self, bits: int) -> MPZ:
        if bits < 2:
            raise ValueError(f"bits must be at least 2: {bits}")

        for attempt in range(1, self._max_attempts + 1):
            candidate = self._sample_candidate(bits)
            if self._tester.is_probable_prime(candidate, self._rounds):
                logger.debug("Found %d-bit prime after %d attempts", bits, attempt)
                return candidate

        logger.error(
            "Prime generation exhausted after %d attempts (%d bits)",
            self._max_attempts,
            bits,
        )
        raise PrimeGenerationExhausted(bits, self._max_attempts)

    # Private Methods
    # --------------

    @staticmethod
    def _sample_candidate(bits: int) -> MPZ:
        """Random odd integer with exactly `bits` bits."""
        candidate = Random.get_random_bits(bits)
        candidate |= MPC.mpz(1) << (bits - 1)  # fix the bit length
        candidate |= 1  # force odd
        return candidate
