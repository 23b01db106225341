import logging
from typing import Optional, Union

from ..converters.big_int_converter import BigIntConverter
from ..delay.DelayEvaluator import DelayEvaluator
from ..delay.ProgressReporter import ProgressCallback, as_progress_reporter
from ..delay.abstract.IDelayEvaluator import IDelayEvaluator
from ..delay.abstract.IProgressReporter import IProgressReporter
from ..group.abstract.IGroupContext import IGroupContext
from ..hashing import InputHasher
from ..mpc import MPC
from ..protocol_constants import CHALLENGE_PRIME_BITS
from ..primes.PrimeChallengeGenerator import PrimeChallengeGenerator
from ..primes.abstract.IPrimeChallengeGenerator import IPrimeChallengeGenerator
from .Proof import Proof
from .abstract.IProofBuilder import IProofBuilder
from .validation import validate_iterations

logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class ProofBuilder(IProofBuilder):
    """Builds Wesolowski proofs: y = x^(2^t), pi = x^floor(2^t / l), both mod N."""

    def __init__(
        self,
        group: IGroupContext,
        prime_generator: Optional[IPrimeChallengeGenerator] = None,
        evaluator: Optional[IDelayEvaluator] = None,
    ) -> None:
        """Initialize the builder.

        Args:
            group (IGroupContext): The shared group
            prime_generator (Optional[IPrimeChallengeGenerator]): Source of challenge primes
            evaluator (Optional[IDelayEvaluator]): The sequential squaring loop
        """
        self._group = group
        self._prime_generator = prime_generator or PrimeChallengeGenerator()
        self._evaluator = evaluator or DelayEvaluator(group)

    def build(
        self,
        input_value: Union[bytes, str],
        t: int,
        progress: Optional[Union[IProgressReporter, ProgressCallback]] = None,
    ) -> Proof:
        t = validate_iterations(t)
        reporter = as_progress_reporter(progress)

        x = InputHasher.hash_to_int(input_value)
        l = self._prime_generator.generate_prime(CHALLENGE_PRIME_BITS)
        r = MPC.powmod(TWO, t, l)

        logger.debug("Evaluating %d squarings", t)
        y = self._evaluator.evaluate(x, t, reporter)

        # q must come from the exact integer 2^t, not a reduced power
        power = MPC.pow(TWO, t)
        q, remainder = divmod(power - r, l)
        if remainder != 0:
            raise ArithmeticError("2^t - r is not divisible by l")
        pi = self._group.powmod(x, q)

        return Proof(
            y=BigIntConverter.encode(y),
            pi=BigIntConverter.encode(pi),
            l=BigIntConverter.encode(l),
            r=BigIntConverter.encode(r),
            iterations=t,
        )
