import logging
from typing import Optional, Union

from ..delay.DelayEvaluator import DelayEvaluator
from ..delay.ProgressReporter import ProgressCallback
from ..delay.abstract.IProgressReporter import IProgressReporter
from ..group.abstract.IGroupContext import IGroupContext
from ..primes.PrimeChallengeGenerator import PrimeChallengeGenerator
from ..proof.Proof import Proof
from ..proof.ProofBuilder import ProofBuilder
from ..proof.ProofVerifier import ProofVerifier
from ..protocol_constants import ITERATIONS_PER_SECOND, PROGRESS_CHUNK_SIZE
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from ..utils.IterationEstimator import IterationEstimator

logger = logging.getLogger(__name__)


class VerifiableDelayFunction:
    """Wesolowski VDF over a fixed RSA group.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, group: IGroupContext, chunk_size: Optional[int] = None) -> None:
        """Initialize the VDF.

        Args:
            group (IGroupContext): The shared group
            chunk_size (Optional[int]): Squarings between progress reports;
                read from PROGRESS_CHUNK_SIZE when omitted
        """
        if chunk_size is None:
            chunk_size = EnvironmentManager.get_int(EnvironmentVariables.PROGRESS_CHUNK_SIZE)
            if chunk_size < 1:
                logger.warning(
                    "Ignoring non-positive PROGRESS_CHUNK_SIZE=%d, using %d", chunk_size, PROGRESS_CHUNK_SIZE
                )
                chunk_size = PROGRESS_CHUNK_SIZE
        self._group = group
        self._builder = ProofBuilder(
            group,
            prime_generator=PrimeChallengeGenerator(),
            evaluator=DelayEvaluator(group, chunk_size),
        )
        self._verifier = ProofVerifier(group)

    def get_group(self) -> IGroupContext:
        return self._group

    def compute(
        self,
        input_value: Union[bytes, str],
        iterations: int,
        progress: Optional[Union[IProgressReporter, ProgressCallback]] = None,
    ) -> Proof:
        """Compute a proof that `iterations` sequential squarings were performed.

        Args:
            input_value (Union[bytes, str]): The public input
            iterations (int): Iteration count in [MIN_ITERATIONS, MAX_ITERATIONS]
            progress: An IProgressReporter or a callable taking a percentage

        Returns:
            Proof: The proof in transport form

        Raises:
            InvalidIterationCount: If iterations is out of range
            PrimeGenerationExhausted: If no challenge prime was found; safe to retry
        """
        return self._builder.build(input_value, iterations, progress)

    def verify(self, input_value: Union[bytes, str], proof: Proof) -> bool:
        """Verify a proof.

        Returns:
            bool: True if accepted, False if rejected

        Raises:
            InvalidIterationCount: If the proof's iteration count is out of range
            DecodeError: If a proof field is malformed
            InvalidProofPrime: If the proof's prime is too short or composite
        """
        return self._verifier.verify(input_value, proof)

    @staticmethod
    def estimate_iterations(seconds: float, iterations_per_second: float = ITERATIONS_PER_SECOND) -> int:
        return IterationEstimator.estimate_iterations(seconds, iterations_per_second)
