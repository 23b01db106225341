"""Translate wall-clock targets into iteration counts."""

import logging
import math
import time

from ..group.abstract.IGroupContext import IGroupContext
from ..hashing import InputHasher
from ..protocol_constants import ITERATIONS_PER_SECOND, MAX_ITERATIONS, MIN_ITERATIONS

logger = logging.getLogger(__name__)

CALIBRATION_SAMPLE_ITERATIONS = 100_000


class IterationEstimator:
    """Helpers for choosing t. None of this affects proof correctness."""

    @staticmethod
    def estimate_iterations(seconds: float, iterations_per_second: float = ITERATIONS_PER_SECOND) -> int:
        """
        Estimate the iteration count for a target delay.

        Args:
            seconds: Desired delay
            iterations_per_second: Squaring rate, e.g. from calibrate()

        Returns:
            int: clamp(seconds * rate, MIN_ITERATIONS, MAX_ITERATIONS); NaN gives MIN_ITERATIONS
        """
        iterations = seconds * iterations_per_second
        if math.isnan(iterations):
            return MIN_ITERATIONS
        # Clamp before int() so infinite targets saturate
        return int(max(MIN_ITERATIONS, min(MAX_ITERATIONS, iterations)))

    @staticmethod
    def calibrate(group: IGroupContext, sample_iterations: int = CALIBRATION_SAMPLE_ITERATIONS) -> float:
        """
        Measure how many sequential squarings this machine performs per second.

        Args:
            group: Group to square in
            sample_iterations: Length of the timed run

        Returns:
            float: Squarings per second
        """
        if sample_iterations < 1:
            raise ValueError(f"sample_iterations must be positive: {sample_iterations}")

        y = InputHasher.hash_to_int(b"calibration")
        start_time = time.perf_counter()
        for _ in range(sample_iterations):
            y = group.square(y)
        elapsed = time.perf_counter() - start_time

        rate = sample_iterations / max(elapsed, 1e-9)
        logger.info("Calibrated %.0f squarings/second over %d squarings", rate, sample_iterations)
        return rate
