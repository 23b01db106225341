import logging
from typing import Optional

from ..group.abstract.IGroupContext import IGroupContext
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import PROGRESS_CHUNK_SIZE
from .ProgressReporter import NullProgressReporter
from .abstract.IDelayEvaluator import IDelayEvaluator
from .abstract.IProgressReporter import IProgressReporter

logger = logging.getLogger(__name__)


class DelayEvaluator(IDelayEvaluator):
    """Performs t sequential modular squarings, reporting progress between chunks.

    Every squaring depends on the previous result, so the loop cannot be
    shortened or split across workers without knowing the group order.
    """

    def __init__(self, group: IGroupContext, chunk_size: int = PROGRESS_CHUNK_SIZE) -> None:
        """Initialize the evaluator.

        Args:
            group (IGroupContext): Group to square in
            chunk_size (int): Squarings between progress reports
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive: {chunk_size}")
        self._group = group
        self._chunk_size = chunk_size

    def evaluate(self, x: MPZ, t: int, progress: Optional[IProgressReporter] = None) -> MPZ:
        if t < 0:
            raise ValueError(f"t must be non-negative: {t}")
        if progress is None:
            progress = NullProgressReporter()

        chunks, remainder = divmod(t, self._chunk_size)
        y = MPC.mpz(x)

        for completed in range(1, chunks + 1):
            for _ in range(self._chunk_size):
                y = self._group.square(y)
            DelayEvaluator._notify(progress, completed * 100 // chunks)

        for _ in range(remainder):
            y = self._group.square(y)

        DelayEvaluator._notify(progress, 100)
        return y

    # Private Methods
    # --------------

    @staticmethod
    def _notify(progress: IProgressReporter, percent: int) -> None:
        """Deliver an update without letting reporter failures reach the computation."""
        try:
            progress.report(percent)
        except Exception:
            logger.warning("Progress reporter failed at %d%%", percent, exc_info=True)
