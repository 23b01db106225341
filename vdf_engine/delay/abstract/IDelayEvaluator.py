from abc import ABC, abstractmethod
from typing import Optional
from ...mpc.types import MPZ
from .IProgressReporter import IProgressReporter


class IDelayEvaluator(ABC):
    """Abstract base class defining the interface for the sequential delay computation."""

    @abstractmethod
    def evaluate(self, x: MPZ, t: int, progress: Optional[IProgressReporter] = None) -> MPZ:
        """Compute x^(2^t) mod N by t sequential squarings.

        Args:
            x (MPZ): Starting value
            t (int): Number of squarings, already range-checked by the caller
            progress (Optional[IProgressReporter]): Receives chunk-boundary updates

        Returns:
            MPZ: The value after t squarings
        """
