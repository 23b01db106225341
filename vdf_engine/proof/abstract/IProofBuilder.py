from abc import ABC, abstractmethod
from typing import Optional, Union
from ...delay.abstract.IProgressReporter import IProgressReporter
from ..Proof import Proof


class IProofBuilder(ABC):
    """Abstract base class defining the interface for proof construction."""

    @abstractmethod
    def build(
        self,
        input_value: Union[bytes, str],
        t: int,
        progress: Optional[IProgressReporter] = None,
    ) -> Proof:
        """Run the delay computation on an input and prove it.

        Args:
            input_value (Union[bytes, str]): The public input
            t (int): Iteration count in [MIN_ITERATIONS, MAX_ITERATIONS]
            progress (Optional[IProgressReporter]): Receives chunk-boundary updates

        Returns:
            Proof: The proof in transport form

        Raises:
            InvalidIterationCount: If t is out of range
            PrimeGenerationExhausted: If no challenge prime was found
        """
