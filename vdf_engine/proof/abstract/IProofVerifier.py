from abc import ABC, abstractmethod
from typing import Union
from ..Proof import Proof


class IProofVerifier(ABC):
    """Abstract base class defining the interface for proof verification."""

    @abstractmethod
    def verify(self, input_value: Union[bytes, str], proof: Proof) -> bool:
        """Check a proof against an input without redoing the delay computation.

        Args:
            input_value (Union[bytes, str]): The public input
            proof (Proof): The proof to check

        Returns:
            bool: True if the proof is accepted, False if it is rejected

        Raises:
            InvalidIterationCount: If the proof's iteration count is out of range
            DecodeError: If a proof field is malformed
            InvalidProofPrime: If l is too short or composite
        """
