from abc import ABC, abstractmethod


class IProgressReporter(ABC):
    """Abstract base class for receiving progress of a long computation."""

    @abstractmethod
    def report(self, percent: int) -> None:
        """Receive a progress update.

        Called synchronously between chunks of work; the computation resumes
        once this returns. Values never decrease and the last one is 100.

        Args:
            percent (int): Completion percentage in 0..100
        """
