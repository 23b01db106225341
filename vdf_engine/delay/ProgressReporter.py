import logging
from typing import Callable, Optional, Union

from .abstract.IProgressReporter import IProgressReporter

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class CallbackProgressReporter(IProgressReporter):
    """Adapts a plain callable taking a percentage."""

    def __init__(self, callback: ProgressCallback) -> None:
        self._callback = callback

    def report(self, percent: int) -> None:
        self._callback(percent)


class NullProgressReporter(IProgressReporter):
    """Discards all updates."""

    def report(self, percent: int) -> None:
        pass


def as_progress_reporter(
    progress: Optional[Union[IProgressReporter, ProgressCallback]],
) -> IProgressReporter:
    """Normalize a reporter, a callable or None into an IProgressReporter."""
    if progress is None:
        return NullProgressReporter()
    if isinstance(progress, IProgressReporter):
        return progress
    if callable(progress):
        return CallbackProgressReporter(progress)
    raise TypeError(f"progress must be callable or an IProgressReporter, not {type(progress).__name__}")
