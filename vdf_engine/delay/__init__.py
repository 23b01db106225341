"""Sequential delay evaluation module."""

from .DelayEvaluator import DelayEvaluator
from .ProgressReporter import CallbackProgressReporter, NullProgressReporter, as_progress_reporter
from .abstract.IDelayEvaluator import IDelayEvaluator
from .abstract.IProgressReporter import IProgressReporter

__all__ = [
    "DelayEvaluator",
    "CallbackProgressReporter",
    "NullProgressReporter",
    "as_progress_reporter",
    "IDelayEvaluator",
    "IProgressReporter",
]
