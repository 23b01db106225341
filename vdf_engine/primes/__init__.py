"""Prime number testing and generation module."""

from .PrimalityTester import PrimalityTester
from .PrimeChallengeGenerator import PrimeChallengeGenerator
from .abstract.IPrimalityTester import IPrimalityTester
from .abstract.IPrimeChallengeGenerator import IPrimeChallengeGenerator

__all__ = [
    "PrimalityTester",
    "PrimeChallengeGenerator",
    "IPrimalityTester",
    "IPrimeChallengeGenerator",
]
