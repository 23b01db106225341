"""Multi-precision computing module."""

from .MPC import MPC
from .abstract.IMPC import IMPC
from .types import MPZ

__all__ = ["MPC", "IMPC", "MPZ"]
