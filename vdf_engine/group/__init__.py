"""Hidden-order group module."""

from .GroupContext import GroupContext
from .abstract.IGroupContext import IGroupContext

__all__ = ["GroupContext", "IGroupContext"]
