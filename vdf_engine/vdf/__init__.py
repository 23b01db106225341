"""Verifiable delay function facade."""

from .VerifiableDelayFunction import VerifiableDelayFunction

__all__ = ["VerifiableDelayFunction"]
