"""Hashing of public inputs into challenge values."""

from .InputHasher import InputHasher, DIGEST_BITS

__all__ = ["InputHasher", "DIGEST_BITS"]
