"""Converters for proofs and their fields."""

from .big_int_converter import BigIntConverter
from .proof_converter import ProofConverter

__all__ = ["BigIntConverter", "ProofConverter"]
