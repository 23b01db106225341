"""Proof construction and verification module."""

from .Proof import Proof
from .ProofBuilder import ProofBuilder
from .ProofVerifier import ProofVerifier
from .abstract.IProofBuilder import IProofBuilder
from .abstract.IProofVerifier import IProofVerifier

__all__ = ["Proof", "ProofBuilder", "ProofVerifier", "IProofBuilder", "IProofVerifier"]
