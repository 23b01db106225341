"""Wesolowski verifiable delay function over a fixed RSA group.

The module-level ``compute`` and ``verify`` share one read-only group built
from the protocol modulus at import time, so an unusable modulus fails here
rather than on first use.
"""

from .errors import (
    DecodeError,
    GroupConfigurationError,
    InvalidIterationCount,
    InvalidProofPrime,
    PrimeGenerationExhausted,
    VDFError,
)
from .group import GroupContext
from .proof import Proof
from .protocol_constants import MAX_ITERATIONS, MIN_ITERATIONS, MODULUS_HEX
from .vdf import VerifiableDelayFunction

DEFAULT_GROUP = GroupContext.from_hex(MODULUS_HEX)

_default_vdf = VerifiableDelayFunction(DEFAULT_GROUP)

compute = _default_vdf.compute
verify = _default_vdf.verify
estimate_iterations = VerifiableDelayFunction.estimate_iterations

__all__ = [
    "compute",
    "verify",
    "estimate_iterations",
    "Proof",
    "GroupContext",
    "VerifiableDelayFunction",
    "DEFAULT_GROUP",
    "MIN_ITERATIONS",
    "MAX_ITERATIONS",
    "VDFError",
    "InvalidIterationCount",
    "PrimeGenerationExhausted",
    "DecodeError",
    "InvalidProofPrime",
    "GroupConfigurationError",
]
