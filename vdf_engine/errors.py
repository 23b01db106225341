"""Error kinds raised by the VDF engine.

A proof that decodes cleanly but fails the verification equation is not an
error: ``verify`` returns ``False`` for it.
"""


class VDFError(Exception):
    """Base class for all VDF engine errors."""


class InvalidIterationCount(VDFError, ValueError):
    """The iteration count lies outside the accepted protocol range."""

    def __init__(self, iterations, minimum: int, maximum: int) -> None:
        self.iterations = iterations
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Invalid iterations: {iterations} (expected {minimum}..{maximum})"
        )


class PrimeGenerationExhausted(VDFError):
    """No prime was found within the attempt budget. Safe to retry."""

    def __init__(self, bits: int, attempts: int) -> None:
        self.bits = bits
        self.attempts = attempts
        super().__init__(f"Failed to generate a {bits}-bit prime in {attempts} attempts")


class DecodeError(VDFError, ValueError):
    """A proof field could not be decoded from its transport encoding."""


class InvalidProofPrime(VDFError):
    """The challenge prime l carried by a proof is too short or composite."""


class GroupConfigurationError(VDFError):
    """The group modulus is unusable. The engine cannot operate without it."""
