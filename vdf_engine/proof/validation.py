import operator

from ..errors import InvalidIterationCount
from ..protocol_constants import MAX_ITERATIONS, MIN_ITERATIONS


def validate_iterations(t) -> int:
    """Check t against the protocol range. Shared by builder and verifier.

    Any integer type is accepted, including gmpy2 mpz.

    Args:
        t: The iteration count

    Returns:
        int: t as a Python int

    Raises:
        InvalidIterationCount: If t is not an integer in [MIN_ITERATIONS, MAX_ITERATIONS]
    """
    if isinstance(t, bool):
        raise InvalidIterationCount(t, MIN_ITERATIONS, MAX_ITERATIONS)
    try:
        value = operator.index(t)
    except TypeError:
        raise InvalidIterationCount(t, MIN_ITERATIONS, MAX_ITERATIONS) from None
    if value < MIN_ITERATIONS or value > MAX_ITERATIONS:
        raise InvalidIterationCount(t, MIN_ITERATIONS, MAX_ITERATIONS)
    return value
