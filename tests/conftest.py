import pytest
from gmpy2 import mpz

from vdf_engine import DEFAULT_GROUP
from vdf_engine.group import GroupContext

# 2^127 - 1, a 127-bit Mersenne prime
MERSENNE_127 = mpz(2) ** 127 - 1


@pytest.fixture(scope="session")
def group():
    """The shared group over the protocol modulus."""
    return DEFAULT_GROUP


@pytest.fixture
def small_group():
    """Toy group N = 21 with the digest check relaxed, for hand-checkable values."""
    return GroupContext(mpz(21), digest_bits=4)


@pytest.fixture
def mersenne_prime():
    return MERSENNE_127
