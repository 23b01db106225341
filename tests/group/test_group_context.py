import pytest
from gmpy2 import mpz

from vdf_engine.errors import GroupConfigurationError
from vdf_engine.group import GroupContext
from vdf_engine.protocol_constants import MODULUS_HEX


def test_protocol_modulus_is_valid(group):
    """Test that the distributed modulus parses to an odd 2048-bit value."""
    assert group.get_N().bit_length() == 2048
    assert group.get_N() % 2 == 1
    assert group.get_N() == int(MODULUS_HEX, 16)


def test_from_hex_accepts_prefix():
    context = GroupContext.from_hex("0x" + MODULUS_HEX)
    assert context.get_N() == int(MODULUS_HEX, 16)


def test_unparsable_modulus():
    with pytest.raises(GroupConfigurationError):
        GroupContext.from_hex("not-hex")


def test_even_modulus_rejected():
    with pytest.raises(GroupConfigurationError):
        GroupContext(int(MODULUS_HEX, 16) + 1)


def test_modulus_must_exceed_digest_width():
    """Test that a modulus no wider than the 256-bit digest is refused."""
    with pytest.raises(GroupConfigurationError):
        GroupContext(mpz(2) ** 256 - 1)


def test_trivial_modulus_rejected():
    with pytest.raises(GroupConfigurationError):
        GroupContext(mpz(1), digest_bits=0)


def test_context_is_immutable(small_group):
    with pytest.raises(AttributeError):
        small_group._N = mpz(33)


def test_arithmetic(small_group):
    """Test square, mul and powmod under N = 21."""
    assert small_group.square(mpz(5)) == 4
    assert small_group.mul(mpz(4), mpz(16)) == 1
    assert small_group.powmod(mpz(5), mpz(4)) == 16
