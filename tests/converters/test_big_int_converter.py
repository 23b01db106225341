import base64

import pytest
from gmpy2 import mpz

from vdf_engine.converters import BigIntConverter
from vdf_engine.errors import DecodeError


@pytest.mark.parametrize(
    "value, expected",
    [(0, "AA=="), (1, "AQ=="), (255, "/w=="), (256, "AQA="), (65537, "AQAB")],
)
def test_encode_known_values(value, expected):
    """Test the canonical minimal big-endian base64 form."""
    assert BigIntConverter.encode(mpz(value)) == expected


def test_encode_has_no_leading_zero_byte(group):
    raw = base64.b64decode(BigIntConverter.encode(group.get_N()))
    assert len(raw) == 256
    assert raw[0] != 0


def test_decode_known_value():
    assert BigIntConverter.decode("AQAB") == 65537


@pytest.mark.parametrize("text", ["", "!!!!", "AQA", "AQ=A"])
def test_decode_malformed(text):
    with pytest.raises(DecodeError):
        BigIntConverter.decode(text)


def test_decode_rejects_non_text():
    with pytest.raises(DecodeError):
        BigIntConverter.decode(None)
