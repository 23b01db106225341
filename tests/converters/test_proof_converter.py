import hashlib

import pytest

from vdf_engine.converters import ProofConverter
from vdf_engine.database.entity.ProofEntity import ProofEntity
from vdf_engine.errors import DecodeError
from vdf_engine.proof import Proof


@pytest.fixture
def proof():
    return Proof(y="AQ==", pi="Ag==", l="Aw==", r="BA==", iterations=1000)


def test_to_dict(proof):
    assert ProofConverter.to_dict(proof) == {
        "y": "AQ==",
        "pi": "Ag==",
        "l": "Aw==",
        "r": "BA==",
        "iterations": 1000,
    }


def test_from_dict_accepts_string_iterations(proof):
    """Test that iterations serialized as a decimal string are accepted."""
    data = ProofConverter.to_dict(proof)
    data["iterations"] = "1000"
    assert ProofConverter.from_dict(data) == proof


def test_from_dict_missing_field(proof):
    data = ProofConverter.to_dict(proof)
    del data["pi"]
    with pytest.raises(DecodeError, match="pi"):
        ProofConverter.from_dict(data)


@pytest.mark.parametrize("iterations", ["abc", "-5", 1.5, None, True])
def test_from_dict_bad_iterations(proof, iterations):
    data = ProofConverter.to_dict(proof)
    data["iterations"] = iterations
    with pytest.raises(DecodeError):
        ProofConverter.from_dict(data)


def test_from_dict_non_string_field(proof):
    data = ProofConverter.to_dict(proof)
    data["y"] = 1
    with pytest.raises(DecodeError):
        ProofConverter.from_dict(data)


def test_to_entity(proof):
    """Test that the entity stores the transport fields and the input digest."""
    entity = ProofConverter.to_entity(proof, "test")

    assert isinstance(entity, ProofEntity)
    assert entity.input_hash == hashlib.sha256(b"test").hexdigest()
    assert (entity.y, entity.pi, entity.l, entity.r) == ("AQ==", "Ag==", "Aw==", "BA==")
    assert entity.iterations == 1000


def test_from_entity(proof):
    entity = ProofConverter.to_entity(proof, b"test")
    assert ProofConverter.from_entity(entity) == proof
