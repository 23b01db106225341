import pytest

from vdf_engine.proof import Proof


@pytest.fixture
def proof():
    return Proof(y="AQ==", pi="Ag==", l="Aw==", r="BA==", iterations=1000)


def test_accessors(proof):
    assert proof.get_y() == "AQ=="
    assert proof.get_pi() == "Ag=="
    assert proof.get_l() == "Aw=="
    assert proof.get_r() == "BA=="
    assert proof.get_iterations() == 1000


def test_proof_is_immutable(proof):
    with pytest.raises(AttributeError):
        proof._iterations = 999
    with pytest.raises(AttributeError):
        proof.extra = 1


def test_equality_and_hash(proof):
    same = Proof(y="AQ==", pi="Ag==", l="Aw==", r="BA==", iterations=1000)
    other = Proof(y="AQ==", pi="Ag==", l="Aw==", r="BA==", iterations=999)
    assert proof == same
    assert hash(proof) == hash(same)
    assert proof != other


def test_repr_mentions_iterations(proof):
    assert "iterations=1000" in repr(proof)
