from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from vdf_engine.converters import ProofConverter
from vdf_engine.database import get_orm_base
from vdf_engine.database.DatabaseService import DatabaseService
from vdf_engine.database.entity.ProofEntity import ProofEntity
from vdf_engine.hashing import InputHasher
from vdf_engine.proof import Proof


def make_entity(iterations=1000):
    return ProofEntity(
        input_hash="9f86d081",  # Example digest prefix
        y="AQ==",
        pi="Ag==",
        l="Aw==",
        r="BA==",
        iterations=iterations,
    )


# Setup in-memory SQLite database for testing
@pytest.fixture(scope="module")
def engine():
    engine = create_engine("sqlite:///:memory:")
    Base = get_orm_base()
    Base.metadata.create_all(engine)  # Create tables
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_database(engine):
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


def test_proof_entity_save(test_database):
    """Test the saving functionality of ProofEntity."""
    entity = make_entity(iterations=10_000_000)

    test_database.add(entity)
    test_database.commit()

    saved_entity = test_database.query(ProofEntity).filter_by(id=entity.id).first()
    assert saved_entity is not None, "Entity was not saved."
    assert saved_entity.request_id is None
    assert saved_entity.input_hash == "9f86d081"
    assert saved_entity.l == "Aw=="
    assert saved_entity.iterations == 10_000_000


def test_save_proofs_through_converter(engine, test_database):
    """Test that DatabaseService.save_proofs converts and commits each proof."""
    proofs = [
        Proof(y="AQ==", pi="Ag==", l="Aw==", r="BA==", iterations=1000),
        Proof(y="BQ==", pi="Bg==", l="Bw==", r="CA==", iterations=2000),
    ]
    with patch("vdf_engine.database.database.get_engine", return_value=engine):
        entities = DatabaseService.save_proofs(proofs, "test", request_id="req-1")

    assert [e.iterations for e in entities] == [1000, 2000]
    saved = test_database.query(ProofEntity).filter(ProofEntity.id.in_({e.id for e in entities})).all()
    assert len(saved) == 2
    assert {s.request_id for s in saved} == {"req-1"}
    assert {s.input_hash for s in saved} == {InputHasher.digest("test").hex()}
    assert sorted((ProofConverter.from_entity(s) for s in saved), key=lambda p: p.get_iterations()) == proofs


def test_save_proofs_empty(engine):
    with patch("vdf_engine.database.database.get_engine", return_value=engine):
        assert DatabaseService.save_proofs([], "test") == []


def test_request_id_is_stored(test_database):
    entity = ProofConverter.to_entity(
        Proof(y="AQ==", pi="Ag==", l="Aw==", r="BA==", iterations=1000), b"test", request_id="req-2"
    )
    test_database.add(entity)
    test_database.commit()

    saved = test_database.query(ProofEntity).filter_by(id=entity.id).first()
    assert saved.request_id == "req-2"


def test_proof_entity_repr():
    entity = make_entity()
    assert repr(entity) == f"<ProofEntity(id={entity.id}, request_id=None, iterations=1000)>"
