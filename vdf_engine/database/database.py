import logging
from typing import Any

from sqlalchemy import create_engine, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from .constants import DATABASE_URL

logger = logging.getLogger(__name__)

# Global variable to hold the singleton engine
_engine = None


def get_engine() -> Engine:
    """
    Creates and returns a singleton SQLAlchemy engine connected to the database specified by DATABASE_URL.

    :return: SQLAlchemy Engine instance.
    :rtype: sqlalchemy.engine.Engine
    """
    global _engine
    if _engine is None:
        _engine = create_engine(DATABASE_URL)
    return _engine


Base = declarative_base()  # Single instance of Base


def get_orm_base():
    return Base


def save_instance(instance: Any) -> None:
    """
    Save an instance of an ORM model to the database.

    :param instance: The ORM model instance to save.
    """
    Session = sessionmaker(bind=get_engine(), expire_on_commit=False)
    session = Session()

    try:
        session.add(instance)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to save %r", instance)
        raise
    finally:
        session.close()


def initialize_database() -> None:
    """
    Creates all tables defined in the ORM models.
    """
    from .entity import ProofEntity  # noqa: F401  registers the table on Base

    engine = get_engine()
    logger.info("Initializing the database at %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(engine)
