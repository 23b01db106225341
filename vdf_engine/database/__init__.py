"""Persistence of proofs in their transport encoding.

DatabaseService lives in ``vdf_engine.database.DatabaseService``; it depends on
the converters, which in turn import this package's entities.
"""

from .database import get_engine, get_orm_base, initialize_database, save_instance

__all__ = ["get_engine", "get_orm_base", "initialize_database", "save_instance"]
