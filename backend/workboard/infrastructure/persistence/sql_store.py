"""
SQL key-value store.

One row per key in ``key_value_entries``, through SQLModel so any
SQLAlchemy URL works (SQLite by default).
"""

from sqlalchemy import Engine, Text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Column, Field, Session, SQLModel, create_engine

from workboard.domain.shared.base import KeyValueStore
from workboard.domain.shared.exceptions import PersistenceError


class KeyValueEntry(SQLModel, table=True):
    """A stored key and its serialized value."""

    __tablename__ = "key_value_entries"

    key: str = Field(primary_key=True, max_length=255)
    value: str = Field(sa_column=Column(Text, nullable=False))


class SqlKeyValueStore(KeyValueStore):
    def __init__(self, engine: Engine) -> None:
        """
        Initialize the store and create its table if needed.

        Args:
            engine: SQLAlchemy engine to read and write through
        """
        self._engine = engine
        SQLModel.metadata.create_all(engine, tables=[KeyValueEntry.__table__])

    @classmethod
    def from_url(cls, database_url: str) -> "SqlKeyValueStore":
        return cls(create_engine(database_url, echo=False))

    def get(self, key: str) -> str | None:
        try:
            with Session(self._engine) as session:
                entry = session.get(KeyValueEntry, key)
                return entry.value if entry is not None else None
        except SQLAlchemyError as e:
            raise PersistenceError("get", key, str(e)) from e

    def set(self, key: str, value: str) -> None:
        try:
            with Session(self._engine) as session:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    entry = KeyValueEntry(key=key, value=value)
                else:
                    entry.value = value
                session.add(entry)
                session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError("set", key, str(e)) from e

    def delete(self, key: str) -> None:
        try:
            with Session(self._engine) as session:
                entry = session.get(KeyValueEntry, key)
                if entry is not None:
                    session.delete(entry)
                    session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError("delete", key, str(e)) from e
