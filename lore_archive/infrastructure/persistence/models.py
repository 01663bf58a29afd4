import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@table_registry.mapped_as_dataclass
class Book:
    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, init=False, primary_key=True, insert_default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(200), index=True)
    blurb: Mapped[str] = mapped_column(String(500))
    pages: Mapped[int]
    publication_year: Mapped[int] = mapped_column(index=True)
    # Character ids, stored as strings.
    characters: Mapped[List[str]] = mapped_column(JSON, default_factory=list)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, insert_default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), init=False, insert_default=utcnow, onupdate=utcnow
    )


@table_registry.mapped_as_dataclass
class Character:
    __tablename__ = "characters"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, init=False, primary_key=True, insert_default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, index=True)
    age: Mapped[int]
    # Not a foreign key: a character may outlive its species record.
    species: Mapped[uuid.UUID] = mapped_column(Uuid, index=True)
    desc: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    # Book ids, stored as strings.
    appears_in: Mapped[List[str]] = mapped_column(JSON, default_factory=list)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, insert_default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), init=False, insert_default=utcnow, onupdate=utcnow
    )


@table_registry.mapped_as_dataclass
class Poi:
    __tablename__ = "pois"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, init=False, primary_key=True, insert_default=uuid.uuid4)
    name: Mapped[Optional[str]] = mapped_column(String, index=True, default=None)
    desc: Mapped[Optional[str]] = mapped_column(String, default=None)
    type: Mapped[Optional[str]] = mapped_column(String, index=True, default=None)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, insert_default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), init=False, insert_default=utcnow, onupdate=utcnow
    )


@table_registry.mapped_as_dataclass
class Species:
    __tablename__ = "species"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, init=False, primary_key=True, insert_default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, index=True)
    desc: Mapped[str]

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, insert_default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), init=False, insert_default=utcnow, onupdate=utcnow
    )
