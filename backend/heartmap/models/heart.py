"""
HeartMap Backend — Heart SQLAlchemy Model
==========================================

What:  ORM model representing the `hearts` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SqlHeartStore for inserts and listing, and by Alembic.
When:  Instantiated once per created marker; queried when listing markers.

Table Design:
    - UUID primary key assigned on insert
    - type: constrained to the HeartType values (CHECK constraint)
    - country_name / country_code: filled by enrichment, with sentinel defaults
    - timestamp: UTC, assigned by the service at write time

    Index on timestamp DESC serves the only read pattern: newest first.
"""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from heartmap.database import Base


class HeartType(str, enum.Enum):
    """The fixed set of marker kinds a client may drop on the map."""

    RED = "redHeart"
    SILVER = "silverHeart"
    YELLOW = "yellowHeart"


DEFAULT_COUNTRY_NAME = "Unknown"
DEFAULT_COUNTRY_CODE = "XX"


class Heart(Base):
    """
    A geotagged heart marker.

    Lifecycle:
        Created exactly once by POST /api/hearts and never modified.
        There is no update or delete path in the API.
    """

    __tablename__ = "hearts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Stored as the enum value ("redHeart"), not the member name ("RED")
    type: Mapped[HeartType] = mapped_column(
        Enum(
            HeartType,
            name="heart_type",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            length=20,
            values_callable=lambda kinds: [k.value for k in kinds],
        ),
        nullable=False,
    )

    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    message: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    country_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=DEFAULT_COUNTRY_NAME,
    )

    # ISO 3166-1 alpha-2, uppercased, or the "XX" sentinel
    country_code: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        default=DEFAULT_COUNTRY_CODE,
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_hearts_timestamp", timestamp.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<Heart(id={self.id}, type='{self.type}', "
            f"country_code='{self.country_code}', timestamp='{self.timestamp}')>"
        )
