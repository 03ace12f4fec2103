"""SQLAlchemy declarative Base and shared model configuration."""

import itertools
import os
import re
import time
from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator

# Nested document fields: JSONB on PostgreSQL, generic JSON elsewhere (sqlite in tests).
JSONDocument = JSON().with_variant(JSONB(), "postgresql")

OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")

# ObjectId layout: 4-byte seconds timestamp, 5-byte per-process random, 3-byte counter.
_PROCESS_RANDOM = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def generate_object_id() -> str:
    """Return a new 24-hex-char identifier that sorts by creation time within a process."""
    ts = int(time.time()) & 0xFFFFFFFF
    count = next(_counter) & 0xFFFFFF
    raw = ts.to_bytes(4, "big") + _PROCESS_RANDOM + count.to_bytes(3, "big")
    return raw.hex()


def is_object_id(value: object) -> bool:
    return isinstance(value, str) and OBJECT_ID_RE.match(value) is not None


def utcnow() -> datetime:
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp. Values read back without an offset (SQLite) are tagged UTC."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass
