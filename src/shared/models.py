from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class IntegerIdMixin:
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again;
    # PostgreSQL sequences never reuse values.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

class CreatedAtMixin:
    created_at = Column(DateTime, default=utcnow, nullable=False)

class EntityMixin(IntegerIdMixin, CreatedAtMixin):
    """Integer identity plus an immutable creation timestamp."""
    pass
