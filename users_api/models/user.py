"""User ORM — persisted form of the User entity.

Invariants:
    - id is UUID primary key, supplied by the domain User (never generated by the DB)
    - full_name is non-nullable text
    - created_at defaults to insertion time (UTC) and orders get_all results

Design Decisions:
    - Separate record class from the domain User: the frozen dataclass stays free
      of SQLAlchemy instrumentation
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from users_api.db.base import Base


class UserRecord(Base):
    """Row in the users table."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True,
    )
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
