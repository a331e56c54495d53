"""
Commerce Backend — Shared Model Columns
========================================

What:  Identity and timestamp columns carried by every entity table.
How:   Declarative mixin; SQLAlchemy copies the mapped columns onto each
       model class that inherits it.

Column Design:
    - id:          UUID generated in Python (portable across PostgreSQL and SQLite)
    - created_at:  Set once on insert; every list is ordered by it (DESC)
    - updated_at:  Refreshed by every partial update
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time; all timestamps are stored in UTC."""
    return datetime.now(timezone.utc)


class EntityMixin:
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
