"""Client ORM — persisted Client records.

Invariants:
    - id is a 24-char lowercase hex token, assigned on insert
    - created_at is assigned on insert and never updated
    - email is unique and non-nullable; name is nullable
"""

import secrets
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def generate_client_id() -> str:
    """24 hexadecimal characters (12 random bytes)."""
    return secrets.token_hex(12)


class Client(Base):
    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=generate_client_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )

    def __repr__(self) -> str:
        return f"<Client id={self.id} email={self.email}>"
