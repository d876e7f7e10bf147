"""Server-side record backing an issued refresh token."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authservice.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .user import User


class RefreshToken(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Refresh-token metadata keyed by the id embedded in the token's ``jti``.

    Fields
    ------
    user_id : int
        Owning user (cascade-deleted with it).
    expires_at : datetime
        Absolute expiry (UTC). Matches the ``exp`` claim of the issued token.
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user: Mapped[User] = relationship(back_populates="refresh_tokens")

    __table_args__ = (Index("ix_refresh_tokens_user_id", "user_id"),)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return ``True`` once ``expires_at`` is reached.

        Naive datetimes (SQLite drops tzinfo) are read as UTC.
        """
        current = now or datetime.now(timezone.utc)
        expires = self.expires_at
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=timezone.utc)
        return expires <= current
