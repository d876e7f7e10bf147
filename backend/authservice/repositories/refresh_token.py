"""Refresh-token record repository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select

from authservice.models.refresh_token import RefreshToken
from authservice.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    """Persistence-only repository for :class:`RefreshToken` records."""

    model = RefreshToken

    def _filterable_fields(self):
        return {"user_id": RefreshToken.user_id}

    def create(self, *, user_id: int, expires_at: datetime) -> RefreshToken:
        """Insert one record and flush so its ``id`` is assigned.

        :param user_id: Owning user id.
        :param expires_at: Absolute expiry (timezone-aware UTC).
        :returns: The flushed record.
        """
        return self.add(RefreshToken(user_id=user_id, expires_at=expires_at))

    def list_for_user(self, user_id: int) -> list[RefreshToken]:
        """Return every record owned by ``user_id`` ordered by id."""
        stmt = (
            select(RefreshToken)
            .where(RefreshToken.user_id == user_id)
            .order_by(RefreshToken.id.asc())
        )
        return list(self.session.execute(stmt).scalars().all())
