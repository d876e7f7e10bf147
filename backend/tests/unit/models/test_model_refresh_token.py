"""Tests for the RefreshToken model."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, func, select

from authservice.models.refresh_token import RefreshToken
from authservice.models.user import User
from tests.factories.refresh_token import RefreshTokenFactory
from tests.factories.user import UserFactory


class TestRefreshToken:
    def test_belongs_to_user(self, session):
        user = UserFactory()
        rt = RefreshTokenFactory(user=user)
        session.flush()
        assert rt.id is not None
        assert rt.user_id == user.id
        assert user.refresh_tokens == [rt]

    def test_deleted_with_user(self, session):
        rt = RefreshTokenFactory()
        session.flush()
        rt_id = rt.id
        session.delete(rt.user)
        session.flush()
        session.expire_all()
        assert session.scalar(select(func.count()).where(RefreshToken.id == rt_id)) == 0

    def test_database_cascades_on_user_delete(self, session):
        rt = RefreshTokenFactory()
        session.flush()
        rt_id, user_id = rt.id, rt.user_id

        # Bypass the ORM cascade: only ON DELETE CASCADE can remove the row.
        session.execute(delete(User).where(User.id == user_id))
        session.expire_all()

        assert session.scalar(select(func.count()).where(RefreshToken.id == rt_id)) == 0

    def test_is_expired(self):
        now = datetime(2030, 1, 1, tzinfo=timezone.utc)
        rt = RefreshToken(user_id=1, expires_at=now + timedelta(seconds=1))
        assert rt.is_expired(now) is False
        assert rt.is_expired(now + timedelta(seconds=1)) is True

    def test_is_expired_reads_naive_as_utc(self):
        now = datetime(2030, 1, 1, tzinfo=timezone.utc)
        rt = RefreshToken(user_id=1, expires_at=datetime(2029, 12, 31))
        assert rt.is_expired(now) is True
