"""
Unit tests for the refresh-token stores.

Covers the relational adapter against the transactional SQLite session and
the in-memory double used by service tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from authservice.infra.sqlalchemy.refresh_token_store import SQLAlchemyRefreshTokenStore
from authservice.models import RefreshToken
from authservice.services._shared.errors import RefreshPersistenceError
from authservice.services._shared.ports import InMemoryRefreshTokenStore
from authservice.uow import SQLAlchemyUnitOfWork
from tests.factories.user import UserFactory


def _expiry(days: int = 365) -> datetime:
    return datetime(2030, 6, 1, tzinfo=timezone.utc) + timedelta(days=days)


class TestSQLAlchemyRefreshTokenStore:
    @pytest.fixture()
    def store(self, session) -> SQLAlchemyRefreshTokenStore:
        return SQLAlchemyRefreshTokenStore()

    def test_save_persists_and_returns_view(self, store, session):
        user = UserFactory()
        session.flush()

        view = store.save(user_id=user.id, expires_at=_expiry())

        row = session.get(RefreshToken, view.id)
        assert row is not None
        assert row.user_id == user.id
        assert view.user_id == user.id
        assert view.expires_at == _expiry()

    def test_get_returns_utc_aware_view(self, store, session):
        user = UserFactory()
        session.flush()
        saved = store.save(user_id=user.id, expires_at=_expiry())

        fetched = store.get(saved.id)
        assert fetched == saved
        assert fetched.expires_at.tzinfo is not None
        assert store.get(saved.id + 1000) is None

    def test_list_for_user_in_creation_order(self, store, session):
        user = UserFactory()
        other = UserFactory()
        session.flush()
        a = store.save(user_id=user.id, expires_at=_expiry(1))
        store.save(user_id=other.id, expires_at=_expiry(2))
        b = store.save(user_id=user.id, expires_at=_expiry(3))

        assert [v.id for v in store.list_for_user(user.id)] == [a.id, b.id]

    def test_database_failure_becomes_persistence_error(self, session):
        class _BrokenUoW(SQLAlchemyUnitOfWork):
            def commit(self) -> None:
                raise OperationalError("COMMIT", {}, Exception("database is locked"))

        store = SQLAlchemyRefreshTokenStore(uow_factory=_BrokenUoW)
        user = UserFactory()
        session.flush()

        with pytest.raises(RefreshPersistenceError) as exc_info:
            store.save(user_id=user.id, expires_at=_expiry())
        assert isinstance(exc_info.value.__cause__, OperationalError)


class TestInMemoryRefreshTokenStore:
    def test_ids_are_sequential(self):
        store = InMemoryRefreshTokenStore()
        first = store.save(user_id=1, expires_at=_expiry())
        second = store.save(user_id=1, expires_at=_expiry())
        assert (first.id, second.id) == (1, 2)

    def test_get_and_list(self):
        store = InMemoryRefreshTokenStore()
        a = store.save(user_id=1, expires_at=_expiry())
        store.save(user_id=2, expires_at=_expiry())
        assert store.get(a.id) == a
        assert store.get(99) is None
        assert list(store.list_for_user(1)) == [a]
