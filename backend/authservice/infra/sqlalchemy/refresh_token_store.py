# authservice/infra/sqlalchemy/refresh_token_store.py
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from authservice.models.refresh_token import RefreshToken
from authservice.services._shared.errors import RefreshPersistenceError
from authservice.services._shared.ports import RefreshTokenRecordView, RefreshTokenStore
from authservice.uow import SQLAlchemyUnitOfWork


def _as_utc(dt: datetime) -> datetime:
    # SQLite drops tzinfo on the way back; stored values are always UTC.
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def _to_view(row: RefreshToken) -> RefreshTokenRecordView:
    return RefreshTokenRecordView(
        id=row.id, user_id=row.user_id, expires_at=_as_utc(row.expires_at)
    )


@dataclass(slots=True)
class SQLAlchemyRefreshTokenStore(RefreshTokenStore):
    """
    Relational refresh-token store.

    Each ``save`` runs in its own unit of work and returns only after commit,
    so the id handed back is durable before any token references it.

    :param uow_factory: Builds a fresh :class:`SQLAlchemyUnitOfWork`.
    """

    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = field(default=SQLAlchemyUnitOfWork)

    def save(self, *, user_id: int, expires_at: datetime) -> RefreshTokenRecordView:
        try:
            with self.uow_factory() as uow:
                row = uow.refresh_tokens.create(user_id=user_id, expires_at=expires_at)
                view = RefreshTokenRecordView(
                    id=row.id, user_id=row.user_id, expires_at=_as_utc(expires_at)
                )
        except SQLAlchemyError as exc:
            raise RefreshPersistenceError() from exc
        return view

    def get(self, record_id: int) -> RefreshTokenRecordView | None:
        with self.uow_factory() as uow:
            row = uow.refresh_tokens.get(record_id)
            return _to_view(row) if row is not None else None

    def list_for_user(self, user_id: int) -> Iterable[RefreshTokenRecordView]:
        with self.uow_factory() as uow:
            return [_to_view(row) for row in uow.refresh_tokens.list_for_user(user_id)]
