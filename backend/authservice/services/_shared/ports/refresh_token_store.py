from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class RefreshTokenRecordView:
    """
    Read-model for a persisted refresh-token record.

    :ivar id: Record identifier, embedded as ``jti`` in the refresh token.
    :ivar user_id: Owning user id.
    :ivar expires_at: Absolute expiration (UTC).
    """

    id: int
    user_id: int
    expires_at: datetime


class RefreshTokenStore(Protocol):
    """
    Store for refresh-token records.

    ``save`` MUST return only after the record is durable: the returned id is
    embedded in a token that is handed to the client right afterwards.
    """

    def save(self, *, user_id: int, expires_at: datetime) -> RefreshTokenRecordView:
        """Persist one record and return it with its assigned id."""

    def get(self, record_id: int) -> RefreshTokenRecordView | None:
        """Fetch a single record (if present)."""

    def list_for_user(self, user_id: int) -> Iterable[RefreshTokenRecordView]:
        """List the records owned by ``user_id`` in creation order."""


class InMemoryRefreshTokenStore(RefreshTokenStore):
    """
    In-memory record store with sequential ids.

    .. note::
       A lock keeps id assignment consistent when shared across threads.
    """

    def __init__(self) -> None:
        self._records: dict[int, RefreshTokenRecordView] = {}
        self._seq = 0
        self._lock = threading.Lock()

    def save(self, *, user_id: int, expires_at: datetime) -> RefreshTokenRecordView:
        with self._lock:
            self._seq += 1
            view = RefreshTokenRecordView(id=self._seq, user_id=user_id, expires_at=expires_at)
            self._records[view.id] = view
            return view

    def get(self, record_id: int) -> RefreshTokenRecordView | None:
        return self._records.get(record_id)

    def list_for_user(self, user_id: int):
        for record_id in sorted(self._records):
            view = self._records[record_id]
            if view.user_id == user_id:
                yield view
