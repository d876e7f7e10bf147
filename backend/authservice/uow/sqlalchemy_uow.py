"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from authservice.core.extensions import db
from authservice.repositories import RefreshTokenRepository, UserRepository
from authservice.uow.base import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy-backed UoW using the Flask-scoped session by default.

    ``users`` and ``refresh_tokens`` share one session, so everything staged
    inside the ``with`` block commits or rolls back together.
    """

    def __init__(self, *, session: Session | None = None) -> None:
        self.session: Session = session if session is not None else db.session
        self.users = UserRepository(session=self.session)
        self.refresh_tokens = RefreshTokenRepository(session=self.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # No-op: the session is lazily started on the first write.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
