"""Unit of Work abstractions and the SQLAlchemy-backed implementation.

Services depend on :class:`UnitOfWork`; :class:`SQLAlchemyUnitOfWork` binds the
user and refresh-token repositories to one Flask-scoped session.
"""

from .base import UnitOfWork
from .sqlalchemy_uow import SQLAlchemyUnitOfWork

__all__ = [
    "UnitOfWork",
    "SQLAlchemyUnitOfWork",
]
