"""Generic repository base for SQLAlchemy 2.x.

Repositories are persistence-only:

- They never implement use cases or domain policies.
- They never call commit/rollback; services own the Unit of Work.
- ``add`` flushes so that database-assigned primary keys are available to the
  caller immediately (the registration flow needs the user and refresh-record
  ids before the transaction ends).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, and_, func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from authservice.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define ``model``. They MAY override
    ``_filterable_fields`` to whitelist equality filters.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        When no explicit session is provided the repository falls back to the
        Flask-scoped session exposed by ``authservice.core.extensions``.

        :param session: Session shared across the Unit of Work scope.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the injected session, or the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _pk_attr(self) -> InstrumentedAttribute[Any] | None:
        """Return ``model.id`` when present."""
        return getattr(self.model, "id", None)

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist mapping of public filter keys to model attributes.

        Unknown keys passed to :meth:`find_one` / :meth:`exists` are ignored.
        """
        return {}

    def _apply_equality_filters(
        self,
        stmt: Select[Any],
        filters: Mapping[str, Any] | None,
    ) -> Select[Any]:
        if not filters:
            return stmt
        allowed = self._filterable_fields()
        clauses = [allowed[k] == v for k, v in filters.items() if k in allowed]
        return stmt.where(and_(*clauses)) if clauses else stmt

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage a new entity for persistence and flush to materialize the PK.

        :param instance: New entity instance.
        :type instance: E
        :returns: The same instance after ``flush()``.
        :rtype: E
        """
        self.session.add(instance)
        self.flush()
        return instance

    def get(self, entity_id: Any) -> E | None:
        """Retrieve a single entity by primary key.

        :param entity_id: Primary-key value.
        :returns: Entity or ``None``.
        :raises RuntimeError: If no PK attribute can be detected.
        """
        pk_attr = self._pk_attr()
        if pk_attr is None:
            raise RuntimeError("BaseRepository.get requires a detectable PK attribute.")
        stmt = select(self.model).where(pk_attr == entity_id)
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def find_one(self, **filters: Any) -> E | None:
        """Find a single entity by whitelisted equality filters."""
        stmt: Select[Any] = self._apply_equality_filters(select(self.model), filters)
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def exists(self, **filters: Any) -> bool:
        """Check existence for whitelisted equality filters."""
        stmt: Select[Any] = select(func.count()).select_from(self.model)
        stmt = self._apply_equality_filters(stmt, filters)
        return bool(self.session.execute(stmt).scalar())

    def flush(self) -> None:
        """Flush pending changes to the database without committing."""
        self.session.flush()
