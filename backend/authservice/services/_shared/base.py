# authservice/services/_shared/base.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from authservice.core import errors as api_errors
from authservice.services._shared.errors import (
    ConflictError,
    RefreshPersistenceError,
    ServiceError,
    TokenSigningError,
)
from authservice.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    """

    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide the read-write unit of work factory.
    * Centralize domain -> API error translation.
    * Offer a single clock (``now_utc``) so tests can freeze time.

    Notes
    -----
    - Services must never touch the global session; always use a Unit of Work.
    - Services never import Flask request objects.
    """

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        uow_factory: Callable[[], SQLAlchemyUnitOfWork] | None = None,
    ) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (tracing).
        :param uow_factory: Optional factory returning a unit of work; defaults
            to :class:`SQLAlchemyUnitOfWork` on the Flask-scoped session.
        """
        self.ctx = ctx or ServiceContext()
        self._uow_factory = uow_factory or SQLAlchemyUnitOfWork

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: SQLAlchemyUnitOfWork
        """
        return self._uow_factory()

    # ------------------------------ Clock -----------------------------------

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(timezone.utc)

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, ConflictError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc))

        if isinstance(exc, RefreshPersistenceError):
            # → 503 Service Unavailable
            return api_errors.ServiceUnavailable(str(exc))

        if isinstance(exc, TokenSigningError):
            # → 500 Internal Server Error
            return api_errors.APIError(
                message=str(exc),
                status_code=500,
                code="token_signing_failed",
            )

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(
                message=str(exc),
                status_code=400,
                code="bad_request",
            )

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
