"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never depend on Flask or HTTP.
Each failure kind of the registration workflow has its own class so callers
can tell them apart without inspecting messages:

- :class:`DuplicateEmailError`: the email is already registered.
- :class:`UserCreationError`: the user row could not be built (invalid data,
  hashing failure).
- :class:`RefreshPersistenceError`: the refresh-token record was not stored.
- :class:`TokenSigningError`: a token could not be signed.

The translation to HTTP responses (RFC 7807) is handled by
``authservice/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, *markers: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL reports the constraint name (``uq_users_email``); SQLite reports
    the column (``users.email``). Pass every marker that identifies the
    constraint on the supported dialects.

    :param exc: The exception raised by SQLAlchemy during flush/commit.
    :param markers: Constraint names or ``table.column`` strings to look for.
    :returns: ``True`` if any marker appears in the driver message.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return any(marker.lower() in message for marker in markers)


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories, adapters or domain logic.
    - The API layer translates them to ``APIError`` via ``BaseService``.
    """


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :param detail: Short human-readable explanation.
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self) -> None:
        super().__init__("User", "email already in use")


class UserCreationError(ServiceError):
    """Raised when a user cannot be built from the submitted fields."""

    def __init__(self, message: str = "User could not be created") -> None:
        super().__init__(message)


class RefreshPersistenceError(ServiceError):
    """Raised when a refresh-token record cannot be persisted."""

    def __init__(self, message: str = "Refresh token could not be persisted") -> None:
        super().__init__(message)


class TokenSigningError(ServiceError):
    """Raised when an access or refresh token cannot be signed."""

    def __init__(self, message: str = "Token could not be issued") -> None:
        super().__init__(message)
