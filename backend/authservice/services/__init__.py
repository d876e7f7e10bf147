"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`authservice.services` without knowing internal structure.

Re-exports
----------
- Base primitives (from ``authservice.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- User service (from ``authservice.services.users``)
    * :class:`UserService`
    * DTOs: :class:`UserCreateIn`, :class:`UserOut`

- Token service (from ``authservice.services.tokens``)
    * :class:`TokenService`
    * DTOs: :class:`TokenPayload`, :class:`AuthTokenConfig`

- Registration service (from ``authservice.services.registration``)
    * :class:`RegistrationService`
    * DTOs: :class:`RegistrationIn`, :class:`RegistrationOut`
"""

from __future__ import annotations

# Base primitives (service base + request-scoped context)
from ._shared.base import BaseService, ServiceContext

# Registration service + DTOs
from .registration.dto import RegistrationIn, RegistrationOut
from .registration.service import RegistrationService

# Token service + DTOs
from .tokens.dto import AuthTokenConfig, TokenPayload
from .tokens.service import TokenService

# User service + DTOs
from .users.dto import UserCreateIn, UserOut
from .users.service import UserService

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Users
    "UserService",
    "UserCreateIn",
    "UserOut",
    # Tokens
    "TokenService",
    "TokenPayload",
    "AuthTokenConfig",
    # Registration
    "RegistrationService",
    "RegistrationIn",
    "RegistrationOut",
]
