"""Shared API helpers: response shaping, timing and service wiring."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from authservice.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from authservice.infra.sqlalchemy.refresh_token_store import SQLAlchemyRefreshTokenStore
from authservice.services._shared.base import ServiceContext
from authservice.services.registration.service import RegistrationService
from authservice.services.tokens.dto import AuthTokenConfig
from authservice.services.tokens.service import TokenService
from authservice.services.users.service import UserService

F = TypeVar("F", bound=Callable[..., Any])


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]


def token_config() -> AuthTokenConfig:
    """Token lifetimes for the current application."""

    return AuthTokenConfig.from_mapping(current_app.config)


def build_registration_service(ctx: ServiceContext | None = None) -> RegistrationService:
    """Wire :class:`RegistrationService` with the production adapters.

    Must be called inside an application context.
    """

    return RegistrationService(
        user_service=UserService(ctx=ctx),
        token_service=TokenService(token_provider=JWTTokenProvider(), token_cfg=token_config()),
        refresh_store=SQLAlchemyRefreshTokenStore(),
        ctx=ctx,
    )
