"""Authentication endpoints using the service layer."""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, request
from marshmallow import ValidationError

from authservice.api.deps import build_registration_service, json_response, timing
from authservice.core.logger import ensure_request_id, redact
from authservice.schemas import RegisterSchema, flatten_errors
from authservice.services._shared.base import ServiceContext
from authservice.services._shared.errors import ServiceError
from authservice.services.registration.dto import RegistrationIn, RegistrationOut

log = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()


def _set_auth_cookies(response: Response, result: RegistrationOut) -> None:
    cfg = current_app.config
    options = {
        "domain": cfg["AUTH_COOKIE_DOMAIN"],
        "secure": cfg["AUTH_COOKIE_SECURE"],
        "httponly": True,
        "samesite": "Strict",
        "path": "/",
    }
    response.set_cookie(
        cfg["ACCESS_TOKEN_COOKIE"],
        result.access_token,
        max_age=cfg["JWT_ACCESS_TOKEN_EXPIRES"],
        **options,
    )
    response.set_cookie(
        cfg["REFRESH_TOKEN_COOKIE"],
        result.refresh_token,
        max_age=cfg["JWT_REFRESH_TOKEN_EXPIRES"],
        **options,
    )


@bp.post("/register")
@timing
def register():
    """Register a new user, open its session via cookies and return its id."""

    body = request.get_json(silent=True) or {}
    try:
        data = register_schema.load(body)
    except ValidationError as err:
        errors = flatten_errors(register_schema, err.messages)
        log.error(
            "Invalid field passed during registration",
            extra={"body": redact(body), "errors": errors},
        )
        return json_response({"errors": errors}, status=400)

    service = build_registration_service(ServiceContext(request_id=ensure_request_id()))
    try:
        result = service.register(RegistrationIn(**data))
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc

    response = json_response({"id": result.user.id}, status=201)
    _set_auth_cookies(response, result)
    return response
