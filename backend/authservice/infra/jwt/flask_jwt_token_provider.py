# authservice/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, cast

from authservice.services._shared.ports import TokenProvider


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Adapter for Flask-JWT-Extended.

    .. note::
       Requires an active Flask app context with ``JWT_SECRET_KEY`` and
       ``JWT_ALGORITHM`` configured.
    """

    def _merge_claims(self, base: dict[str, Any] | None, extra: dict[str, Any]) -> dict[str, Any]:
        """Merge claim dictionaries without mutating inputs."""
        merged = dict(base or {})
        merged.update(extra)
        return merged

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        from flask_jwt_extended import create_access_token as _create_access

        return cast(
            str,
            _create_access(
                identity=identity,
                additional_claims=additional_claims or {},
                expires_delta=expires_delta,
            ),
        )

    def create_refresh_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
        jti: str,
        expires_at: datetime | None = None,
    ) -> str:
        # The jti is the id of the stored refresh record; it must survive encoding.
        from flask_jwt_extended import create_refresh_token as _create_refresh
        from flask_jwt_extended import decode_token as _decode

        extra: dict[str, Any] = {"jti": jti}
        delta: timedelta | bool | None = expires_delta
        if expires_at is not None:
            # Claim overrides are applied after the library's own exp.
            extra["exp"] = int(expires_at.timestamp())
            delta = False

        token = cast(
            str,
            _create_refresh(
                identity=identity,
                additional_claims=self._merge_claims(additional_claims, extra),
                expires_delta=delta,
            ),
        )

        decoded = cast(dict[str, Any], _decode(token))
        if decoded["jti"] != jti:
            raise RuntimeError("Refresh token jti mismatch after creation.")
        if expires_at is not None and decoded["exp"] != extra["exp"]:
            raise RuntimeError("Refresh token exp mismatch after creation.")

        return token

    def decode(self, token: str) -> dict[str, Any]:
        from flask_jwt_extended import decode_token

        return cast(dict[str, Any], decode_token(token))

    def get_jti(self, token: str) -> str:
        return cast(str, self.decode(token)["jti"])

    def get_subject(self, token: str) -> str:
        return cast(str, self.decode(token)["sub"])

    def get_token_type(self, token: str) -> str:
        # Flask-JWT-Extended sets "type": "access" | "refresh"
        return cast(str, self.decode(token)["type"])

    def get_expires_at(self, token: str) -> datetime:
        exp = int(self.decode(token)["exp"])
        return datetime.fromtimestamp(exp, tz=timezone.utc)
