from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Protocol


class TokenProvider(Protocol):
    """Port for issuing and decoding signed tokens."""

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str: ...

    def create_refresh_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
        jti: str,
        expires_at: datetime | None = None,
    ) -> str:
        """
        Sign a refresh token embedding ``jti``.

        ``expires_at`` (absolute, takes precedence over ``expires_delta``) pins
        the ``exp`` claim to a value computed by the caller.
        """
        ...

    def decode(self, token: str) -> dict[str, Any]: ...

    def get_jti(self, token: str) -> str: ...

    def get_subject(self, token: str) -> str: ...

    def get_token_type(self, token: str) -> str: ...

    def get_expires_at(self, token: str) -> datetime: ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests.

    Tokens are opaque ``<type>.<identity>.<jti>.<seq>`` strings; their claims
    are kept in memory so ``decode`` works without a signing key.
    """

    def __init__(self, *, now: datetime | None = None) -> None:
        self._now = now or datetime.now(tz=timezone.utc)
        self._seq = 0
        self._issued: dict[str, dict[str, Any]] = {}

    def _mk(
        self,
        *,
        identity: str,
        ttype: str,
        exp_delta: timedelta,
        jti: str | None = None,
        additional_claims: dict[str, Any] | None = None,
        expires_at: datetime | None = None,
    ) -> str:
        self._seq += 1
        jti_value = jti or f"jti-{self._seq}"
        token = f"{ttype}.{identity}.{jti_value}.{self._seq}"
        exp_at = expires_at or self._now + exp_delta
        payload: dict[str, Any] = dict(additional_claims or {})
        payload.update(
            {
                "sub": identity,
                "type": ttype,
                "jti": jti_value,
                "exp": int(exp_at.timestamp()),
            }
        )
        self._issued[token] = payload
        return token

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        return self._mk(
            identity=identity,
            ttype="access",
            exp_delta=expires_delta or timedelta(hours=1),
            additional_claims=additional_claims,
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
        return self._mk(
            identity=identity,
            ttype="refresh",
            exp_delta=expires_delta or timedelta(days=365),
            jti=jti,
            additional_claims=additional_claims,
            expires_at=expires_at,
        )

    def decode(self, token: str) -> dict[str, Any]:
        return self._issued[token]

    def get_jti(self, token: str) -> str:
        return str(self.decode(token)["jti"])

    def get_subject(self, token: str) -> str:
        return str(self.decode(token)["sub"])

    def get_token_type(self, token: str) -> str:
        return str(self.decode(token)["type"])

    def get_expires_at(self, token: str) -> datetime:
        exp = int(self.decode(token)["exp"])
        return datetime.fromtimestamp(exp, tz=timezone.utc)
