# authservice/services/tokens/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """
    Claims shared by the access and refresh tokens of one registration.

    :param sub: User id as a string.
    :param role: User role.
    """

    sub: str
    role: str

    def claims(self) -> dict[str, Any]:
        """Return the custom claims carried next to ``sub``."""
        return {"role": self.role}


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime (and access cookie max-age).
    :param refresh_expires: Refresh token lifetime (and refresh cookie
        max-age, and refresh record expiry).
    """

    access_expires: timedelta
    refresh_expires: timedelta

    def __post_init__(self) -> None:
        if self.access_expires >= self.refresh_expires:
            raise ValueError("Access tokens must expire before refresh tokens.")

    @classmethod
    def from_mapping(cls, config: Any) -> AuthTokenConfig:
        """Build from a Flask config mapping (``JWT_*_TOKEN_EXPIRES`` keys)."""
        return cls(
            access_expires=config.get("JWT_ACCESS_TOKEN_EXPIRES", timedelta(hours=1)),
            refresh_expires=config.get("JWT_REFRESH_TOKEN_EXPIRES", timedelta(days=365)),
        )
