# authservice/services/tokens/service.py
from __future__ import annotations

from jwt import PyJWTError

from authservice.services._shared.errors import TokenSigningError
from authservice.services._shared.ports.refresh_token_store import RefreshTokenRecordView
from authservice.services._shared.ports.token_provider import TokenProvider
from authservice.services.tokens.dto import AuthTokenConfig, TokenPayload


class TokenService:
    """
    Issue the access/refresh token pair for a subject.

    Access tokens are stateless: nothing is stored and they expire after
    ``cfg.access_expires``. Refresh tokens are bound to a persisted
    :class:`RefreshTokenRecordView`: the record id travels as the ``jti`` claim
    and the record's ``expires_at`` becomes the ``exp`` claim, so the token and
    its server-side record always expire together.
    """

    def __init__(self, *, token_provider: TokenProvider, token_cfg: AuthTokenConfig) -> None:
        self.tokens = token_provider
        self.cfg = token_cfg

    def generate_access_token(self, payload: TokenPayload) -> str:
        """
        Sign a short-lived access token.

        :raises TokenSigningError: If the provider fails to sign.
        """
        try:
            return self.tokens.create_access_token(
                identity=payload.sub,
                additional_claims=payload.claims(),
                expires_delta=self.cfg.access_expires,
            )
        except (PyJWTError, RuntimeError) as exc:
            raise TokenSigningError("Access token could not be issued") from exc

    def generate_refresh_token(
        self, payload: TokenPayload, record: RefreshTokenRecordView
    ) -> str:
        """
        Sign a refresh token correlated with an already persisted record.

        :param payload: Subject and role claims.
        :param record: The stored record; must exist before this call.
        :raises TokenSigningError: If the provider fails to sign or the
            embedded ``jti`` does not match the record id.
        """
        try:
            return self.tokens.create_refresh_token(
                identity=payload.sub,
                additional_claims=payload.claims(),
                jti=str(record.id),
                expires_at=record.expires_at,
            )
        except (PyJWTError, RuntimeError) as exc:
            raise TokenSigningError("Refresh token could not be issued") from exc
