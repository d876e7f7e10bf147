"""
RegistrationService
===================

Process-level service that registers a new identity and opens its first
session:

1. create the ``User`` (via :class:`UserService`);
2. sign a stateless access token;
3. persist a refresh-token record (via the injected :class:`RefreshTokenStore`);
4. sign the refresh token embedding that record's id.

Step 3 strictly precedes step 4. Any failure propagates as a
:class:`ServiceError` subclass; nothing is retried or compensated here.
"""

from __future__ import annotations

import logging

from authservice.core.logger import redact
from authservice.services._shared.base import BaseService, ServiceContext
from authservice.services._shared.ports.refresh_token_store import (
    RefreshTokenRecordView,
    RefreshTokenStore,
)
from authservice.services.registration.dto import RegistrationIn, RegistrationOut
from authservice.services.tokens.dto import TokenPayload
from authservice.services.tokens.service import TokenService
from authservice.services.users.dto import UserCreateIn
from authservice.services.users.service import UserService

log = logging.getLogger(__name__)


class RegistrationService(BaseService):
    """
    Orchestrates user creation and token issuance for one registration.
    """

    def __init__(
        self,
        *,
        user_service: UserService,
        token_service: TokenService,
        refresh_store: RefreshTokenStore,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its collaborators.

        :param user_service: Creates and persists users.
        :param token_service: Signs access and refresh tokens.
        :param refresh_store: Persists refresh-token records.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.users = user_service
        self.tokens = token_service
        self.refresh_store = refresh_store

    def register(self, dto: RegistrationIn) -> RegistrationOut:
        """
        Register a user and issue its token pair.

        :param dto: Validated registration input.
        :type dto: :class:`RegistrationIn`
        :returns: Created user plus both signed tokens.
        :rtype: :class:`RegistrationOut`
        :raises DuplicateEmailError: Email already registered.
        :raises UserCreationError: User fields rejected or hashing failed.
        :raises RefreshPersistenceError: Refresh record could not be stored.
        :raises TokenSigningError: A token could not be signed.
        """
        log.debug(
            "New request to register a user",
            extra={
                "body": redact(
                    {
                        "firstName": dto.first_name,
                        "lastName": dto.last_name,
                        "email": dto.email,
                        "password": dto.password,
                    }
                )
            },
        )
        user = self.users.create(
            UserCreateIn(
                first_name=dto.first_name,
                last_name=dto.last_name,
                email=dto.email,
                password=dto.password,
            )
        )
        log.info("User has been registered with user id %s", user.id, extra={"user_id": user.id})

        payload = TokenPayload(sub=str(user.id), role=user.role)
        access_token = self.tokens.generate_access_token(payload)

        record = self._persist_refresh_record(user.id)
        refresh_token = self.tokens.generate_refresh_token(payload, record)

        return RegistrationOut(
            user=user,
            access_token=access_token,
            refresh_token=refresh_token,
            refresh_token_id=record.id,
        )

    def _persist_refresh_record(self, user_id: int) -> RefreshTokenRecordView:
        """
        Store the refresh record that the refresh token will reference.

        The expiry is computed from a whole-second instant so the record's
        ``expires_at`` and the token's integer ``exp`` claim are equal.
        """
        issued_at = self.now_utc().replace(microsecond=0)
        expires_at = issued_at + self.tokens.cfg.refresh_expires
        return self.refresh_store.save(user_id=user_id, expires_at=expires_at)
