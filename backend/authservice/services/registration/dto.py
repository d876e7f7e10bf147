"""
DTOs for RegistrationService.

Contracts for the self-registration flow: create a ``User``, issue an access
token, persist a refresh-token record and issue the refresh token bound to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from authservice.services.users.dto import UserOut

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Input payload for the registration process (already validated).

    :param first_name: Given name.
    :type first_name: str
    :param last_name: Family name.
    :type last_name: str
    :param email: Login email (will be normalized to lowercase+trim).
    :type email: str
    :param password: Raw password, in transit only. Excluded from ``repr``.
    :type password: str
    """

    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationOut:
    """
    Output of a successful registration.

    :param user: Public-safe user payload.
    :type user: :class:`UserOut`
    :param access_token: Signed, stateless access token.
    :type access_token: str
    :param refresh_token: Signed refresh token whose ``jti`` is ``refresh_token_id``.
    :type refresh_token: str
    :param refresh_token_id: Id of the persisted refresh-token record.
    :type refresh_token_id: int
    """

    user: UserOut
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    refresh_token_id: int
