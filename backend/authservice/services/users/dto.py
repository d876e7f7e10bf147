"""
DTOs for UserService.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from authservice.models.user import Role

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserCreateIn:
    """
    Fields required to create a user.

    :param first_name: Given name.
    :param last_name: Family name.
    :param email: Login email (normalized to lowercase+trim by the model).
    :param password: Raw password; hashed by the model setter, never logged.
    :param role: Role granted to the new user.
    """

    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)
    role: Role = Role.CUSTOMER


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserOut:
    """
    Public-safe user payload (no password hash).
    """

    id: int
    first_name: str
    last_name: str
    email: str
    role: str
