"""
UserService
===========

Creates and persists ``User`` rows. Owns uniqueness enforcement on the email
natural key and delegates password hashing to the model setter.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from authservice.models.user import User
from authservice.repositories.user import UserRepository
from authservice.services._shared.base import BaseService
from authservice.services._shared.errors import (
    DuplicateEmailError,
    UserCreationError,
    violates,
)
from authservice.services.users.dto import UserCreateIn, UserOut

EMAIL_CONSTRAINT_MARKERS = ("uq_users_email", "users.email")


class UserService(BaseService):
    """Persist new users inside a read-write unit of work."""

    def create(self, dto: UserCreateIn) -> UserOut:
        """
        Create a user and commit it.

        :param dto: Creation input.
        :type dto: :class:`UserCreateIn`
        :returns: The created user with its database-assigned id.
        :rtype: :class:`UserOut`
        :raises DuplicateEmailError: When the email is already registered,
            including a concurrent insert detected by the unique constraint.
        :raises UserCreationError: When the fields are rejected by the model
            or the password cannot be hashed.
        """
        try:
            with self.rw_uow() as uow:
                repo: UserRepository = uow.users
                if repo.exists_by_email(dto.email):
                    raise DuplicateEmailError()

                try:
                    user = User(
                        first_name=dto.first_name,
                        last_name=dto.last_name,
                        email=dto.email,
                        role=dto.role,
                    )
                    user.password = dto.password  # model setter hashes
                except ValueError as exc:
                    raise UserCreationError(str(exc)) from exc

                repo.add(user)
                out = self._to_user_out(user)
        except IntegrityError as exc:
            if violates(exc, *EMAIL_CONSTRAINT_MARKERS):
                raise DuplicateEmailError() from exc
            raise
        return out

    # ------------------------------------------------------------------ #
    # Mapping
    # ------------------------------------------------------------------ #

    @staticmethod
    def _to_user_out(user: User) -> UserOut:
        return UserOut(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
        )
