"""User repository for persistence and lookup utilities."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from authservice.models.user import User
from authservice.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    It NEVER handles JWT or cookie creation, only DB-level user management.
    """

    model = User

    def _filterable_fields(self):
        """Whitelist fields safe for equality filters."""
        return {
            "email": User.email,
            "role": User.role,
        }

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == email.lower().strip())
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when a user with the provided email exists.

        :param email: Email address to normalise and search.
        :type email: str
        :rtype: bool
        """
        stmt = select(User.id).where(User.email == email.lower().strip())
        return bool(self.session.execute(stmt).first())
