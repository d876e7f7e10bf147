"""User model: the identity created by self-registration."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from werkzeug.security import check_password_hash, generate_password_hash

from authservice.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .refresh_token import RefreshToken


class Role(str, Enum):
    """Authorization role carried in issued tokens."""

    CUSTOMER = "customer"
    MANAGER = "manager"
    ADMIN = "admin"


class User(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Registered identity.

    Fields
    ------
    first_name : str
        Given name as submitted at registration (trimmed).
    last_name : str
        Family name as submitted at registration (trimmed).
    email : str
        Login email. Stored normalized (lowercase, trimmed), unique.
    role : str
        One of :class:`Role`; self-registered users are ``customer``.
    password_hash : str
        Hashed password (write-only setter via ``password``).
    refresh_tokens : list[RefreshToken]
        Refresh-token records owned by this user.
    """

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=Role.CUSTOMER.value)
    password_hash: Mapped[str] = mapped_column(String(254), nullable=False)

    refresh_tokens: Mapped[list[RefreshToken]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        Index("ix_users_email", "email"),
    )

    # -------------------- Password API --------------------
    @property
    def password(self) -> Any:  # pragma: no cover - explicit write-only contract
        """
        Disallow reading passwords.

        :raises AttributeError: Always, to ensure password is write-only.
        """
        raise AttributeError("Password is write-only.")

    @password.setter
    def password(self, raw: str) -> None:
        """
        Hash and set the password.

        :param raw: Plain text password to hash.
        :type raw: str
        :raises ValueError: If ``raw`` is not a non-empty string.
        """
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        self.password_hash = generate_password_hash(raw)

    def verify_password(self, raw: str) -> bool:
        """
        Verify a password against the stored hash.

        :param raw: Plain text password candidate.
        :type raw: str
        :returns: ``True`` if it matches; otherwise ``False``.
        :rtype: bool
        """
        if not self.password_hash:
            return False
        return bool(check_password_hash(self.password_hash, raw))

    # -------------------- Validators --------------------
    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        """
        Normalize and validate email.

        :raises ValueError: If email is missing or malformed.
        """
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        v = value.strip().lower()
        # Minimal sanity check; full validation happens at API layer.
        if "@" not in v or "." not in v.split("@")[-1]:
            raise ValueError("Email format looks invalid.")
        return v

    @validates("first_name", "last_name")
    def _normalize_name(self, key: str, value: str) -> str:
        """Trim names and reject blank values."""
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{key} is required.")
        return value.strip()

    @validates("role")
    def _validate_role(self, key: str, value: str | Role) -> str:
        """Accept only known roles, stored by value."""
        try:
            return Role(value).value
        except ValueError as exc:
            raise ValueError(f"Unknown role: {value!r}") from exc
