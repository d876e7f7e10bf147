"""Repository package exposing persistence-layer access for the identity models."""

from __future__ import annotations

from authservice.repositories.base import BaseRepository
from authservice.repositories.refresh_token import RefreshTokenRepository
from authservice.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
