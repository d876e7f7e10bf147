"""
authservice.services._shared.ports
==================================

Collection of *ports* (hexagonal interfaces) for token issuance and
refresh-token persistence.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for signing and decoding
    tokens, plus :class:`~.StubTokenProvider` for unit tests.

- :mod:`refresh_token_store`:
    Defines :class:`~.RefreshTokenStore` and :class:`~.RefreshTokenRecordView`,
    plus :class:`~.InMemoryRefreshTokenStore`.

Concrete adapters (flask-jwt-extended, SQLAlchemy) live under
``authservice.infra`` and are injected into services explicitly.
"""

from __future__ import annotations

from .refresh_token_store import (
    InMemoryRefreshTokenStore,
    RefreshTokenRecordView,
    RefreshTokenStore,
)
from .token_provider import StubTokenProvider, TokenProvider

__all__ = [
    "TokenProvider",
    "StubTokenProvider",
    "RefreshTokenStore",
    "RefreshTokenRecordView",
    "InMemoryRefreshTokenStore",
]
