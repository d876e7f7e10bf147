"""Unit tests for TokenService against the stub provider."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jwt import InvalidKeyError

from authservice.services._shared.errors import TokenSigningError
from authservice.services._shared.ports import RefreshTokenRecordView, StubTokenProvider
from authservice.services.tokens.dto import AuthTokenConfig, TokenPayload
from authservice.services.tokens.service import TokenService

NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def cfg() -> AuthTokenConfig:
    return AuthTokenConfig(access_expires=timedelta(hours=1), refresh_expires=timedelta(days=365))


@pytest.fixture()
def service(cfg) -> TokenService:
    return TokenService(token_provider=StubTokenProvider(now=NOW), token_cfg=cfg)


def test_access_token_carries_subject_role_and_one_hour_expiry(service):
    token = service.generate_access_token(TokenPayload(sub="7", role="customer"))

    claims = service.tokens.decode(token)
    assert claims["sub"] == "7"
    assert claims["role"] == "customer"
    assert claims["type"] == "access"
    assert service.tokens.get_expires_at(token) == NOW + timedelta(hours=1)


def test_refresh_token_embeds_record_id_and_expiry(service):
    record = RefreshTokenRecordView(id=42, user_id=7, expires_at=NOW + timedelta(days=365))

    token = service.generate_refresh_token(TokenPayload(sub="7", role="customer"), record)

    assert service.tokens.get_jti(token) == "42"
    assert service.tokens.get_token_type(token) == "refresh"
    assert service.tokens.get_expires_at(token) == record.expires_at


def test_provider_failure_becomes_signing_error(cfg):
    class _Broken(StubTokenProvider):
        def create_access_token(self, **kwargs):
            raise InvalidKeyError("bad key")

    service = TokenService(token_provider=_Broken(), token_cfg=cfg)
    with pytest.raises(TokenSigningError) as exc_info:
        service.generate_access_token(TokenPayload(sub="1", role="customer"))
    assert isinstance(exc_info.value.__cause__, InvalidKeyError)


def test_config_rejects_access_outliving_refresh():
    with pytest.raises(ValueError):
        AuthTokenConfig(access_expires=timedelta(days=2), refresh_expires=timedelta(days=1))


def test_config_from_mapping_defaults():
    cfg = AuthTokenConfig.from_mapping({})
    assert cfg.access_expires == timedelta(hours=1)
    assert cfg.refresh_expires == timedelta(days=365)
