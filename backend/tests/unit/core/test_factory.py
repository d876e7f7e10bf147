"""Unit tests for the application factory wiring."""

from __future__ import annotations

from werkzeug.middleware.proxy_fix import ProxyFix


def test_extensions_registered(app):
    assert {"sqlalchemy", "migrate", "flask-jwt-extended"} <= set(app.extensions)


def test_routes_mounted_under_versioned_prefix(app):
    rules = {rule.rule: rule.methods for rule in app.url_map.iter_rules()}
    assert "POST" in rules["/api/v1/auth/register"]
    assert "GET" in rules["/api/v1/health"]


def test_proxy_fix_wraps_wsgi_app(app):
    assert isinstance(app.wsgi_app, ProxyFix)


def test_test_config_applied(app):
    assert app.config["TESTING"] is True
    assert app.config["AUTH_COOKIE_DOMAIN"] == "localhost"
