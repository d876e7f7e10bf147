"""WSGI proxy middleware configuration helper."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Apply :class:`werkzeug.middleware.proxy_fix.ProxyFix` when enabled.

    Controlled by ``USE_PROXYFIX`` (defaults to ``True``) and
    ``PROXYFIX_HOPS`` (number of trusted proxies, defaults to ``1``). The
    cookie ``Secure`` flag and the logged client address depend on the
    forwarded scheme and host being trusted here.
    """
    if not app.config.get("USE_PROXYFIX", True):
        return
    hops = int(app.config.get("PROXYFIX_HOPS", 1))
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops, x_prefix=hops)
