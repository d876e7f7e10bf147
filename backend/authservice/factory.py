"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from authservice.api import init_app as init_api
from authservice.core import cors, errors, extensions, proxy
from authservice.core.config import BaseConfig, get_config
from authservice.core.logger import configure_logging, init_app as init_logging

# Order matters: ProxyFix wraps the WSGI app before any request hook reads
# the forwarded host/scheme, and error handlers are registered last.
_INITIALIZERS = (
    proxy.init_app,
    extensions.init_app,
    init_logging,
    cors.init_app,
    init_api,
    errors.init_app,
)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build the registration service application.

    :param config: Config object or import path; ``APP_ENV`` picks one when omitted.
    :param instance_relative_config: Load ``instance/<instance_config_filename>`` overrides.
    :param instance_config_filename: Name of the optional instance override file.
    :returns: Configured Flask application.
    """
    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    for init in _INITIALIZERS:
        init(app)

    return app
