"""``create_app``: builds the Flask app for a given configuration."""

from __future__ import annotations

from flask import Flask

from ideadrop.core import config as app_config
from ideadrop.core import logger


def create_app(config: str | type | None = None) -> Flask:
    """Return a fully wired application.

    ``config`` may be a config class, a dotted import path, or ``None`` to
    pick the class named by ``APP_ENV``. An ``instance/config.py`` file, when
    present, overrides the chosen values.

    :raises RuntimeError: When no JWT signing secret is configured.
    """
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config if config is not None else app_config.get_config())
    app.config.from_pyfile("config.py", silent=True)

    logger.configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from ideadrop import api, cli
    from ideadrop.core import cors, errors, extensions, proxy

    # Order matters: the request id hook runs before any route, the error
    # handlers are installed once every blueprint is known.
    for component in (proxy, extensions, logger, cors, api, errors, cli):
        component.init_app(app)

    return app
