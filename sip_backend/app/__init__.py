"""Application factory and app-wide configuration."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from sip_backend.app.api.routes import api_bp
from sip_backend.app.config import DefaultConfig

LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(message)s"


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings come from DefaultConfig, then SIP_* environment variables
    (e.g. SIP_LOG_LEVEL=DEBUG, SIP_MAX_PAGE_SIZE=60), then `config`.
    """
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("SIP")
    if config:
        app.config.from_mapping(config)

    logging.basicConfig(level=app.config["LOG_LEVEL"], format=LOG_FORMAT)
    logging.getLogger("sip_backend").setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
