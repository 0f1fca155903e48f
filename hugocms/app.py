# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta

from flask import Flask
from flask_cors import CORS

from hugocms.infrastructure.container import Container
from hugocms.infrastructure.db import init_db
from hugocms.shared.config import AppConfig, load_config
from hugocms.shared.logging import logger, setup_logging
from hugocms.shared.middleware.error_handler import configure_error_handling
from hugocms.shared.middleware.rate_limit import install_rate_limiter
from hugocms.shared.middleware.request_logger import configure_request_logging
from hugocms.shared.middleware.security_headers import configure_security_headers

EXTENSION_KEY = "hugocms"


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)

    container = container or Container(config)
    init_db(container.engine)
    container.bootstrap_admin_use_case.execute(
        config.admin_username, config.admin_password or ""
    )

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.secret_key,
        SESSION_COOKIE_NAME=config.security.cookie_name,
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SECURE=config.secure_cookies(),
        SESSION_COOKIE_SAMESITE=config.security.cookie_samesite,
        PERMANENT_SESSION_LIFETIME=timedelta(seconds=config.session_ttl),
        # Server-side sessions have a fixed lifetime; keep the cookie in step.
        SESSION_REFRESH_EACH_REQUEST=False,
    )

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(
        app, debug_mode=config.debug_logging, trust_proxy=config.security.trust_proxy
    )
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)
    install_rate_limiter(app, container.rate_limiter, trust_proxy=config.security.trust_proxy)

    CORS(
        app,
        resources={r"/cms/*": {"origins": config.security.allowed_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())
    app.extensions[EXTENSION_KEY] = container

    logger.info(f"Flask app initialized content_dir={config.content_dir}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"CMS server running at http://localhost:{config.port}/cms/login")
    app.run(host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
