# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from invoicer.infrastructure.admin_setup import setup_admin_user
from invoicer.infrastructure.container import container
from invoicer.infrastructure.db import init_db
from invoicer.interfaces.http.auth_gate import TOKEN_SERVICE_EXTENSION
from invoicer.interfaces.http.controllers.misc_controller import MiscController
from invoicer.shared.config import load_config
from invoicer.shared.logging import logger, setup_logging
from invoicer.shared.middleware.error_handler import configure_error_handling
from invoicer.shared.middleware.request_logger import configure_request_logging

_config = load_config()


def create_app() -> Flask:
    setup_logging(
        _config.log_level,
        log_file=_config.log_file,
        debug_mode=_config.debug_logging,
    )
    init_db()

    setup_admin_user(container.admin_repository)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    app.config.update(MAX_CONTENT_LENGTH=_config.max_content_length)
    app.json.sort_keys = False
    app.extensions[TOKEN_SERVICE_EXTENSION] = container.token_service

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": _config.security.allowed_origins}},
        "allow_headers": ["Authorization", "Content-Type", "X-Request-ID"],
        "expose_headers": ["X-Request-ID"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(container.admin_controller.as_blueprint())
    app.register_blueprint(container.company_controller.as_blueprint())
    app.register_blueprint(container.invoices_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=_config.is_development())
