import logging
import os

from dotenv import load_dotenv
from flask import Flask

from manicurista.core.api_utils import error_response
from manicurista.core.exceptions import ImportFormatError, NotFoundError, ValidationError
from manicurista.core.logging_config import get_logger, setup_logging
from manicurista.schemas.dtos import ErrorResponse
from manicurista.state import STATE_EXTENSION_KEY, SalonState, build_demo_state

# Load environment variables from .env when present
load_dotenv()


def _register_error_handlers(app: Flask) -> None:
    logger = get_logger(__name__)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        details = {"field": e.field} if e.field else None
        return error_response(ErrorResponse.validation_error(e.message, details), 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return error_response(ErrorResponse.not_found(e.resource), 404)

    @app.errorhandler(ImportFormatError)
    def handle_import_error(e: ImportFormatError):
        return error_response(ErrorResponse.import_error(str(e)), 400)

    @app.errorhandler(500)
    def handle_internal_error(e):
        original = getattr(e, "original_exception", None) or e
        logger.error(
            "Unhandled error",
            extra={"context": {"error": str(original)}},
            exc_info=original,
        )
        return error_response(ErrorResponse.server_error(), 500)


def create_app(testing=False, state=None, text_generator=None, spreadsheet_reader=None):
    """
    Application factory.

    Args:
        testing: Enable Flask testing mode
        state: Pre-built SalonState (tests); otherwise one is created from env
        text_generator: Override for the text-generation collaborator
        spreadsheet_reader: Override for the spreadsheet reader
    """
    from manicurista.core.config import (
        is_rate_limit_enabled,
        log_text_generation_config,
        log_timezone_config,
        should_log_to_file,
        should_seed_demo_data,
    )

    app = Flask(__name__)

    env = os.getenv("FLASK_ENV", "development")
    is_production = env == "production"

    testing_env = os.getenv("TESTING", "").lower().strip()
    if testing or testing_env in ("true", "1", "yes"):
        app.config["TESTING"] = True

    # Configure structured logging (after app creation so we can register hooks)
    setup_logging(
        app=app,
        log_level=logging.INFO if is_production else logging.DEBUG,
        log_to_file=should_log_to_file(),
        use_json_format=is_production,
    )

    logger = get_logger(__name__)
    logger.info(
        "Logging configured",
        extra={"context": {"environment": env, "json_format": is_production}},
    )

    log_timezone_config()
    log_text_generation_config()

    # Configuration
    app.config["SECRET_KEY"] = os.getenv("FLASK_SECRET_KEY", "dev-secret-change-me")
    app.json.sort_keys = False

    # Initialize Flask-Limiter (rate limiting)
    from manicurista.core.limiter_config import limiter

    app.config["RATELIMIT_STORAGE_URI"] = os.getenv("LIMITER_STORAGE_URI", "memory://")
    app.config["RATELIMIT_ENABLED"] = is_rate_limit_enabled()
    limiter.init_app(app)
    if not is_rate_limit_enabled():
        limiter.enabled = False
        logger.info(
            "Rate limiting disabled",
            extra={"context": {"test_mode": app.config.get("TESTING", False)}},
        )

    # In-memory salon state, one container per application instance
    if state is None:
        if should_seed_demo_data():
            state = build_demo_state(
                text_generator=text_generator, spreadsheet_reader=spreadsheet_reader
            )
        else:
            overrides = {}
            if text_generator is not None:
                overrides["text_generator"] = text_generator
            if spreadsheet_reader is not None:
                overrides["spreadsheet_reader"] = spreadsheet_reader
            state = SalonState(**overrides)
    app.extensions[STATE_EXTENSION_KEY] = state
    logger.info(
        "Salon state ready",
        extra={
            "context": {
                "appointments": len(state.appointment_service.list_appointments()),
                "clients": len(state.client_service.list_clients()),
                "products": len(state.inventory_service.list_products()),
            }
        },
    )

    _register_error_handlers(app)

    from manicurista.controllers import (
        appointment_bp,
        assistant_bp,
        client_bp,
        dashboard_bp,
        health_bp,
        inventory_bp,
        marketing_bp,
        settings_bp,
    )

    app.register_blueprint(appointment_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(client_bp)
    app.register_blueprint(inventory_bp)
    app.register_blueprint(marketing_bp)
    app.register_blueprint(assistant_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(health_bp)

    return app
