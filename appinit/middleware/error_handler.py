"""Error handling middleware with Sentry integration."""
import sentry_sdk
from flask import jsonify
from sentry_sdk.integrations.flask import FlaskIntegration

from appinit.application.context_extensions import (
    get_application_builder,
    get_configuration,
    get_environment_or_none,
    get_logger_factory,
)
from appinit.application.initialization_context import ApplicationInitializationContext
from appinit.application.modules import AppModule


def init_sentry(dsn: str, environment: str, logger) -> None:
    """
    Initialize Sentry error tracking.

    Args:
        dsn: Sentry DSN
        environment: Environment name reported to Sentry
        logger: Logger for status messages
    """
    sentry_sdk.init(
        dsn=dsn,
        integrations=[FlaskIntegration()],
        traces_sample_rate=0.1,
        environment=environment,
    )
    logger.info("Sentry error tracking initialized")


def init_error_handlers(app, logger) -> None:
    """
    Initialize error handlers for the application.

    Args:
        app: Flask application instance
        logger: Logger used for internal errors
    """
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({"status": "error", "message": "Resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 errors."""
        return jsonify({"status": "error", "message": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return jsonify({"status": "error", "message": "Internal server error"}), 500


class ErrorHandlingModule(AppModule):
    """Installs JSON error handlers and optional Sentry reporting."""

    def on_application_initialization(self, context: ApplicationInitializationContext) -> None:
        app = get_application_builder(context)
        logger = get_logger_factory(context).create_logger(__name__)

        dsn = get_configuration(context).get("SENTRY_DSN")
        if dsn:
            environment = get_environment_or_none(context)
            init_sentry(dsn, environment.environment_name if environment else "Production", logger)

        init_error_handlers(app, logger)
