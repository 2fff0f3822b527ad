"""Health check endpoints."""
import logging
from flask import Blueprint, current_app, jsonify

from appinit.application.context_extensions import get_application_builder, get_logger_factory
from appinit.application.initialization_context import ApplicationInitializationContext
from appinit.application.modules import AppModule
from appinit.domain.interfaces.configuration import IConfiguration
from appinit.domain.interfaces.hosting_environment import IHostingEnvironment
from appinit.domain.interfaces.logger_factory import ILoggerFactory

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)

READINESS_SERVICES = {
    "configuration": IConfiguration,
    "environment": IHostingEnvironment,
    "logger_factory": ILoggerFactory,
}


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.

    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": current_app.config.get("APP_NAME", "appinit")
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks the startup services resolve).

    Returns:
        JSON response with readiness status
    """
    checks = {name: False for name in READINESS_SERVICES}

    state = current_app.extensions.get("appinit")
    if state is not None:
        for name, service_type in READINESS_SERVICES.items():
            try:
                checks[name] = state.service_provider.get_service(service_type) is not None
            except Exception as e:
                _logger.error(f"Readiness check for {name} failed: {e}")
                checks[name] = False

    checks["overall"] = all(checks.values())
    status_code = 200 if checks["overall"] else 503

    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """
    Liveness check endpoint (for Kubernetes).

    Returns:
        JSON response with liveness status
    """
    return jsonify({
        "status": "alive",
        "service": current_app.config.get("APP_NAME", "appinit")
    }), 200


class HealthModule(AppModule):
    """Registers the health blueprint on the application."""

    def on_application_initialization(self, context: ApplicationInitializationContext) -> None:
        app = get_application_builder(context)
        app.register_blueprint(health_blueprint)
        get_logger_factory(context).create_logger(__name__).info("Health endpoints registered")
