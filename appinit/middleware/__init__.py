"""Middleware modules."""
from appinit.middleware.error_handler import ErrorHandlingModule
from appinit.middleware.monitoring import MetricsModule

__all__ = ["ErrorHandlingModule", "MetricsModule"]
