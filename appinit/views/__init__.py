"""Views module - exports all blueprints."""
from appinit.views.health import health_blueprint, HealthModule

__all__ = ["health_blueprint", "HealthModule"]
