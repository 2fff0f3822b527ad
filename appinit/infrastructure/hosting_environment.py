"""Hosting environment built from application configuration."""
import os
from typing import Optional

from appinit.domain.interfaces.hosting_environment import IHostingEnvironment
from appinit.utils.check import not_null_or_empty

_ENVIRONMENT_ALIASES = {
    "dev": "Development",
    "development": "Development",
    "stage": "Staging",
    "staging": "Staging",
    "prod": "Production",
    "production": "Production",
    "test": "Testing",
    "testing": "Testing",
}


def normalize_environment_name(name: Optional[str]) -> str:
    """Map common spellings to canonical names ("prod" -> "Production")."""
    if not name:
        return "Development"
    return _ENVIRONMENT_ALIASES.get(name.strip().lower(), name.strip().title())


class HostingEnvironment(IHostingEnvironment):
    """Hosting environment for a Flask application."""

    def __init__(
        self,
        environment_name: Optional[str] = None,
        application_name: str = "appinit",
        content_root_path: Optional[str] = None,
        web_root_path: Optional[str] = None
    ):
        self._environment_name = normalize_environment_name(environment_name)
        self._application_name = not_null_or_empty(application_name, "application_name")
        self._content_root_path = os.path.abspath(content_root_path or os.getcwd())
        self._web_root_path = os.path.abspath(
            web_root_path or os.path.join(self._content_root_path, "static")
        )

    @classmethod
    def from_config(cls, config_class) -> "HostingEnvironment":
        """
        Create from a Config class.

        Args:
            config_class: Config (or subclass) with APP_ENV, APP_NAME, CONTENT_ROOT, WEB_ROOT

        Returns:
            HostingEnvironment instance
        """
        return cls(
            environment_name=getattr(config_class, "APP_ENV", None),
            application_name=getattr(config_class, "APP_NAME", "appinit"),
            content_root_path=getattr(config_class, "CONTENT_ROOT", None),
            web_root_path=getattr(config_class, "WEB_ROOT", None),
        )

    @property
    def environment_name(self) -> str:
        return self._environment_name

    @property
    def application_name(self) -> str:
        return self._application_name

    @property
    def content_root_path(self) -> str:
        return self._content_root_path

    @property
    def web_root_path(self) -> str:
        return self._web_root_path

    def __repr__(self) -> str:
        return (
            f"HostingEnvironment(environment_name={self._environment_name!r}, "
            f"application_name={self._application_name!r})"
        )
