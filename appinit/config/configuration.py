"""Key/value configuration exposed through the service container."""
import os
from typing import Any, Dict, Mapping, Optional

from appinit.domain.interfaces.configuration import IConfiguration

# Environment variables use "__" for nesting (APPINIT_REDIS__URL -> REDIS:URL)
ENV_SECTION_SEPARATOR = "__"
SECTION_SEPARATORS = (":", "_")


def _normalize(key: str) -> str:
    return key.replace(ENV_SECTION_SEPARATOR, ":").upper()


class Configuration(IConfiguration):
    """
    Case-insensitive settings mapping.

    Keys are stored upper-case. ``get_section("REDIS")`` matches both
    ``REDIS:URL`` and ``REDIS_URL`` and exposes them as ``URL``.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        for key, value in (values or {}).items():
            self._values[_normalize(key)] = value

    @classmethod
    def from_object(cls, obj: Any) -> "Configuration":
        """Build from the upper-case attributes of a Config class."""
        return cls({
            name: getattr(obj, name)
            for name in dir(obj)
            if name.isupper() and not name.startswith("_")
        })

    @classmethod
    def from_env(cls, prefix: str, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        """Build from environment variables starting with prefix (prefix removed)."""
        environ = os.environ if environ is None else environ
        prefix_upper = prefix.upper()
        return cls({
            key[len(prefix):]: value
            for key, value in environ.items()
            if key.upper().startswith(prefix_upper) and len(key) > len(prefix)
        })

    def merge(self, other: "IConfiguration") -> "Configuration":
        """Return a new configuration with other's values taking precedence."""
        merged = dict(self._values)
        merged.update(other.as_dict())
        return Configuration(merged)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._values.get(_normalize(key), default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in ("1", "true", "yes", "on")

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        value = self.get(key)
        if value is None:
            return default
        return int(value)

    def get_section(self, prefix: str) -> "Configuration":
        prefix = _normalize(prefix).rstrip(":_")
        section: Dict[str, Any] = {}
        for key, value in self._values.items():
            for separator in SECTION_SEPARATORS:
                head = prefix + separator
                if key.startswith(head) and len(key) > len(head):
                    section[key[len(head):]] = value
                    break
        return Configuration(section)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __getitem__(self, key: str) -> Any:
        normalized = _normalize(key)
        if normalized not in self._values:
            raise KeyError(key)
        return self._values[normalized]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _normalize(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Configuration(keys={sorted(self._values)})"
