"""
Read-only configuration section over parsed YAML data.

Typed getters follow the lenient conventions of server configuration files:
a value of the wrong type reads as the default instead of raising, so the
deserializer decides which fields are mandatory.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml


class ConfigSectionError(Exception):
    """Raised when YAML content cannot be read as a configuration section."""


def _scalar_to_string(value: Any) -> str | None:
    if value is None or isinstance(value, (Mapping, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigSection:
    """A key→value lookup over a mapping, addressed by dotted paths.

    Example:
        >>> section = ConfigSection.from_yaml("icon:\\n  material: STONE\\n")
        >>> section.get_string("icon.material")
        'STONE'
        >>> section.get_section("icon").get_int("amount", 1)
        1
    """

    def __init__(self, data: Mapping[str, Any] | None = None, name: str = "") -> None:
        self._data: dict[str, Any] = {str(k): v for k, v in (data or {}).items()}
        self.name = name

    @classmethod
    def from_yaml(cls, content: str, name: str = "") -> "ConfigSection":
        """Parse a YAML string into a section.

        Raises:
            ConfigSectionError: If the YAML is invalid or not a mapping
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigSectionError(f"Invalid YAML: {e}") from e

        if data is None:
            return cls({}, name)
        if not isinstance(data, Mapping):
            raise ConfigSectionError(f"Section must be a mapping, got {type(data).__name__}")
        return cls(data, name)

    @classmethod
    def load_yaml(cls, path: Path) -> "ConfigSection":
        """Parse a YAML file into a section named after the file stem.

        Raises:
            ConfigSectionError: If the file cannot be read or is not a mapping
        """
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigSectionError(f"Cannot read file: {e}") from e
        return cls.from_yaml(content, Path(path).stem)

    def _lookup(self, path: str) -> Any:
        current: Any = self._data
        for part in path.split("."):
            if not isinstance(current, Mapping):
                return None
            current = current.get(part)
        return current

    def get(self, path: str, default: Any = None) -> Any:
        """Return the raw value at ``path``, or ``default``."""
        value = self._lookup(path)
        return default if value is None else value

    def is_set(self, path: str) -> bool:
        """True if ``path`` holds a non-null value."""
        return self._lookup(path) is not None

    def get_string(self, path: str, default: str | None = None) -> str | None:
        """Return the value at ``path`` as a string.

        Numbers and booleans are rendered as text; mappings and lists read
        as ``default``.
        """
        value = _scalar_to_string(self._lookup(path))
        return default if value is None else value

    def get_string_list(self, path: str) -> list[str]:
        """Return the list at ``path`` with scalar entries rendered as text.

        A missing key or a non-list value yields an empty list. Null and
        nested entries are dropped.
        """
        value = self._lookup(path)
        if not isinstance(value, list):
            return []
        result = []
        for entry in value:
            text = _scalar_to_string(entry)
            if text is not None:
                result.append(text)
        return result

    def get_int(self, path: str, default: int = 0) -> int:
        """Return the number at ``path`` truncated to an int, or ``default``."""
        value = self._lookup(path)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return int(value)

    def get_boolean(self, path: str, default: bool = False) -> bool:
        """Return the boolean at ``path``, or ``default`` for non-booleans."""
        value = self._lookup(path)
        return value if isinstance(value, bool) else default

    def get_section(self, path: str) -> "ConfigSection | None":
        """Return the nested mapping at ``path`` as a section, or None."""
        value = self._lookup(path)
        if not isinstance(value, Mapping):
            return None
        child_name = path.rsplit(".", 1)[-1]
        return ConfigSection(value, child_name)

    def keys(self) -> list[str]:
        """Top-level keys in insertion order."""
        return list(self._data)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.is_set(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"ConfigSection(name={self.name!r}, keys={self.keys()!r})"
