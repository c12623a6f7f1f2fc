"""
Placeholder substitution for cached items.

Deserialized items are kept raw so they can be cached; per-viewer values such
as ``{player}`` or ``{balance}`` are substituted into a copy right before the
item is shown.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class InternalPlaceholder:
    """A single placeholder and the text that replaces it."""
    placeholder: str
    value: str

    def apply(self, text: str) -> str:
        return text.replace(self.placeholder, self.value)


@dataclass
class PlaceholderUtil:
    """An ordered set of placeholders applied to strings and lore lists.

    Placeholders are applied in insertion order; re-adding a placeholder
    replaces its value without changing its position.
    """
    placeholders: list[InternalPlaceholder] = field(default_factory=list)

    @classmethod
    def of(cls, values: Mapping[str, object]) -> "PlaceholderUtil":
        util = cls()
        for placeholder, value in values.items():
            util.add(placeholder, value)
        return util

    def add(self, placeholder: str, value: object) -> "PlaceholderUtil":
        entry = InternalPlaceholder(placeholder, str(value))
        for index, existing in enumerate(self.placeholders):
            if existing.placeholder == placeholder:
                self.placeholders[index] = entry
                return self
        self.placeholders.append(entry)
        return self

    def apply(self, value: str | list[str] | None) -> str | list[str] | None:
        """Substitute placeholders in a string or in every line of a list."""
        if value is None:
            return None
        if isinstance(value, list):
            return [self._apply_text(line) for line in value]
        return self._apply_text(value)

    def _apply_text(self, text: str) -> str:
        for placeholder in self.placeholders:
            text = placeholder.apply(text)
        return text
