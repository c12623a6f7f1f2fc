"""
Exception hierarchy for item deserialization.

Every error raised while turning a configuration section into an item derives
from ItemDeserializationError, so callers building a whole GUI can catch one
type and decide whether to skip the icon, log it, or abort.
"""

from __future__ import annotations

from typing import Any


class ItemDeserializationError(ValueError):
    """Base exception for all item configuration errors.

    These are configuration-correctness errors meant to be fixed by the
    config author; none of them are retried.

    Attributes:
        message: Human-readable error message
        details: Additional error context (offending key, value, ...)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingFieldError(ItemDeserializationError):
    """A required key is absent from the configuration section.

    Attributes:
        key: The configuration key that could not be found
    """

    def __init__(self, message: str, key: str, details: dict[str, Any] | None = None):
        super().__init__(message, {"key": key, **(details or {})})
        self.key = key


class UnknownMaterialError(ItemDeserializationError):
    """The material name matches no known material or legacy alias."""

    def __init__(self, message: str, material: str):
        super().__init__(message, {"material": material})
        self.material = material


class UnparsableMaterialError(ItemDeserializationError):
    """The material resolved but cannot be constructed as an item."""

    def __init__(self, message: str, material: str):
        super().__init__(message, {"material": material})
        self.material = material


class MalformedEnchantmentEntryError(ItemDeserializationError):
    """An enchantment entry is not of the form ``NAME:LEVEL``."""

    def __init__(self, message: str, entry: str):
        super().__init__(message, {"entry": entry})
        self.entry = entry


class UnknownEnchantmentError(ItemDeserializationError):
    """An enchantment name does not resolve to a known enchantment."""

    def __init__(self, message: str, name: str):
        super().__init__(message, {"name": name})
        self.name = name


class InvalidLevelError(ItemDeserializationError):
    """An enchantment level is not an integer."""

    def __init__(self, message: str, name: str, level: str):
        super().__init__(message, {"name": name, "level": level})
        self.name = name
        self.level = level


class UnknownItemFlagError(ItemDeserializationError):
    """An item flag name does not match any known flag."""

    def __init__(self, message: str, flag: str):
        super().__init__(message, {"flag": flag})
        self.flag = flag


class NullMetadataError(ItemDeserializationError):
    """The item carries no metadata although the operation requires it.

    Raised for materials such as AIR that exist as items but have no
    metadata to hold a name, lore or enchantments.
    """
    pass


class ConfigurationTableError(ValueError):
    """A section name table could not be built or loaded."""
    pass
