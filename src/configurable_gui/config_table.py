"""
Section name table: maps each logical item field to the key used in config.

Plugins can rename the keys their item sections use (``type`` instead of
``material``, ``display-name`` instead of ``name``...) by supplying their own
table, or by replacing the process-wide default one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationTableError

logger = logging.getLogger("configurable-gui.config_table")


class GuiConfigurationTable(BaseModel):
    """Names of the configuration keys read when deserializing an item.

    Every field defaults to the conventional key name, so a table built with
    no arguments reads the standard item layout.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    material_section_name: str = Field(
        default="material",
        description="Key holding the material name"
    )
    display_name_section_name: str = Field(
        default="name",
        description="Key holding the display name"
    )
    lore_section_name: str = Field(
        default="lore",
        description="Key holding the lore line list"
    )
    amount_section_name: str = Field(
        default="amount",
        description="Key holding the stack size"
    )
    durability_section_name: str = Field(
        default="durability",
        description="Key holding the durability (damage) value"
    )
    enchantments_section_name: str = Field(
        default="enchantments",
        description="Key holding the NAME:LEVEL enchantment list"
    )
    item_flags_section_name: str = Field(
        default="item-flags",
        description="Key holding the item flag list ('*' for all)"
    )
    custom_model_data_section_name: str = Field(
        default="custom-model-data",
        description="Key holding the custom model data id"
    )
    unbreakable_section_name: str = Field(
        default="unbreakable",
        description="Key holding the unbreakable boolean"
    )
    glow_section_name: str = Field(
        default="glow",
        description="Key holding the glow boolean"
    )

    @field_validator("*", mode="before")
    @classmethod
    def validate_section_name(cls, v: Any) -> Any:
        """Reject blank key names, which would match nothing."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("section name cannot be blank")
        return v

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "GuiConfigurationTable":
        """Build a table from a mapping.

        Both ``material_section_name`` style field names and the short
        dashed aliases used in YAML (``material``, ``display-name``,
        ``item-flags``...) are accepted.

        Raises:
            ConfigurationTableError: If a key is unknown or a value is invalid
        """
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            field_name = str(key).replace("-", "_")
            if not field_name.endswith("_section_name"):
                field_name = f"{field_name}_section_name"
            normalized[field_name] = value

        try:
            return cls(**normalized)
        except ValidationError as e:
            raise ConfigurationTableError(f"Invalid configuration table: {e}") from e

    @classmethod
    def load_yaml(cls, path: Path) -> "GuiConfigurationTable":
        """Load a table from a YAML file.

        Expected YAML format:
            material: type
            display-name: display-name
            item-flags: flags

        Keys left out keep their defaults.

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            ConfigurationTableError: If the YAML is malformed or has unknown keys
        """
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationTableError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationTableError(
                f"Configuration table must be a mapping, got {type(data).__name__}"
            )

        table = cls.from_mapping(data)
        logger.debug("Loaded configuration table from %s", path)
        return table


_default_table = GuiConfigurationTable()


def get_default_configuration_table() -> GuiConfigurationTable:
    """Return the process-wide default table."""
    return _default_table


def set_default_configuration_table(table: GuiConfigurationTable) -> None:
    """Replace the process-wide default table.

    Raises:
        ConfigurationTableError: If ``table`` is None
    """
    global _default_table
    if table is None:
        raise ConfigurationTableError("default configuration table cannot be None")
    _default_table = table
    logger.info("Default configuration table replaced")


def resolve_table(table: GuiConfigurationTable | None) -> GuiConfigurationTable:
    """Return ``table``, or the default table when it is None."""
    return table if table is not None else _default_table
