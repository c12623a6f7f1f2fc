"""
Configurable GUI items: deserialize YAML item sections into item stacks.

Reads material, display name, lore, enchantments, item flags, durability,
custom model data, unbreakability, glow and amount from a configuration
section, using configurable key names.
"""

from .config_table import (
    GuiConfigurationTable,
    get_default_configuration_table,
    set_default_configuration_table,
)
from .enchantments import Enchantment
from .exceptions import (
    ConfigurationTableError,
    InvalidLevelError,
    ItemDeserializationError,
    MalformedEnchantmentEntryError,
    MissingFieldError,
    NullMetadataError,
    UnknownEnchantmentError,
    UnknownItemFlagError,
    UnknownMaterialError,
    UnparsableMaterialError,
)
from .item import EnchantmentStorageMeta, ItemDescription, ItemMeta, ItemStack
from .item_flags import ItemFlag
from .materials import Material, MaterialResolver, match_material
from .placeholders import PlaceholderUtil
from .section import ConfigSection, ConfigSectionError
from .serializer import (
    apply_enchantments_to_item_stack,
    apply_item_flags_to_item_stack,
    apply_placeholders_to_item_stack,
    deserialize_enchantment,
    deserialize_enchantments,
    deserialize_item_flags,
    deserialize_item_stack,
    deserialize_item_stacks,
    deserialize_material,
    parse_color_of_item_stack,
    serialize_enchantment,
    serialize_enchantments,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigSection",
    "ConfigSectionError",
    "ConfigurationTableError",
    "Enchantment",
    "EnchantmentStorageMeta",
    "GuiConfigurationTable",
    "InvalidLevelError",
    "ItemDeserializationError",
    "ItemDescription",
    "ItemFlag",
    "ItemMeta",
    "ItemStack",
    "MalformedEnchantmentEntryError",
    "Material",
    "MaterialResolver",
    "MissingFieldError",
    "NullMetadataError",
    "PlaceholderUtil",
    "UnknownEnchantmentError",
    "UnknownItemFlagError",
    "UnknownMaterialError",
    "UnparsableMaterialError",
    "apply_enchantments_to_item_stack",
    "apply_item_flags_to_item_stack",
    "apply_placeholders_to_item_stack",
    "deserialize_enchantment",
    "deserialize_enchantments",
    "deserialize_item_flags",
    "deserialize_item_stack",
    "deserialize_item_stacks",
    "deserialize_material",
    "get_default_configuration_table",
    "match_material",
    "parse_color_of_item_stack",
    "serialize_enchantment",
    "serialize_enchantments",
    "set_default_configuration_table",
]
