"""
Deserialize configuration sections into item stacks.

An item section looks like this with the default configuration table:

    material: DIAMOND_SWORD
    name: "&bFrost Blade"
    lore:
      - "&7Forged in the northern wastes"
    enchantments:
      - "SHARPNESS:5"
      - "UNBREAKING:3"
    item-flags: ["*"]
    custom-model-data: 1001
    unbreakable: true
    glow: false
    amount: 1

Every function fails fast with an ItemDeserializationError subclass; no
partially built item is ever returned. Placeholders are left untouched so the
result can be cached and substituted per viewer later with
``apply_placeholders_to_item_stack``.
"""

from __future__ import annotations

import logging
import re

from .color import parse_color
from .config_table import GuiConfigurationTable, resolve_table
from .enchantments import Enchantment
from .exceptions import (
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
from .item import EnchantmentStorageMeta, ItemMeta, ItemStack
from .item_flags import ALL_ITEM_FLAGS, ItemFlag
from .materials import MaterialResolver, match_material
from .placeholders import PlaceholderUtil
from .section import ConfigSection

logger = logging.getLogger("configurable-gui.serializer")

ALL_FLAGS_WILDCARD = "*"
GLOW_ENCHANTMENT = Enchantment.PROTECTION

_LEVEL_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _require_meta(item: ItemStack) -> ItemMeta:
    meta = item.get_item_meta()
    if meta is None:
        raise NullMetadataError(
            f"item meta cannot be null: {item.type.name}",
            {"material": item.type.name},
        )
    return meta


def deserialize_material(
    section: ConfigSection,
    table: GuiConfigurationTable | None = None,
    resolver: MaterialResolver | None = None,
) -> ItemStack:
    """Resolve the material of an item section to a bare item stack.

    Legacy names that need a data value to identify the material (white
    and red wool were both ``WOOL`` in old versions) are matched as a
    whole, which is why this returns an item stack instead of a material.

    Args:
        section: Configuration section of the item
        table: Table to find section names, the default table if None
        resolver: Material lookup to use, the packaged table if None

    Returns:
        A single-item stack with empty metadata

    Raises:
        MissingFieldError: If the material key is absent
        UnknownMaterialError: If the name matches no material or alias
        UnparsableMaterialError: If the material cannot exist as an item
    """
    table = resolve_table(table)
    key = table.material_section_name
    material_name = section.get_string(key)
    if material_name is None:
        raise MissingFieldError(f"material section could not find: {key}", key)

    material = resolver.match(material_name) if resolver is not None else match_material(material_name)
    if material is None:
        raise UnknownMaterialError(f"Material could not found: {material_name}", material_name)

    item = material.parse_item()
    if item is None:
        raise UnparsableMaterialError(
            f"Material could not parsed as item stack: {material_name}", material_name
        )

    logger.debug("Resolved material %r to %s", material_name, material.name)
    return item


def deserialize_item_stack(
    section: ConfigSection,
    table: GuiConfigurationTable | None = None,
    resolver: MaterialResolver | None = None,
) -> ItemStack:
    """Deserialize a configuration section into an item stack.

    Parses type, name, lore, enchantments, custom model data,
    unbreakability, durability, glow, item flags and amount, in that order.
    Placeholders are not applied.

    Args:
        section: Configuration section of the item
        table: Table to find section names, the default table if None
        resolver: Material lookup to use, the packaged table if None

    Returns:
        The assembled item stack

    Raises:
        ItemDeserializationError: On the first invalid field
    """
    table = resolve_table(table)

    item = deserialize_material(section, table, resolver)
    meta = _require_meta(item)
    meta.display_name = section.get_string(table.display_name_section_name)
    meta.lore = section.get_string_list(table.lore_section_name)
    item.set_item_meta(meta)

    parse_color_of_item_stack(item)
    apply_enchantments_to_item_stack(item, deserialize_enchantments(section, table))

    meta = _require_meta(item)
    if section.is_set(table.custom_model_data_section_name):
        meta.custom_model_data = section.get_int(table.custom_model_data_section_name)
    if section.get_boolean(table.unbreakable_section_name):
        meta.unbreakable = True
    if section.is_set(table.durability_section_name):
        item.durability = section.get_int(table.durability_section_name)
    if section.get_boolean(table.glow_section_name):
        meta.add_item_flags(ItemFlag.HIDE_ENCHANTS)
        # marker enchant only on items without real enchantments
        if not meta.has_enchants():
            meta.add_enchant(GLOW_ENCHANTMENT, 1, True)
    item.set_item_meta(meta)

    apply_item_flags_to_item_stack(item, deserialize_item_flags(section, table))
    item.amount = section.get_int(table.amount_section_name, 1)

    logger.debug("Deserialized %r from section %r", item, section.name)
    return item


def deserialize_item_stacks(
    section: ConfigSection,
    table: GuiConfigurationTable | None = None,
    skip_invalid: bool = False,
    resolver: MaterialResolver | None = None,
) -> dict[str, ItemStack]:
    """Deserialize every child section of ``section`` into an item stack.

    Non-mapping children are ignored.

    Args:
        section: Parent section whose children are item sections
        table: Table to find section names, the default table if None
        skip_invalid: Log and skip invalid items instead of raising
        resolver: Material lookup to use, the packaged table if None

    Returns:
        Items keyed by child section name, in config order

    Raises:
        ItemDeserializationError: On the first invalid item unless skip_invalid
    """
    items: dict[str, ItemStack] = {}
    for key in section.keys():
        child = section.get_section(key)
        if child is None:
            continue
        try:
            items[key] = deserialize_item_stack(child, table, resolver)
        except ItemDeserializationError as e:
            if not skip_invalid:
                raise
            logger.warning("Skipping item %r in section %r: %s", key, section.name, e)
    return items


def apply_item_flags_to_item_stack(item: ItemStack, item_flags: frozenset[ItemFlag] | set[ItemFlag]) -> None:
    """Add ``item_flags`` to the item's metadata.

    Raises:
        NullMetadataError: If the item carries no metadata
    """
    meta = _require_meta(item)
    if not item_flags:
        return

    meta.add_item_flags(*item_flags)
    item.set_item_meta(meta)


def deserialize_item_flags(
    section: ConfigSection,
    table: GuiConfigurationTable | None = None,
) -> frozenset[ItemFlag]:
    """Read the item flag list of a section.

    A ``*`` entry anywhere in the list selects every flag. A missing or
    empty list yields an empty set.

    Raises:
        UnknownItemFlagError: If an entry is not a known flag name
    """
    table = resolve_table(table)

    serialized_flags = section.get_string_list(table.item_flags_section_name)
    if not serialized_flags:
        return frozenset()
    if ALL_FLAGS_WILDCARD in serialized_flags:
        return ALL_ITEM_FLAGS

    flags = set()
    for serialized_flag in serialized_flags:
        flag = ItemFlag.match(serialized_flag)
        if flag is None:
            raise UnknownItemFlagError(f"item flag could not find: {serialized_flag}", serialized_flag)
        flags.add(flag)
    return frozenset(flags)


def apply_enchantments_to_item_stack(item: ItemStack, enchantments: dict[Enchantment, int]) -> None:
    """Apply enchantments, ignoring level restrictions.

    Enchanted books receive them as stored enchantments; every other
    material is enchanted directly.

    Raises:
        NullMetadataError: If the item carries no metadata
    """
    if not enchantments:
        return

    if item.is_enchanted_book():
        meta = _require_meta(item)
        if not isinstance(meta, EnchantmentStorageMeta):
            raise NullMetadataError(
                "enchanted book has no enchantment storage", {"material": item.type.name}
            )
        for enchantment, level in enchantments.items():
            meta.add_stored_enchant(enchantment, level, True)
        item.set_item_meta(meta)
    else:
        item.add_unsafe_enchantments(enchantments)


def deserialize_enchantments(
    section: ConfigSection,
    table: GuiConfigurationTable | None = None,
) -> dict[Enchantment, int]:
    """Read the ``NAME:LEVEL`` enchantment list of a section.

    Later entries for the same enchantment override earlier ones.

    Raises:
        ItemDeserializationError: If any entry is invalid
    """
    table = resolve_table(table)
    key = table.enchantments_section_name
    if not section.is_set(key):
        return {}

    enchantments: dict[Enchantment, int] = {}
    for serialized_enchantment in section.get_string_list(key):
        enchantment, level = deserialize_enchantment(serialized_enchantment)
        enchantments[enchantment] = level
    return enchantments


def deserialize_enchantment(serialized_enchantment: str) -> tuple[Enchantment, int]:
    """Parse a single ``NAME:LEVEL`` entry.

    Raises:
        MalformedEnchantmentEntryError: If the entry is not exactly two parts
        UnknownEnchantmentError: If NAME is not a known enchantment
        InvalidLevelError: If LEVEL is not a plain ASCII integer
    """
    if serialized_enchantment is None:
        raise MalformedEnchantmentEntryError("serialized enchantment cannot be null", "")

    parts = serialized_enchantment.split(":")
    if len(parts) != 2:
        raise MalformedEnchantmentEntryError(
            f"Enchantment could not deserialized: {serialized_enchantment}", serialized_enchantment
        )

    name, level_text = parts
    enchantment = Enchantment.get_by_name(name)
    if enchantment is None:
        raise UnknownEnchantmentError(f"Enchantment could not find: {name}", name)

    digits = level_text.strip()
    if not _LEVEL_PATTERN.fullmatch(digits):
        raise InvalidLevelError(
            f"Enchantment level could not resolved: {serialized_enchantment}", name, level_text
        )

    return enchantment, int(digits)


def serialize_enchantment(enchantment: Enchantment, level: int) -> str:
    """Format an enchantment as a ``NAME:LEVEL`` entry."""
    return f"{enchantment.name}:{level}"


def serialize_enchantments(enchantments: dict[Enchantment, int]) -> list[str]:
    """Format an enchantment mapping as ``NAME:LEVEL`` entries."""
    return [serialize_enchantment(enchantment, level) for enchantment, level in enchantments.items()]


def apply_placeholders_to_item_stack(item: ItemStack | None, placeholders: PlaceholderUtil | None) -> None:
    """Substitute placeholders in the item's name and lore.

    A None item or None placeholders leaves everything untouched.

    Raises:
        NullMetadataError: If the item carries no metadata
    """
    if item is None or placeholders is None:
        return
    meta = _require_meta(item)
    meta.display_name = placeholders.apply(meta.display_name)
    meta.lore = placeholders.apply(meta.lore)
    item.set_item_meta(meta)


def parse_color_of_item_stack(item: ItemStack | None) -> None:
    """Translate ``&`` color codes in the item's name and lore."""
    if item is None:
        return
    meta = _require_meta(item)
    meta.display_name = parse_color(meta.display_name)
    meta.lore = parse_color(meta.lore)
    item.set_item_meta(meta)
