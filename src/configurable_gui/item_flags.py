"""
Item flags: display-suppression toggles stored on item metadata.
"""

from enum import Enum


class ItemFlag(Enum):
    """Flags that hide parts of an item's tooltip."""
    HIDE_ENCHANTS = "HIDE_ENCHANTS"
    HIDE_ATTRIBUTES = "HIDE_ATTRIBUTES"
    HIDE_UNBREAKABLE = "HIDE_UNBREAKABLE"
    HIDE_DESTROYS = "HIDE_DESTROYS"
    HIDE_PLACED_ON = "HIDE_PLACED_ON"
    HIDE_ADDITIONAL_TOOLTIP = "HIDE_ADDITIONAL_TOOLTIP"
    # pre-1.20.5 name of HIDE_ADDITIONAL_TOOLTIP, still written by older configs
    HIDE_POTION_EFFECTS = "HIDE_POTION_EFFECTS"
    HIDE_DYE = "HIDE_DYE"
    HIDE_ARMOR_TRIM = "HIDE_ARMOR_TRIM"
    HIDE_STORED_ENCHANTS = "HIDE_STORED_ENCHANTS"
    HIDE_JUKEBOX_PLAYABLE = "HIDE_JUKEBOX_PLAYABLE"

    @classmethod
    def match(cls, name: str) -> "ItemFlag | None":
        """Return the flag with exactly this name, or None."""
        try:
            return cls[name]
        except KeyError:
            return None


ALL_ITEM_FLAGS: frozenset[ItemFlag] = frozenset(ItemFlag)
