"""
Enchantment lookup table.

Each enchantment is known by its modern name (``SHARPNESS``), its legacy
Bukkit name (``DAMAGE_ALL``) and its namespaced key (``minecraft:sharpness``).
Config files written for any server version resolve to the same member.
"""

from __future__ import annotations

from enum import Enum


class Enchantment(Enum):
    """Known enchantments as (key, legacy_name, max_level)."""

    PROTECTION = ("protection", "PROTECTION_ENVIRONMENTAL", 4)
    FIRE_PROTECTION = ("fire_protection", "PROTECTION_FIRE", 4)
    FEATHER_FALLING = ("feather_falling", "PROTECTION_FALL", 4)
    BLAST_PROTECTION = ("blast_protection", "PROTECTION_EXPLOSIONS", 4)
    PROJECTILE_PROTECTION = ("projectile_protection", "PROTECTION_PROJECTILE", 4)
    RESPIRATION = ("respiration", "OXYGEN", 3)
    AQUA_AFFINITY = ("aqua_affinity", "WATER_WORKER", 1)
    THORNS = ("thorns", "THORNS", 3)
    DEPTH_STRIDER = ("depth_strider", "DEPTH_STRIDER", 3)
    FROST_WALKER = ("frost_walker", "FROST_WALKER", 2)
    BINDING_CURSE = ("binding_curse", "BINDING_CURSE", 1)
    SOUL_SPEED = ("soul_speed", "SOUL_SPEED", 3)
    SWIFT_SNEAK = ("swift_sneak", "SWIFT_SNEAK", 3)
    SHARPNESS = ("sharpness", "DAMAGE_ALL", 5)
    SMITE = ("smite", "DAMAGE_UNDEAD", 5)
    BANE_OF_ARTHROPODS = ("bane_of_arthropods", "DAMAGE_ARTHROPODS", 5)
    KNOCKBACK = ("knockback", "KNOCKBACK", 2)
    FIRE_ASPECT = ("fire_aspect", "FIRE_ASPECT", 2)
    LOOTING = ("looting", "LOOT_BONUS_MOBS", 3)
    SWEEPING_EDGE = ("sweeping_edge", "SWEEPING_EDGE", 3)
    EFFICIENCY = ("efficiency", "DIG_SPEED", 5)
    SILK_TOUCH = ("silk_touch", "SILK_TOUCH", 1)
    UNBREAKING = ("unbreaking", "DURABILITY", 3)
    FORTUNE = ("fortune", "LOOT_BONUS_BLOCKS", 3)
    POWER = ("power", "ARROW_DAMAGE", 5)
    PUNCH = ("punch", "ARROW_KNOCKBACK", 2)
    FLAME = ("flame", "ARROW_FIRE", 1)
    INFINITY = ("infinity", "ARROW_INFINITE", 1)
    LUCK_OF_THE_SEA = ("luck_of_the_sea", "LUCK", 3)
    LURE = ("lure", "LURE", 3)
    LOYALTY = ("loyalty", "LOYALTY", 3)
    IMPALING = ("impaling", "IMPALING", 5)
    RIPTIDE = ("riptide", "RIPTIDE", 3)
    CHANNELING = ("channeling", "CHANNELING", 1)
    MULTISHOT = ("multishot", "MULTISHOT", 1)
    QUICK_CHARGE = ("quick_charge", "QUICK_CHARGE", 3)
    PIERCING = ("piercing", "PIERCING", 4)
    MENDING = ("mending", "MENDING", 1)
    VANISHING_CURSE = ("vanishing_curse", "VANISHING_CURSE", 1)
    DENSITY = ("density", "DENSITY", 5)
    BREACH = ("breach", "BREACH", 4)
    WIND_BURST = ("wind_burst", "WIND_BURST", 3)

    def __init__(self, key: str, legacy_name: str, max_level: int) -> None:
        self.key = key
        self.legacy_name = legacy_name
        self.max_level = max_level

    @property
    def namespaced_key(self) -> str:
        return f"minecraft:{self.key}"

    @classmethod
    def get_by_name(cls, name: str) -> "Enchantment | None":
        """Resolve a modern name, legacy name or namespaced key.

        Matching is case-insensitive and ignores surrounding whitespace.
        Returns None for unknown names.
        """
        if not name:
            return None
        return _LOOKUP.get(_normalize(name))


def _normalize(name: str) -> str:
    normalized = name.strip().lower()
    if normalized.startswith("minecraft:"):
        normalized = normalized[len("minecraft:"):]
    return normalized.replace("-", "_").replace(" ", "_")


_LOOKUP: dict[str, Enchantment] = {}
for _enchantment in Enchantment:
    _LOOKUP[_enchantment.key] = _enchantment
    _LOOKUP[_normalize(_enchantment.name)] = _enchantment
    _LOOKUP[_normalize(_enchantment.legacy_name)] = _enchantment
del _enchantment
