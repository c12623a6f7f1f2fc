"""
Material resolver with legacy alias support.

Materials are loaded from a YAML table listing each canonical name together
with the names older server versions used for it (``WOOL:14`` for red wool,
``SKULL_ITEM:3`` for a player head...). Lookups normalize case, spaces,
dashes and the ``minecraft:`` namespace.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .item import ItemStack

logger = logging.getLogger("configurable-gui.materials")

DEFAULT_MATERIALS_PATH = Path(__file__).parent / "data" / "materials.yaml"


class Material(BaseModel):
    """A material known to the server.

    Attributes:
        name: Canonical material name (e.g., "RED_WOOL")
        legacy: Names used by older versions (e.g., ["WOOL:14"])
        item: Whether the material can exist as an inventory item
        meta: Whether items of this material carry metadata
    """
    name: str = Field(..., description="Canonical material name")
    legacy: list[str] = Field(default_factory=list, description="Legacy names")
    item: bool = Field(default=True, description="Obtainable as an item")
    meta: bool = Field(default=True, description="Carries item metadata")

    def parse_item(self) -> ItemStack | None:
        """Build a single-item stack, or None if this is not an item."""
        if not self.item:
            return None
        return ItemStack(self)


class MaterialResolver:
    """Resolves material names and legacy aliases with O(1) lookup.

    Canonical names always win over legacy aliases, so a modern name that
    was reused for something else in an old version still resolves to the
    modern material.

    Example:
        >>> resolver = MaterialResolver()
        >>> resolver.load_yaml(DEFAULT_MATERIALS_PATH)
        >>> resolver.match("wool:14").name
        'RED_WOOL'
    """

    def __init__(self) -> None:
        self._materials: dict[str, Material] = {}
        self._aliases: dict[str, Material] = {}

    @staticmethod
    def _normalize(name: str) -> str:
        """Upper-case, strip namespace, map spaces and dashes to underscores.

        Example:
            >>> MaterialResolver._normalize(" minecraft:red-wool ")
            'RED_WOOL'
        """
        normalized = name.strip()
        if normalized.lower().startswith("minecraft:"):
            normalized = normalized[len("minecraft:"):]
        return normalized.upper().replace(" ", "_").replace("-", "_")

    def load_yaml(self, path: Path) -> None:
        """Load the material table from a YAML file.

        Expected YAML format:
            materials:
              - name: RED_WOOL
                legacy: ["WOOL:14"]
              - name: WATER
                item: false

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            ValueError: If the 'materials' key is missing
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data or "materials" not in data:
            raise ValueError("YAML file must contain a 'materials' key")

        self._materials.clear()
        self._aliases.clear()

        for material_data in data["materials"]:
            self.register(Material(**material_data))

        logger.debug("Loaded %d materials from %s", len(self._materials), path)

    def register(self, material: Material) -> None:
        """Add a material and its legacy aliases to the lookup."""
        self._materials[self._normalize(material.name)] = material
        for alias in material.legacy:
            self._aliases[self._normalize(alias)] = material

    def match(self, name: str) -> Material | None:
        """Resolve a material name or legacy alias.

        ``NAME:0`` falls back to ``NAME`` when no alias carries the explicit
        data value. Returns None for unknown names.
        """
        if not name or not name.strip():
            return None

        normalized = self._normalize(name)
        material = self._materials.get(normalized) or self._aliases.get(normalized)
        if material is not None:
            return material

        base, sep, data = normalized.partition(":")
        if sep and data == "0":
            return self._materials.get(base) or self._aliases.get(base)
        return None

    def __len__(self) -> int:
        return len(self._materials)

    def __iter__(self):
        return iter(self._materials.values())


_default_resolver: MaterialResolver | None = None
_default_resolver_lock = threading.Lock()


def get_material_resolver() -> MaterialResolver:
    """Return the resolver loaded with the packaged material table.

    The table is loaded once, on first use; concurrent first calls wait for
    that single load.
    """
    global _default_resolver
    if _default_resolver is None:
        with _default_resolver_lock:
            if _default_resolver is None:
                resolver = MaterialResolver()
                resolver.load_yaml(DEFAULT_MATERIALS_PATH)
                _default_resolver = resolver
    return _default_resolver


def match_material(name: str) -> Material | None:
    """Resolve ``name`` against the packaged material table."""
    return get_material_resolver().match(name)
