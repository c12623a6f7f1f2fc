"""
Item models: the stack handed to the GUI framework and its metadata.

Metadata is copy-on-read and copy-on-write: ``ItemStack.get_item_meta()``
returns a copy, and changes only land on the stack through
``ItemStack.set_item_meta()``. Code that mutates an item in several steps must
re-fetch the metadata after each write, otherwise a stale copy overwrites the
newer state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .enchantments import Enchantment
from .exceptions import NullMetadataError
from .item_flags import ItemFlag

if TYPE_CHECKING:
    from .materials import Material


class ItemMeta(BaseModel):
    """Display and enchantment data attached to an item."""

    display_name: str | None = None
    lore: list[str] = Field(default_factory=list)
    enchants: dict[Enchantment, int] = Field(default_factory=dict)
    item_flags: set[ItemFlag] = Field(default_factory=set)
    custom_model_data: int | None = None
    unbreakable: bool = False

    def has_enchants(self) -> bool:
        return bool(self.enchants)

    def add_enchant(self, enchantment: Enchantment, level: int, ignore_level_restriction: bool) -> bool:
        """Add an enchantment, replacing any existing level.

        Returns:
            False if the level is out of range and restrictions apply,
            True otherwise
        """
        if not ignore_level_restriction and not 1 <= level <= enchantment.max_level:
            return False
        self.enchants[enchantment] = level
        return True

    def remove_enchant(self, enchantment: Enchantment) -> bool:
        return self.enchants.pop(enchantment, None) is not None

    def add_item_flags(self, *flags: ItemFlag) -> None:
        self.item_flags.update(flags)

    def remove_item_flags(self, *flags: ItemFlag) -> None:
        self.item_flags.difference_update(flags)

    def has_item_flag(self, flag: ItemFlag) -> bool:
        return flag in self.item_flags


class EnchantmentStorageMeta(ItemMeta):
    """Metadata of an enchanted book.

    Stored enchantments are the ones the book transfers in an anvil; they
    are kept apart from the enchantments applied to the book itself.
    """

    stored_enchants: dict[Enchantment, int] = Field(default_factory=dict)

    def has_stored_enchants(self) -> bool:
        return bool(self.stored_enchants)

    def add_stored_enchant(self, enchantment: Enchantment, level: int, ignore_level_restriction: bool) -> bool:
        if not ignore_level_restriction and not 1 <= level <= enchantment.max_level:
            return False
        self.stored_enchants[enchantment] = level
        return True


class ItemDescription(BaseModel):
    """Immutable, hashable snapshot of a fully assembled item.

    Enchantments are kept as (enchantment, level) pairs in enchantment
    declaration order; wrap them in ``dict()`` for keyed access.
    """

    model_config = ConfigDict(frozen=True)

    material: str
    display_name: str | None = None
    lore: tuple[str, ...] = ()
    amount: int = 1
    durability: int | None = None
    custom_model_data: int | None = None
    unbreakable: bool = False
    enchantments: tuple[tuple[Enchantment, int], ...] = ()
    stored_enchantments: tuple[tuple[Enchantment, int], ...] = ()
    item_flags: frozenset[ItemFlag] = frozenset()


def _enchantment_pairs(enchants: dict[Enchantment, int]) -> tuple[tuple[Enchantment, int], ...]:
    return tuple((enchantment, enchants[enchantment]) for enchantment in Enchantment if enchantment in enchants)


ENCHANTED_BOOK = "ENCHANTED_BOOK"


class ItemStack:
    """A stack of one material with its metadata.

    Attributes:
        amount: Stack size
        durability: Damage value, None until explicitly set
    """

    def __init__(self, material: "Material", amount: int = 1) -> None:
        self._material = material
        self.amount = amount
        self.durability: int | None = None
        self._meta: ItemMeta | None = self._new_meta()

    def _new_meta(self) -> ItemMeta | None:
        if not self._material.meta:
            return None
        if self._material.name == ENCHANTED_BOOK:
            return EnchantmentStorageMeta()
        return ItemMeta()

    @property
    def type(self) -> "Material":
        return self._material

    def is_enchanted_book(self) -> bool:
        return self._material.name == ENCHANTED_BOOK

    def has_item_meta(self) -> bool:
        return self._meta is not None

    def get_item_meta(self) -> ItemMeta | None:
        """Return a copy of the metadata, or None if the material has none."""
        if self._meta is None:
            return None
        return self._meta.model_copy(deep=True)

    def set_item_meta(self, meta: ItemMeta | None) -> bool:
        """Store a copy of ``meta`` on the stack.

        Passing None clears the metadata back to an empty one.

        Returns:
            False if the material cannot carry metadata, True otherwise
        """
        if not self._material.meta:
            return False
        if meta is None:
            self._meta = self._new_meta()
            return True
        if self.is_enchanted_book() and not isinstance(meta, EnchantmentStorageMeta):
            meta = EnchantmentStorageMeta(**meta.model_dump())
        self._meta = meta.model_copy(deep=True)
        return True

    def add_unsafe_enchantments(self, enchantments: dict[Enchantment, int]) -> None:
        """Apply enchantments without level or applicability checks.

        Raises:
            NullMetadataError: If the material carries no metadata
        """
        meta = self.get_item_meta()
        if meta is None:
            raise NullMetadataError(
                f"{self._material.name} cannot hold enchantments",
                {"material": self._material.name},
            )
        for enchantment, level in enchantments.items():
            meta.add_enchant(enchantment, level, True)
        self.set_item_meta(meta)

    def get_enchantments(self) -> dict[Enchantment, int]:
        if self._meta is None:
            return {}
        return dict(self._meta.enchants)

    def clone(self) -> "ItemStack":
        copy = ItemStack(self._material, self.amount)
        copy.durability = self.durability
        copy._meta = self.get_item_meta()
        return copy

    def describe(self) -> ItemDescription:
        """Freeze the current state into an ItemDescription."""
        meta = self._meta or ItemMeta()
        stored = meta.stored_enchants if isinstance(meta, EnchantmentStorageMeta) else {}
        return ItemDescription(
            material=self._material.name,
            display_name=meta.display_name,
            lore=tuple(meta.lore),
            amount=self.amount,
            durability=self.durability,
            custom_model_data=meta.custom_model_data,
            unbreakable=meta.unbreakable,
            enchantments=_enchantment_pairs(meta.enchants),
            stored_enchantments=_enchantment_pairs(stored),
            item_flags=frozenset(meta.item_flags),
        )

    def __repr__(self) -> str:
        return f"ItemStack(type={self._material.name}, amount={self.amount})"
