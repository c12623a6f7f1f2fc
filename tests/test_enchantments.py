"""
Unit tests for enchantment lookup and NAME:LEVEL parsing.
"""

import pytest

from configurable_gui import (
    ConfigSection,
    Enchantment,
    GuiConfigurationTable,
    InvalidLevelError,
    MalformedEnchantmentEntryError,
    UnknownEnchantmentError,
    deserialize_enchantment,
    deserialize_enchantments,
    serialize_enchantment,
    serialize_enchantments,
)


class TestEnchantmentLookup:
    """Test Enchantment.get_by_name."""

    @pytest.mark.parametrize("name", ["SHARPNESS", "sharpness", "DAMAGE_ALL", "minecraft:sharpness", " Sharpness "])
    def test_name_variants(self, name: str) -> None:
        assert Enchantment.get_by_name(name) is Enchantment.SHARPNESS

    def test_legacy_protection_name(self) -> None:
        assert Enchantment.get_by_name("PROTECTION_ENVIRONMENTAL") is Enchantment.PROTECTION

    def test_unknown(self) -> None:
        assert Enchantment.get_by_name("SUPER_SMASH") is None
        assert Enchantment.get_by_name("") is None

    def test_every_member_resolves_by_all_names(self) -> None:
        for enchantment in Enchantment:
            assert Enchantment.get_by_name(enchantment.name) is enchantment
            assert Enchantment.get_by_name(enchantment.legacy_name) is enchantment
            assert Enchantment.get_by_name(enchantment.namespaced_key) is enchantment


class TestDeserializeEnchantment:
    """Test single-entry parsing."""

    def test_valid_entry(self) -> None:
        assert deserialize_enchantment("SHARPNESS:5") == (Enchantment.SHARPNESS, 5)

    def test_legacy_name_entry(self) -> None:
        assert deserialize_enchantment("DURABILITY:3") == (Enchantment.UNBREAKING, 3)

    @pytest.mark.parametrize("entry", ["SHARPNESS", "SHARPNESS5", "", "SHARPNESS:5:1", "minecraft:sharpness:5"])
    def test_malformed(self, entry: str) -> None:
        with pytest.raises(MalformedEnchantmentEntryError):
            deserialize_enchantment(entry)

    def test_none_entry(self) -> None:
        with pytest.raises(MalformedEnchantmentEntryError):
            deserialize_enchantment(None)

    def test_unknown_enchantment(self) -> None:
        with pytest.raises(UnknownEnchantmentError) as exc_info:
            deserialize_enchantment("SUPER_SMASH:1")
        assert exc_info.value.name == "SUPER_SMASH"
        assert exc_info.value.details == {"name": "SUPER_SMASH"}

    @pytest.mark.parametrize("level", ["five", "", "2.5", "5_0", "٥", "0x5"])
    def test_invalid_level(self, level: str) -> None:
        with pytest.raises(InvalidLevelError) as exc_info:
            deserialize_enchantment(f"SHARPNESS:{level}")
        assert exc_info.value.level == level

    def test_unsafe_level_is_accepted(self) -> None:
        assert deserialize_enchantment("SHARPNESS:127") == (Enchantment.SHARPNESS, 127)

    @pytest.mark.parametrize("level,expected", [(" 3 ", 3), ("+2", 2), ("-1", -1), ("007", 7)])
    def test_signed_and_padded_levels(self, level: str, expected: int) -> None:
        assert deserialize_enchantment(f"SHARPNESS:{level}") == (Enchantment.SHARPNESS, expected)


class TestDeserializeEnchantments:
    """Test reading the enchantment list of a section."""

    def test_unset_key(self) -> None:
        assert deserialize_enchantments(ConfigSection({"material": "STONE"})) == {}

    def test_last_duplicate_wins(self) -> None:
        section = ConfigSection({"enchantments": ["SHARPNESS:1", "LOOTING:2", "DAMAGE_ALL:4"]})
        assert deserialize_enchantments(section) == {
            Enchantment.SHARPNESS: 4,
            Enchantment.LOOTING: 2,
        }

    def test_custom_key(self, custom_table: GuiConfigurationTable) -> None:
        section = ConfigSection({"enchants": ["MENDING:1"], "enchantments": ["SHARPNESS:1"]})
        assert deserialize_enchantments(section, custom_table) == {Enchantment.MENDING: 1}


class TestSerializeEnchantments:
    """Test NAME:LEVEL formatting."""

    def test_serialize_single(self) -> None:
        assert serialize_enchantment(Enchantment.FIRE_ASPECT, 2) == "FIRE_ASPECT:2"

    def test_round_trip(self) -> None:
        enchantments = {
            Enchantment.SHARPNESS: 5,
            Enchantment.UNBREAKING: 3,
            Enchantment.MENDING: 1,
            Enchantment.LOOTING: 10,
        }
        section = ConfigSection({"enchantments": serialize_enchantments(enchantments)})
        assert deserialize_enchantments(section) == enchantments
