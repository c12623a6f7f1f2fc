"""
Unit tests for ConfigSection typed getters.
"""

import tempfile
from pathlib import Path

import pytest

from configurable_gui import ConfigSection, ConfigSectionError


NESTED_YAML = """
gui:
  title: "&8Shop"
  rows: 3
  icons:
    sword:
      material: IRON_SWORD
      amount: 2
"""


@pytest.fixture
def section() -> ConfigSection:
    return ConfigSection({
        "name": "Stone",
        "count": 5,
        "ratio": 2.9,
        "flag": True,
        "lore": ["a", 1, None, True, {"nested": 1}],
        "empty": None,
    })


class TestGetters:
    """Test lenient typed access."""

    def test_get_string(self, section: ConfigSection) -> None:
        assert section.get_string("name") == "Stone"
        assert section.get_string("count") == "5"
        assert section.get_string("flag") == "true"
        assert section.get_string("lore") is None
        assert section.get_string("missing") is None
        assert section.get_string("missing", "fallback") == "fallback"

    def test_get_string_list(self, section: ConfigSection) -> None:
        assert section.get_string_list("lore") == ["a", "1", "true"]
        assert section.get_string_list("name") == []
        assert section.get_string_list("missing") == []

    def test_get_int(self, section: ConfigSection) -> None:
        assert section.get_int("count") == 5
        assert section.get_int("ratio") == 2
        assert section.get_int("flag", 7) == 7
        assert section.get_int("name", 1) == 1
        assert section.get_int("missing") == 0

    def test_get_boolean(self, section: ConfigSection) -> None:
        assert section.get_boolean("flag") is True
        assert section.get_boolean("count") is False
        assert section.get_boolean("missing", True) is True

    def test_is_set(self, section: ConfigSection) -> None:
        assert section.is_set("name")
        assert not section.is_set("empty")
        assert not section.is_set("missing")
        assert "count" in section
        assert "missing" not in section

    def test_keys_keep_order(self, section: ConfigSection) -> None:
        assert section.keys() == ["name", "count", "ratio", "flag", "lore", "empty"]
        assert list(section) == section.keys()


class TestNesting:
    """Test dotted paths and child sections."""

    def test_dotted_path(self) -> None:
        root = ConfigSection.from_yaml(NESTED_YAML)
        assert root.get_string("gui.title") == "&8Shop"
        assert root.get_int("gui.icons.sword.amount") == 2
        assert root.get_string("gui.title.deeper") is None

    def test_get_section(self) -> None:
        root = ConfigSection.from_yaml(NESTED_YAML)
        sword = root.get_section("gui.icons.sword")
        assert sword is not None
        assert sword.name == "sword"
        assert sword.get_string("material") == "IRON_SWORD"
        assert root.get_section("gui.title") is None


class TestConstructors:
    """Test building sections from YAML."""

    def test_from_yaml_empty(self) -> None:
        assert ConfigSection.from_yaml("").keys() == []

    def test_from_yaml_not_mapping(self) -> None:
        with pytest.raises(ConfigSectionError, match="must be a mapping"):
            ConfigSection.from_yaml("- a\n- b\n")

    def test_from_yaml_invalid(self) -> None:
        with pytest.raises(ConfigSectionError, match="Invalid YAML"):
            ConfigSection.from_yaml("key: [unclosed")

    def test_load_yaml(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False, encoding="utf-8") as f:
            f.write(NESTED_YAML)
            path = Path(f.name)

        try:
            section = ConfigSection.load_yaml(path)
        finally:
            path.unlink()

        assert section.name == path.stem
        assert section.get_int("gui.rows") == 3

    def test_load_yaml_missing(self) -> None:
        with pytest.raises(ConfigSectionError, match="Cannot read file"):
            ConfigSection.load_yaml(Path("/nonexistent/gui.yml"))
