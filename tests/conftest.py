"""
Pytest configuration and fixtures for configurable-gui tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing configurable_gui
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from configurable_gui import (  # noqa: E402
    GuiConfigurationTable,
    get_default_configuration_table,
    set_default_configuration_table,
)


@pytest.fixture(autouse=True)
def restore_default_table():
    """Put back the default configuration table after each test."""
    original = get_default_configuration_table()
    yield
    set_default_configuration_table(original)


@pytest.fixture
def custom_table() -> GuiConfigurationTable:
    """A table using renamed keys."""
    return GuiConfigurationTable(
        material_section_name="type",
        display_name_section_name="display-name",
        lore_section_name="description",
        amount_section_name="count",
        enchantments_section_name="enchants",
        item_flags_section_name="flags",
    )
