"""
Color code translation for display names and lore.

Config authors write ``&`` color codes (``&aGreen``, ``&lBold``) and hex
colors (``&#ff8800``); the game client expects the section sign form.
"""

from __future__ import annotations

import re

COLOR_CHAR = "§"
ALT_COLOR_CHAR = "&"

_LEGACY_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"
_HEX_PATTERN = re.compile(r"&#([0-9a-fA-F]{6})")
_LEGACY_PATTERN = re.compile(rf"{ALT_COLOR_CHAR}([{_LEGACY_CODES}])")
_STRIP_PATTERN = re.compile(rf"{COLOR_CHAR}[0-9a-fk-orx]", re.IGNORECASE)


def _hex_to_section(match: re.Match) -> str:
    # §x§r§r§g§g§b§b
    return COLOR_CHAR + "x" + "".join(COLOR_CHAR + c for c in match.group(1).lower())


def translate_color_codes(text: str) -> str:
    """Translate ``&#rrggbb`` and ``&<code>`` sequences to section codes.

    Example:
        >>> translate_color_codes("&aHello &#ff0000World")
        '§aHello §x§f§f§0§0§0§0World'
    """
    text = _HEX_PATTERN.sub(_hex_to_section, text)
    return _LEGACY_PATTERN.sub(lambda m: COLOR_CHAR + m.group(1).lower(), text)


def parse_color(value: str | list[str] | None) -> str | list[str] | None:
    """Translate color codes in a string or in every line of a list.

    None passes through unchanged.
    """
    if value is None:
        return None
    if isinstance(value, list):
        return [translate_color_codes(line) for line in value]
    return translate_color_codes(value)


def strip_color(text: str | None) -> str | None:
    """Remove section color codes."""
    if text is None:
        return None
    return _STRIP_PATTERN.sub("", text)
