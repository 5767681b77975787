import re

import pytest

from devicons.style import Style
from devicons.system_icons import (
    ICONS_BY_DESKTOP_ENVIRONMENT,
    ICONS_BY_OPERATING_SYSTEM,
    ICONS_BY_WINDOW_MANAGER,
)

ALL_TABLES = [
    ICONS_BY_DESKTOP_ENVIRONMENT,
    ICONS_BY_OPERATING_SYSTEM,
    ICONS_BY_WINDOW_MANAGER,
]

HEX_COLOR = re.compile(r"#[0-9A-F]{6}")


@pytest.mark.parametrize("table", ALL_TABLES)
def test_colors_are_uppercase_hex(table):
    bad = [
        key
        for key, style in table.items()
        if Style(style.icon, style.color) != style or not HEX_COLOR.fullmatch(style.color)
    ]
    assert bad == []


@pytest.mark.parametrize("table", ALL_TABLES)
def test_keys_are_lowercase(table):
    bad = [
        key
        for key, style in table.items()
        if key != key.lower() or Style(style.icon, style.color) != table[key]
    ]
    assert bad == []


@pytest.mark.parametrize("table", ALL_TABLES)
def test_values_are_styles(table):
    rebuilt = {key: Style(style.icon, style.color) for key, style in table.items()}
    assert rebuilt == dict(table)
    assert len(table) > 0


@pytest.mark.parametrize("table", ALL_TABLES)
def test_tables_are_read_only(table):
    with pytest.raises(TypeError):
        table["new-entry"] = Style("x", "#000000")


def test_desktop_environment_gnome():
    style = ICONS_BY_DESKTOP_ENVIRONMENT["gnome"]
    assert style == Style(style.icon, "#FFFFFF")


def test_desktop_environment_plasma():
    style = ICONS_BY_DESKTOP_ENVIRONMENT["plasma"]
    assert style == Style(style.icon, "#1B89F4")


def test_operating_system_arch():
    assert ICONS_BY_OPERATING_SYSTEM["arch"] == Style("󰣇", "#0F94D2")


def test_operating_system_redhat():
    assert ICONS_BY_OPERATING_SYSTEM["redhat"] == Style("󱄛", "#EE0000")


def test_operating_system_debian():
    style = ICONS_BY_OPERATING_SYSTEM["debian"]
    assert style == Style(style.icon, "#A80030")


def test_window_manager_river():
    style = ICONS_BY_WINDOW_MANAGER["river"]
    assert style == Style(style.icon, "#000000")


def test_window_manager_i3():
    style = ICONS_BY_WINDOW_MANAGER["i3"]
    assert style == Style(style.icon, "#E8EBEE")


def test_unknown_key_raises():
    known = ICONS_BY_WINDOW_MANAGER.get("dwm")
    assert known == Style(known.icon, "#1177AA")
    assert ICONS_BY_WINDOW_MANAGER.get("no-such-manager", Style("", "")) == Style("", "")
    with pytest.raises(KeyError):
        ICONS_BY_WINDOW_MANAGER["no-such-manager"]


def test_get_unknown_returns_none():
    assert ICONS_BY_OPERATING_SYSTEM.get("no-such-os") is None