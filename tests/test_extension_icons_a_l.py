import re

import pytest

from devicons.extension_icons_a_l import ICONS_BY_FILE_EXTENSION_A_L
from devicons.style import Style

HEX_COLOR = re.compile(r"#[0-9A-F]{6}")


def test_every_color_is_upper_hex():
    bad = [
        ext
        for ext, style in ICONS_BY_FILE_EXTENSION_A_L.items()
        if Style(style.icon, style.color) != style or not HEX_COLOR.fullmatch(style.color)
    ]
    assert bad == []


def test_all_keys_sort_before_m():
    bad = [
        key
        for key, style in ICONS_BY_FILE_EXTENSION_A_L.items()
        if key >= "m" or Style(style.icon, style.color) != style
    ]
    assert bad == []


def test_values_are_styles():
    rebuilt = {
        ext: Style(style.icon, style.color)
        for ext, style in ICONS_BY_FILE_EXTENSION_A_L.items()
    }
    assert rebuilt == dict(ICONS_BY_FILE_EXTENSION_A_L)


@pytest.mark.parametrize(
    "ext, color",
    [
        ("c", "#599EFF"),
        ("go", "#519ABA"),
        ("json", "#CBCB41"),
        ("bash", "#89E051"),
        ("html", "#E44D26"),
        ("luau", "#00A2FF"),
        ("3gp", "#FD971F"),
        ("Dockerfile", "#458EE6"),
        ("R", "#2266BA"),
    ],
)
def test_pinned_colors(ext, color):
    style = ICONS_BY_FILE_EXTENSION_A_L[ext]
    assert style == Style(style.icon, color)


@pytest.mark.parametrize(
    "first, second",
    [
        ("jpeg", "jpg"),
        ("doc", "docx"),
        ("cpp", "cxx"),
        ("bz2", "gz"),
        ("lua", "luac"),
        ("dwg", "dxf"),
    ],
)
def test_related_extensions_share_style(first, second):
    style = ICONS_BY_FILE_EXTENSION_A_L[first]
    assert Style(style.icon, style.color) == ICONS_BY_FILE_EXTENSION_A_L[second]


def test_distinct_languages_differ():
    c_style = ICONS_BY_FILE_EXTENSION_A_L["c"]
    java_style = ICONS_BY_FILE_EXTENSION_A_L["java"]
    assert c_style == Style(c_style.icon, "#599EFF")
    assert java_style == Style(java_style.icon, "#CC3E44")
    assert c_style != java_style


def test_dockerfile_keeps_case_and_matches_dockerignore_style():
    fallback = Style("?", "#000000")
    assert ICONS_BY_FILE_EXTENSION_A_L.get("dockerfile", fallback) is fallback
    ignore = ICONS_BY_FILE_EXTENSION_A_L["dockerignore"]
    assert ICONS_BY_FILE_EXTENSION_A_L["Dockerfile"] == Style(ignore.icon, ignore.color)


def test_multi_part_extensions_present():
    for ext, color in [
        ("blade.php", "#F05340"),
        ("d.ts", "#D59855"),
        ("config.ru", "#701516"),
    ]:
        style = ICONS_BY_FILE_EXTENSION_A_L[ext]
        assert style == Style(style.icon, color), ext


def test_unknown_extension_missing():
    assert ICONS_BY_FILE_EXTENSION_A_L.get("md") is None
    with pytest.raises(KeyError):
        ICONS_BY_FILE_EXTENSION_A_L["py"]


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        ICONS_BY_FILE_EXTENSION_A_L["new"] = Style("x", "#000000")  # type: ignore[index]


def test_styles_are_frozen():
    style = ICONS_BY_FILE_EXTENSION_A_L["c"]
    with pytest.raises(AttributeError):
        style.color = "#000000"  # type: ignore[misc]
    assert style == Style(style.icon, "#599EFF")