import re

import pytest

from devicons.extension_icons_a_l import ICONS_BY_FILE_EXTENSION_A_L
from devicons.extension_icons_m_z import ICONS_BY_FILE_EXTENSION_M_Z
from devicons.style import Style

COLOR_RE = re.compile(r"^#[0-9A-F]{6}$")


@pytest.mark.parametrize(
    "ext, color",
    [
        ("py", "#FFBC03"),
        ("rs", "#DEA584"),
        ("md", "#DDDDDD"),
        ("toml", "#9C4221"),
        ("zip", "#ECA517"),
        ("🔥", "#FF4C1F"),
    ],
)
def test_known_colours(ext, color):
    style = ICONS_BY_FILE_EXTENSION_M_Z[ext]
    assert style == Style(style.icon, color)


@pytest.mark.parametrize(
    "first, second",
    [
        ("yaml", "yml"),
        ("md", "markdown"),
        ("xls", "xlsx"),
        ("sha1", "sha512"),
        ("ppt", "pptx"),
        ("spec.ts", "test.ts"),
    ],
)
def test_aliases_share_style(first, second):
    style = ICONS_BY_FILE_EXTENSION_M_Z[first]
    assert Style(style.icon, style.color) == ICONS_BY_FILE_EXTENSION_M_Z[second]


def test_every_colour_is_hex_rgb():
    bad = [k for k, s in ICONS_BY_FILE_EXTENSION_M_Z.items() if not COLOR_RE.match(s.color)]
    assert bad == []


def test_values_are_styles():
    rebuilt = {k: Style(s.icon, s.color) for k, s in ICONS_BY_FILE_EXTENSION_M_Z.items()}
    assert rebuilt == dict(ICONS_BY_FILE_EXTENSION_M_Z)


def test_keys_start_from_m_or_non_ascii():
    bad = [
        k
        for k, s in ICONS_BY_FILE_EXTENSION_M_Z.items()
        if "a" <= k[0] < "m" or k[0] < "a" or Style(s.icon, s.color) != s
    ]
    assert bad == []


def test_keys_are_lower_case():
    bad = [
        k
        for k, s in ICONS_BY_FILE_EXTENSION_M_Z.items()
        if k != k.lower() or Style(s.icon, s.color) != s
    ]
    assert bad == []


def test_no_overlap_with_first_half():
    merged = {
        k: Style(s.icon, s.color)
        for table in (ICONS_BY_FILE_EXTENSION_A_L, ICONS_BY_FILE_EXTENSION_M_Z)
        for k, s in table.items()
    }
    assert len(merged) == len(ICONS_BY_FILE_EXTENSION_A_L) + len(ICONS_BY_FILE_EXTENSION_M_Z)


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        ICONS_BY_FILE_EXTENSION_M_Z["new"] = Style("x", "#000000")  # type: ignore[index]


def test_missing_key_raises():
    fallback = Style("?", "#000000")
    assert ICONS_BY_FILE_EXTENSION_M_Z.get("lua", fallback) is fallback
    with pytest.raises(KeyError):
        ICONS_BY_FILE_EXTENSION_M_Z["lua"]