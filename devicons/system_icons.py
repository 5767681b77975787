"""Icons for desktop environments, operating systems and window managers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from devicons.style import Style

__all__ = [
    "ICONS_BY_DESKTOP_ENVIRONMENT",
    "ICONS_BY_OPERATING_SYSTEM",
    "ICONS_BY_WINDOW_MANAGER",
]

ICONS_BY_DESKTOP_ENVIRONMENT: Mapping[str, Style] = MappingProxyType(
    {
        "budgie": Style("", "#4E5361"),
        "cinnamon": Style("", "#DC682E"),
        "gnome": Style("", "#FFFFFF"),
        "lxde": Style("", "#A4A4A4"),
        "lxqt": Style("", "#0191D2"),
        "mate": Style("", "#9BDA5C"),
        "plasma": Style("", "#1B89F4"),
        "xfce": Style("", "#00AADF"),
    }
)

ICONS_BY_OPERATING_SYSTEM: Mapping[str, Style] = MappingProxyType(
    {
        "alma": Style("", "#FF4649"),
        "alpine": Style("", "#0D597F"),
        "aosc": Style("", "#C00000"),
        "apple": Style("", "#A2AAAD"),
        "arch": Style("󰣇", "#0F94D2"),
        "archcraft": Style("", "#86BBA3"),
        "archlabs": Style("", "#503F42"),
        "arcolinux": Style("", "#6690EB"),
        "artix": Style("", "#41B4D7"),
        "biglinux": Style("", "#189FC8"),
        "centos": Style("", "#A2518D"),
        "crystallinux": Style("", "#A900FF"),
        "debian": Style("", "#A80030"),
        "deepin": Style("", "#2CA7F8"),
        "devuan": Style("", "#404A52"),
        "elementary": Style("", "#5890C2"),
        "endeavour": Style("", "#7B3DB9"),
        "fedora": Style("", "#072A5E"),
        "freebsd": Style("", "#C90F02"),
        "garuda": Style("", "#2974E1"),
        "gentoo": Style("󰣨", "#B1ABCE"),
        "guix": Style("", "#FFCC00"),
        "hyperbola": Style("", "#C0C0C0"),
        "illumos": Style("", "#FF430F"),
        "kali": Style("", "#2777FF"),
        "kdeneon": Style("", "#20A6A4"),
        "kubuntu": Style("", "#007AC2"),
        "leap": Style("", "#FBC75D"),
        "linux": Style("", "#FDFDFB"),
        "locos": Style("", "#FAB402"),
        "lxle": Style("", "#474747"),
        "mageia": Style("", "#2397D4"),
        "manjaro": Style("", "#33B959"),
        "mint": Style("󰣭", "#66AF3D"),
        "mxlinux": Style("", "#FFFFFF"),
        "nixos": Style("", "#7AB1DB"),
        "nobara": Style("", "#FFFFFF"),
        "openbsd": Style("", "#F2CA30"),
        "opensuse": Style("", "#6FB424"),
        "parabola": Style("", "#797DAC"),
        "parrot": Style("", "#54DEFF"),
        "pop_os": Style("", "#48B9C7"),
        "postmarketos": Style("", "#009900"),
        "puppylinux": Style("", "#A2AEB9"),
        "qubesos": Style("", "#3774D8"),
        "raspberry_pi": Style("", "#BE1848"),
        "redhat": Style("󱄛", "#EE0000"),
        "rocky": Style("", "#0FB37D"),
        "sabayon": Style("", "#C6C6C6"),
        "slackware": Style("", "#475FA9"),
        "solus": Style("", "#4B5163"),
        "tails": Style("", "#56347C"),
        "trisquel": Style("", "#0F58B6"),
        "tumbleweed": Style("", "#35B9AB"),
        "ubuntu": Style("", "#DD4814"),
        "vanillaos": Style("", "#FABD4D"),
        "void": Style("", "#295340"),
        "windows": Style("", "#00A4EF"),
        "xerolinux": Style("", "#888FE2"),
        "zorin": Style("", "#14A1E8"),
    }
)

ICONS_BY_WINDOW_MANAGER: Mapping[str, Style] = MappingProxyType(
    {
        "awesomewm": Style("", "#535D6C"),
        "bspwm": Style("", "#4F4F4F"),
        "dwm": Style("", "#1177AA"),
        "enlightenment": Style("", "#FFFFFF"),
        "fluxbox": Style("", "#555555"),
        "hyprland": Style("", "#00AAAE"),
        "i3": Style("", "#E8EBEE"),
        "jwm": Style("", "#0078CD"),
        "qtile": Style("", "#FFFFFF"),
        "river": Style("", "#000000"),
        "sway": Style("", "#68751C"),
        "xmonad": Style("", "#FD4D5D"),
    }
)