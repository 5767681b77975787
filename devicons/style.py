"""The icon and colour suggested for a file, directory or symlink."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Style", "DEFAULT_STYLE", "DIR_STYLE", "SYMLINK_STYLE"]


@dataclass(frozen=True)
class Style:
    """An icon glyph and its colour.

    ``color`` is a ``"#RRGGBB"`` string, or empty when no colour is defined.
    """

    icon: str
    color: str = ""


DEFAULT_STYLE = Style(icon="", color="#ABB2BF")
DIR_STYLE = Style(icon="", color="#61AFEF")
SYMLINK_STYLE = Style(icon="", color="#56B6C2")