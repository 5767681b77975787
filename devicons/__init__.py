"""Nerd Font icon and colour tables for files, extensions and systems."""

__version__ = "0.1.0"