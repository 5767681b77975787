"""Icons for file extensions sorting from ``m`` onwards.

Holds the entries whose extension begins with a lower-case letter from
``m`` to ``z``, and those beginning with a non-ASCII character.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from devicons.style import Style

__all__ = ["ICONS_BY_FILE_EXTENSION_M_Z"]

ICONS_BY_FILE_EXTENSION_M_Z: Mapping[str, Style] = MappingProxyType(
    {
        "m": Style("", "#599EFF"),
        "m3u": Style("󰲹", "#ED95AE"),
        "m3u8": Style("󰲹", "#ED95AE"),
        "m4a": Style("", "#00AFFF"),
        "m4v": Style("", "#FD971F"),
        "magnet": Style("", "#A51B16"),
        "makefile": Style("", "#6D8086"),
        "markdown": Style("", "#DDDDDD"),
        "material": Style("", "#B83998"),
        "md": Style("", "#DDDDDD"),
        "md5": Style("󰕥", "#8C86AF"),
        "mdx": Style("", "#519ABA"),
        "mint": Style("󰌪", "#87C095"),
        "mjs": Style("", "#F1E05A"),
        "mk": Style("", "#6D8086"),
        "mkv": Style("", "#FD971F"),
        "ml": Style("", "#E37933"),
        "mli": Style("", "#E37933"),
        "mm": Style("", "#519ABA"),
        "mo": Style("", "#9772FB"),
        "mobi": Style("", "#EAB16D"),
        "mojo": Style("", "#FF4C1F"),
        "mov": Style("", "#FD971F"),
        "mp3": Style("", "#00AFFF"),
        "mp4": Style("", "#FD971F"),
        "mpp": Style("", "#519ABA"),
        "msf": Style("", "#137BE1"),
        "mts": Style("", "#519ABA"),
        "mustache": Style("", "#E37933"),
        "nfo": Style("", "#FFFFCD"),
        "nim": Style("", "#F3D400"),
        "nix": Style("", "#7EBAE4"),
        "norg": Style("", "#4878BE"),
        "nswag": Style("", "#85EA2D"),
        "nu": Style("", "#3AA675"),
        "o": Style("", "#9F0500"),
        "obj": Style("󰆧", "#888888"),
        "odf": Style("", "#FF5A96"),
        "odg": Style("", "#FFFB57"),
        "odin": Style("󰟢", "#3882D2"),
        "odp": Style("", "#FE9C45"),
        "ods": Style("", "#78FC4E"),
        "odt": Style("", "#2DCBFD"),
        "oga": Style("", "#0075AA"),
        "ogg": Style("", "#0075AA"),
        "ogv": Style("", "#FD971F"),
        "ogx": Style("", "#FD971F"),
        "opus": Style("", "#0075AA"),
        "org": Style("", "#77AA99"),
        "otf": Style("", "#ECECEC"),
        "out": Style("", "#9F0500"),
        "part": Style("", "#44CDA8"),
        "patch": Style("", "#41535B"),
        "pck": Style("", "#6D8086"),
        "pcm": Style("", "#0075AA"),
        "pdf": Style("", "#B30B00"),
        "php": Style("", "#A074C4"),
        "pl": Style("", "#519ABA"),
        "pls": Style("󰲹", "#ED95AE"),
        "ply": Style("󰆧", "#888888"),
        "pm": Style("", "#519ABA"),
        "png": Style("", "#A074C4"),
        "po": Style("", "#2596BE"),
        "pot": Style("", "#2596BE"),
        "pp": Style("", "#FFA61A"),
        "ppt": Style("󰈧", "#CB4A32"),
        "pptx": Style("󰈧", "#CB4A32"),
        "prisma": Style("", "#5A67D8"),
        "pro": Style("", "#E4B854"),
        "ps1": Style("󰨊", "#4273CA"),
        "psb": Style("", "#519ABA"),
        "psd": Style("", "#519ABA"),
        "psd1": Style("󰨊", "#6975C4"),
        "psm1": Style("󰨊", "#6975C4"),
        "pub": Style("󰷖", "#E3C58E"),
        "pxd": Style("", "#5AA7E4"),
        "pxi": Style("", "#5AA7E4"),
        "py": Style("", "#FFBC03"),
        "pyc": Style("", "#FFE291"),
        "pyd": Style("", "#FFE291"),
        "pyi": Style("", "#FFBC03"),
        "pyo": Style("", "#FFE291"),
        "pyw": Style("", "#5AA7E4"),
        "pyx": Style("", "#5AA7E4"),
        "qm": Style("", "#2596BE"),
        "qml": Style("", "#40CD52"),
        "qrc": Style("", "#40CD52"),
        "qss": Style("", "#40CD52"),
        "query": Style("", "#90A850"),
        "r": Style("󰟔", "#2266BA"),
        "rake": Style("", "#701516"),
        "rar": Style("", "#ECA517"),
        "razor": Style("󱦘", "#512BD4"),
        "rb": Style("", "#701516"),
        "res": Style("", "#CC3E44"),
        "resi": Style("", "#F55385"),
        "rlib": Style("", "#DEA584"),
        "rmd": Style("", "#519ABA"),
        "rproj": Style("󰗆", "#358A5B"),
        "rs": Style("", "#DEA584"),
        "rss": Style("", "#FB9D3B"),
        "s": Style("", "#0071C5"),
        "sass": Style("", "#F55385"),
        "sbt": Style("", "#CC3E44"),
        "sc": Style("", "#CC3E44"),
        "scad": Style("", "#F9D72C"),
        "scala": Style("", "#CC3E44"),
        "scm": Style("󰘧", "#EEEEEE"),
        "scss": Style("", "#F55385"),
        "sh": Style("", "#4D5A5E"),
        "sha1": Style("󰕥", "#8C86AF"),
        "sha224": Style("󰕥", "#8C86AF"),
        "sha256": Style("󰕥", "#8C86AF"),
        "sha384": Style("󰕥", "#8C86AF"),
        "sha512": Style("󰕥", "#8C86AF"),
        "sig": Style("󰘧", "#E37933"),
        "signature": Style("󰘧", "#E37933"),
        "skp": Style("󰻫", "#839463"),
        "sldasm": Style("󰻫", "#839463"),
        "sldprt": Style("󰻫", "#839463"),
        "slim": Style("", "#E34C26"),
        "sln": Style("", "#854CC7"),
        "slnx": Style("", "#854CC7"),
        "slvs": Style("󰻫", "#839463"),
        "sml": Style("󰘧", "#E37933"),
        "so": Style("", "#DCDDD6"),
        "sol": Style("", "#519ABA"),
        "spec.js": Style("", "#CBCB41"),
        "spec.jsx": Style("", "#20C2E3"),
        "spec.ts": Style("", "#519ABA"),
        "spec.tsx": Style("", "#1354BF"),
        "spx": Style("", "#0075AA"),
        "sql": Style("", "#DAD8D8"),
        "sqlite": Style("", "#DAD8D8"),
        "sqlite3": Style("", "#DAD8D8"),
        "srt": Style("󰨖", "#FFB713"),
        "ssa": Style("󰨖", "#FFB713"),
        "ste": Style("󰻫", "#839463"),
        "step": Style("󰻫", "#839463"),
        "stl": Style("󰆧", "#888888"),
        "stp": Style("󰻫", "#839463"),
        "strings": Style("", "#2596BE"),
        "styl": Style("", "#8DC149"),
        "sub": Style("󰨖", "#FFB713"),
        "sublime": Style("", "#E37933"),
        "suo": Style("", "#854CC7"),
        "sv": Style("󰍛", "#019833"),
        "svelte": Style("", "#FF3E00"),
        "svg": Style("󰜡", "#FFB13B"),
        "svh": Style("󰍛", "#019833"),
        "swift": Style("", "#E37933"),
        "t": Style("", "#519ABA"),
        "tbc": Style("󰛓", "#1E5CB3"),
        "tcl": Style("󰛓", "#1E5CB3"),
        "templ": Style("", "#DBBD30"),
        "terminal": Style("", "#31B53E"),
        "test.js": Style("", "#CBCB41"),
        "test.jsx": Style("", "#20C2E3"),
        "test.ts": Style("", "#519ABA"),
        "test.tsx": Style("", "#1354BF"),
        "tex": Style("", "#3D6117"),
        "tf": Style("", "#5F43E9"),
        "tfvars": Style("", "#5F43E9"),
        "tgz": Style("", "#ECA517"),
        "tmux": Style("", "#14BA19"),
        "toml": Style("", "#9C4221"),
        "torrent": Style("", "#44CDA8"),
        "tres": Style("", "#6D8086"),
        "ts": Style("", "#519ABA"),
        "tscn": Style("", "#6D8086"),
        "tsconfig": Style("", "#FF8700"),
        "tsx": Style("", "#1354BF"),
        "ttf": Style("", "#ECECEC"),
        "twig": Style("", "#8DC149"),
        "txt": Style("󰈙", "#89E051"),
        "txz": Style("", "#ECA517"),
        "typ": Style("", "#0DBCC0"),
        "typoscript": Style("", "#FF8700"),
        "ui": Style("", "#015BF0"),
        "v": Style("󰍛", "#019833"),
        "vala": Style("", "#7B3DB9"),
        "vh": Style("󰍛", "#019833"),
        "vhd": Style("󰍛", "#019833"),
        "vhdl": Style("󰍛", "#019833"),
        "vi": Style("", "#FEC60A"),
        "vim": Style("", "#019833"),
        "vsh": Style("", "#5D87BF"),
        "vsix": Style("", "#854CC7"),
        "vue": Style("", "#8DC149"),
        "wasm": Style("", "#5C4CDB"),
        "wav": Style("", "#00AFFF"),
        "webm": Style("", "#FD971F"),
        "webmanifest": Style("", "#F1E05A"),
        "webp": Style("", "#A074C4"),
        "webpack": Style("󰜫", "#519ABA"),
        "wma": Style("", "#00AFFF"),
        "woff": Style("", "#ECECEC"),
        "woff2": Style("", "#ECECEC"),
        "wrl": Style("󰆧", "#888888"),
        "wrz": Style("󰆧", "#888888"),
        "wv": Style("", "#00AFFF"),
        "wvc": Style("", "#00AFFF"),
        "x": Style("", "#599EFF"),
        "xaml": Style("󰙳", "#512BD4"),
        "xcf": Style("", "#635B46"),
        "xcplayground": Style("", "#E37933"),
        "xcstrings": Style("", "#2596BE"),
        "xls": Style("󰈛", "#207245"),
        "xlsx": Style("󰈛", "#207245"),
        "xm": Style("", "#519ABA"),
        "xml": Style("󰗀", "#E37933"),
        "xpi": Style("", "#FF1B01"),
        "xul": Style("", "#E37933"),
        "xz": Style("", "#ECA517"),
        "yaml": Style("", "#6D8086"),
        "yml": Style("", "#6D8086"),
        "zig": Style("", "#F69A1B"),
        "zip": Style("", "#ECA517"),
        "zsh": Style("", "#89E051"),
        "zst": Style("", "#ECA517"),
        "🔥": Style("", "#FF4C1F"),
    }
)