"""Icons for file extensions sorting before ``m``.

Holds the entries whose extension begins with a digit, an upper-case
letter, or a lower-case letter from ``a`` to ``l``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from devicons.style import Style

__all__ = ["ICONS_BY_FILE_EXTENSION_A_L"]

ICONS_BY_FILE_EXTENSION_A_L: Mapping[str, Style] = MappingProxyType(
    {
        "3gp": Style("", "#FD971F"),
        "3mf": Style("󰆧", "#888888"),
        "7z": Style("", "#ECA517"),
        "Dockerfile": Style("󰡨", "#458EE6"),
        "R": Style("󰟔", "#2266BA"),
        "a": Style("", "#DCDDD6"),
        "aac": Style("", "#00AFFF"),
        "ada": Style("", "#599EFF"),
        "adb": Style("", "#599EFF"),
        "ads": Style("", "#A074C4"),
        "ai": Style("", "#CBCB41"),
        "aif": Style("", "#00AFFF"),
        "aiff": Style("", "#00AFFF"),
        "android": Style("", "#34A853"),
        "ape": Style("", "#00AFFF"),
        "apk": Style("", "#34A853"),
        "apl": Style("", "#24A148"),
        "app": Style("", "#9F0500"),
        "applescript": Style("", "#6D8085"),
        "asc": Style("󰦝", "#576D7F"),
        "asm": Style("", "#0091BD"),
        "ass": Style("󰨖", "#FFB713"),
        "astro": Style("", "#E23F67"),
        "avif": Style("", "#A074C4"),
        "awk": Style("", "#4D5A5E"),
        "azcli": Style("", "#0078D4"),
        "bak": Style("󰁯", "#6D8086"),
        "bash": Style("", "#89E051"),
        "bat": Style("", "#C1F12E"),
        "bazel": Style("", "#89E051"),
        "bib": Style("󱉟", "#CBCB41"),
        "bicep": Style("", "#519ABA"),
        "bicepparam": Style("", "#9F74B3"),
        "bin": Style("", "#9F0500"),
        "blade.php": Style("", "#F05340"),
        "blend": Style("󰂫", "#EA7600"),
        "blp": Style("󰺾", "#5796E2"),
        "bmp": Style("", "#A074C4"),
        "bqn": Style("", "#24A148"),
        "brep": Style("󰻫", "#839463"),
        "bz": Style("", "#ECA517"),
        "bz2": Style("", "#ECA517"),
        "bz3": Style("", "#ECA517"),
        "bzl": Style("", "#89E051"),
        "c": Style("", "#599EFF"),
        "c++": Style("", "#F34B7D"),
        "cache": Style("", "#FFFFFF"),
        "cast": Style("", "#FD971F"),
        "cbl": Style("", "#005CA5"),
        "cc": Style("", "#F34B7D"),
        "ccm": Style("", "#F34B7D"),
        "cfg": Style("", "#6D8086"),
        "cjs": Style("", "#CBCB41"),
        "clj": Style("", "#8DC149"),
        "cljc": Style("", "#8DC149"),
        "cljd": Style("", "#519ABA"),
        "cljs": Style("", "#519ABA"),
        "cmake": Style("", "#DCE3EB"),
        "cob": Style("", "#005CA5"),
        "cobol": Style("", "#005CA5"),
        "coffee": Style("", "#CBCB41"),
        "conda": Style("", "#43B02A"),
        "conf": Style("", "#6D8086"),
        "config.ru": Style("", "#701516"),
        "cow": Style("󰆚", "#965824"),
        "cp": Style("", "#519ABA"),
        "cpp": Style("", "#519ABA"),
        "cppm": Style("", "#519ABA"),
        "cpy": Style("", "#005CA5"),
        "cr": Style("", "#C8C8C8"),
        "crdownload": Style("", "#44CDA8"),
        "cs": Style("󰌛", "#596706"),
        "csh": Style("", "#4D5A5E"),
        "cshtml": Style("󱦗", "#512BD4"),
        "cson": Style("", "#CBCB41"),
        "csproj": Style("󰪮", "#512BD4"),
        "css": Style("", "#42A5F5"),
        "csv": Style("", "#89E051"),
        "cts": Style("", "#519ABA"),
        "cu": Style("", "#89E051"),
        "cue": Style("󰲹", "#ED95AE"),
        "cuh": Style("", "#A074C4"),
        "cxx": Style("", "#519ABA"),
        "cxxm": Style("", "#519ABA"),
        "d": Style("", "#B03931"),
        "d.ts": Style("", "#D59855"),
        "dart": Style("", "#03589C"),
        "db": Style("", "#DAD8D8"),
        "dconf": Style("", "#FFFFFF"),
        "desktop": Style("", "#563D7C"),
        "diff": Style("", "#41535B"),
        "dll": Style("", "#4D2C0B"),
        "doc": Style("󰈬", "#185ABD"),
        "dockerignore": Style("󰡨", "#458EE6"),
        "docx": Style("󰈬", "#185ABD"),
        "dot": Style("󱁉", "#30638E"),
        "download": Style("", "#44CDA8"),
        "drl": Style("", "#FFAFAF"),
        "dropbox": Style("", "#0061FE"),
        "dump": Style("", "#DAD8D8"),
        "dwg": Style("󰻫", "#839463"),
        "dxf": Style("󰻫", "#839463"),
        "ebook": Style("", "#EAB16D"),
        "ebuild": Style("", "#4C416E"),
        "edn": Style("", "#519ABA"),
        "eex": Style("", "#A074C4"),
        "ejs": Style("", "#CBCB41"),
        "el": Style("", "#8172BE"),
        "elc": Style("", "#8172BE"),
        "elf": Style("", "#9F0500"),
        "elm": Style("", "#519ABA"),
        "eln": Style("", "#8172BE"),
        "env": Style("", "#FAF743"),
        "eot": Style("", "#ECECEC"),
        "epp": Style("", "#FFA61A"),
        "epub": Style("", "#EAB16D"),
        "erb": Style("", "#701516"),
        "erl": Style("", "#B83998"),
        "ex": Style("", "#A074C4"),
        "exe": Style("", "#9F0500"),
        "exs": Style("", "#A074C4"),
        "f#": Style("", "#519ABA"),
        "f3d": Style("󰻫", "#839463"),
        "f90": Style("󱈚", "#734F96"),
        "fbx": Style("󰆧", "#888888"),
        "fcbak": Style("", "#CB333B"),
        "fcmacro": Style("", "#CB333B"),
        "fcmat": Style("", "#CB333B"),
        "fcparam": Style("", "#CB333B"),
        "fcscript": Style("", "#CB333B"),
        "fcstd": Style("", "#CB333B"),
        "fcstd1": Style("", "#CB333B"),
        "fctb": Style("", "#CB333B"),
        "fctl": Style("", "#CB333B"),
        "fdmdownload": Style("", "#44CDA8"),
        "feature": Style("", "#00A818"),
        "fish": Style("", "#4D5A5E"),
        "flac": Style("", "#0075AA"),
        "flc": Style("", "#ECECEC"),
        "flf": Style("", "#ECECEC"),
        "fnl": Style("", "#FFF3D7"),
        "fodg": Style("", "#FFFB57"),
        "fodp": Style("", "#FE9C45"),
        "fods": Style("", "#78FC4E"),
        "fodt": Style("", "#2DCBFD"),
        "fs": Style("", "#519ABA"),
        "fsi": Style("", "#519ABA"),
        "fsscript": Style("", "#519ABA"),
        "fsx": Style("", "#519ABA"),
        "gcode": Style("󰐫", "#1471AD"),
        "gd": Style("", "#6D8086"),
        "gemspec": Style("", "#701516"),
        "gif": Style("", "#A074C4"),
        "git": Style("", "#F14C28"),
        "glb": Style("", "#FFB13B"),
        "gleam": Style("", "#FFAFF3"),
        "gnumakefile": Style("", "#6D8086"),
        "go": Style("", "#519ABA"),
        "godot": Style("", "#6D8086"),
        "gpr": Style("", "#6D8086"),
        "gql": Style("", "#E535AB"),
        "gradle": Style("", "#005F87"),
        "graphql": Style("", "#E535AB"),
        "gresource": Style("", "#FFFFFF"),
        "gv": Style("󱁉", "#30638E"),
        "gz": Style("", "#ECA517"),
        "h": Style("", "#A074C4"),
        "haml": Style("", "#EAEAE1"),
        "hbs": Style("", "#F0772B"),
        "heex": Style("", "#A074C4"),
        "hex": Style("", "#2E63FF"),
        "hh": Style("", "#A074C4"),
        "hpp": Style("", "#A074C4"),
        "hrl": Style("", "#B83998"),
        "hs": Style("", "#A074C4"),
        "htm": Style("", "#E34C26"),
        "html": Style("", "#E44D26"),
        "http": Style("", "#008EC7"),
        "huff": Style("󰡘", "#4242C7"),
        "hurl": Style("", "#FF0288"),
        "hx": Style("", "#EA8220"),
        "hxx": Style("", "#A074C4"),
        "ical": Style("", "#2B2E83"),
        "icalendar": Style("", "#2B2E83"),
        "ico": Style("", "#CBCB41"),
        "ics": Style("", "#2B2E83"),
        "ifb": Style("", "#2B2E83"),
        "ifc": Style("󰻫", "#839463"),
        "ige": Style("󰻫", "#839463"),
        "iges": Style("󰻫", "#839463"),
        "igs": Style("󰻫", "#839463"),
        "image": Style("", "#D0BEC8"),
        "img": Style("", "#D0BEC8"),
        "import": Style("", "#ECECEC"),
        "info": Style("", "#FFFFCD"),
        "ini": Style("", "#6D8086"),
        "ino": Style("", "#56B6C2"),
        "ipynb": Style("", "#F57D01"),
        "iso": Style("", "#D0BEC8"),
        "ixx": Style("", "#519ABA"),
        "java": Style("", "#CC3E44"),
        "jl": Style("", "#A270BA"),
        "jpeg": Style("", "#A074C4"),
        "jpg": Style("", "#A074C4"),
        "js": Style("", "#CBCB41"),
        "json": Style("", "#CBCB41"),
        "json5": Style("", "#CBCB41"),
        "jsonc": Style("", "#CBCB41"),
        "jsx": Style("", "#20C2E3"),
        "jwmrc": Style("", "#0078CD"),
        "jxl": Style("", "#A074C4"),
        "kbx": Style("󰯄", "#737672"),
        "kdb": Style("", "#529B34"),
        "kdbx": Style("", "#529B34"),
        "kdenlive": Style("", "#83B8F2"),
        "kdenlivetitle": Style("", "#83B8F2"),
        "kicad_dru": Style("", "#FFFFFF"),
        "kicad_mod": Style("", "#FFFFFF"),
        "kicad_pcb": Style("", "#FFFFFF"),
        "kicad_prl": Style("", "#FFFFFF"),
        "kicad_pro": Style("", "#FFFFFF"),
        "kicad_sch": Style("", "#FFFFFF"),
        "kicad_sym": Style("", "#FFFFFF"),
        "kicad_wks": Style("", "#FFFFFF"),
        "ko": Style("", "#DCDDD6"),
        "kpp": Style("", "#F245FB"),
        "kra": Style("", "#F245FB"),
        "krz": Style("", "#F245FB"),
        "ksh": Style("", "#4D5A5E"),
        "kt": Style("", "#7F52FF"),
        "kts": Style("", "#7F52FF"),
        "lck": Style("", "#BBBBBB"),
        "leex": Style("", "#A074C4"),
        "less": Style("", "#563D7C"),
        "lff": Style("", "#ECECEC"),
        "lhs": Style("", "#A074C4"),
        "lib": Style("", "#4D2C0B"),
        "license": Style("", "#CBCB41"),
        "liquid": Style("", "#95BF47"),
        "lock": Style("", "#BBBBBB"),
        "log": Style("󰌱", "#DDDDDD"),
        "lrc": Style("󰨖", "#FFB713"),
        "lua": Style("", "#51A0CF"),
        "luac": Style("", "#51A0CF"),
        "luau": Style("", "#00A2FF"),
    }
)