# devicons

Read-only tables of Nerd Font icons and colours for file names, file
extensions, desktop environments, operating systems and window managers.
There are also default styles for plain files, directories and symbolic
links.

## Installation

```
pip install .
```

The icons are Nerd Font glyphs, so a terminal needs a Nerd Font to show them.

## The `Style` type

`devicons.style.Style` is a frozen dataclass with two fields:

- `icon`: the glyph, as a string
- `color`: a `"#RRGGBB"` string. It defaults to `""`, meaning no colour is
  defined.

The same module defines three fallback styles:

- `DEFAULT_STYLE`: for a regular file that no table matches
- `DIR_STYLE`: for a directory
- `SYMLINK_STYLE`: for a symbolic link

## The tables

Each table is a read-only mapping (`types.MappingProxyType`) from a string
key to a `Style`.

| Module | Table | Keyed by |
| --- | --- | --- |
| `devicons.filename_icons` | `ICONS_BY_FILENAME` | exact file or directory name, such as `.gitignore`, `package.json` or `makefile` |
| `devicons.extension_icons_a_l` | `ICONS_BY_FILE_EXTENSION_A_L` | extensions that begin with a digit, an upper-case letter, or `a` to `l` |
| `devicons.extension_icons_m_z` | `ICONS_BY_FILE_EXTENSION_M_Z` | extensions that begin with `m` to `z`, or with a non-ASCII character |
| `devicons.system_icons` | `ICONS_BY_DESKTOP_ENVIRONMENT` | desktop environment, such as `gnome` or `xfce` |
| `devicons.system_icons` | `ICONS_BY_OPERATING_SYSTEM` | operating system, such as `debian` or `freebsd` |
| `devicons.system_icons` | `ICONS_BY_WINDOW_MANAGER` | window manager, such as `i3` or `sway` |

Extension keys are written without the leading dot. A few of them contain
a dot themselves, for example `d.ts`, `spec.ts` and `blade.php`.

The two extension tables have no keys in common, so they can be merged into
one mapping:

```python
from devicons.extension_icons_a_l import ICONS_BY_FILE_EXTENSION_A_L
from devicons.extension_icons_m_z import ICONS_BY_FILE_EXTENSION_M_Z
from devicons.filename_icons import ICONS_BY_FILENAME
from devicons.style import DEFAULT_STYLE

extensions = {**ICONS_BY_FILE_EXTENSION_A_L, **ICONS_BY_FILE_EXTENSION_M_Z}

style = ICONS_BY_FILENAME.get("package.json", DEFAULT_STYLE)
print(style.icon, style.color)

print(extensions["py"].color)   # "#FFBC03"
```

## What this package does not do

The package holds data only. It has no function that takes a file name or a
path and picks a style for it. It does not look at the file system, so it
cannot tell a directory or a symbolic link from a file. It has no
command-line program for listing a directory with icons. To get a style for
a file, you look it up in the tables yourself: check the file name first,
then its extension, and fall back to `DEFAULT_STYLE`, `DIR_STYLE` or
`SYMLINK_STYLE`.