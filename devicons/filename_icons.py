"""Icons for files and directories matched by their exact name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from devicons.style import Style

__all__ = ["ICONS_BY_FILENAME"]

ICONS_BY_FILENAME: Mapping[str, Style] = MappingProxyType(
    {
        ".SRCINFO": Style("󰣇", "#0F94D2"),
        ".Xauthority": Style("", "#E54D18"),
        ".Xresources": Style("", "#E54D18"),
        ".babelrc": Style("", "#CBCB41"),
        ".bash_profile": Style("", "#89E051"),
        ".bashrc": Style("", "#89E051"),
        ".clang-format": Style("", "#6D8086"),
        ".clang-tidy": Style("", "#6D8086"),
        ".codespellrc": Style("󰓆", "#35DA60"),
        ".condarc": Style("", "#43B02A"),
        ".dockerignore": Style("󰡨", "#458EE6"),
        ".ds_store": Style("", "#41535B"),
        ".editorconfig": Style("", "#FFF2F2"),
        ".env": Style("", "#FAF743"),
        ".eslintignore": Style("", "#4B32C3"),
        ".eslintrc": Style("", "#4B32C3"),
        ".git-blame-ignore-revs": Style("", "#F54D27"),
        ".gitattributes": Style("", "#F54D27"),
        ".gitconfig": Style("", "#F54D27"),
        ".gitignore": Style("", "#F54D27"),
        ".gitlab-ci.yml": Style("", "#E24329"),
        ".gitmodules": Style("", "#F54D27"),
        ".gtkrc-2.0": Style("", "#FFFFFF"),
        ".gvimrc": Style("", "#019833"),
        ".justfile": Style("", "#6D8086"),
        ".luacheckrc": Style("", "#00A2FF"),
        ".luaurc": Style("", "#00A2FF"),
        ".mailmap": Style("󰊢", "#F54D27"),
        ".nanorc": Style("", "#440077"),
        ".npmignore": Style("", "#E8274B"),
        ".npmrc": Style("", "#E8274B"),
        ".nuxtrc": Style("󱄆", "#00C58E"),
        ".nvmrc": Style("", "#5FA04E"),
        ".pre-commit-config.yaml": Style("󰛢", "#F8B424"),
        ".prettierignore": Style("", "#4285F4"),
        ".prettierrc": Style("", "#4285F4"),
        ".prettierrc.cjs": Style("", "#4285F4"),
        ".prettierrc.js": Style("", "#4285F4"),
        ".prettierrc.json": Style("", "#4285F4"),
        ".prettierrc.json5": Style("", "#4285F4"),
        ".prettierrc.mjs": Style("", "#4285F4"),
        ".prettierrc.toml": Style("", "#4285F4"),
        ".prettierrc.yaml": Style("", "#4285F4"),
        ".prettierrc.yml": Style("", "#4285F4"),
        ".pylintrc": Style("", "#6D8086"),
        ".settings.json": Style("", "#854CC7"),
        ".vimrc": Style("", "#019833"),
        ".xinitrc": Style("", "#E54D18"),
        ".xsession": Style("", "#E54D18"),
        ".zprofile": Style("", "#89E051"),
        ".zshenv": Style("", "#89E051"),
        ".zshrc": Style("", "#89E051"),
        "AUTHORS": Style("", "#A172FF"),
        "AUTHORS.txt": Style("", "#A172FF"),
        "Directory.Build.props": Style("", "#00A2FF"),
        "Directory.Build.targets": Style("", "#00A2FF"),
        "Directory.Packages.props": Style("", "#00A2FF"),
        "FreeCAD.conf": Style("", "#CB333B"),
        "Gemfile": Style("", "#701516"),
        "PKGBUILD": Style("", "#0F94D2"),
        "PrusaSlicer.ini": Style("", "#EC6B23"),
        "PrusaSlicerGcodeViewer.ini": Style("", "#EC6B23"),
        "QtProject.conf": Style("", "#40CD52"),
        "_gvimrc": Style("", "#019833"),
        "_vimrc": Style("", "#019833"),
        "brewfile": Style("", "#701516"),
        "bspwmrc": Style("", "#2F2F2F"),
        "build": Style("", "#89E051"),
        "build.gradle": Style("", "#005F87"),
        "build.zig.zon": Style("", "#F69A1B"),
        "bun.lock": Style("", "#EADCD1"),
        "bun.lockb": Style("", "#EADCD1"),
        "cantorrc": Style("", "#1C99F3"),
        "checkhealth": Style("󰓙", "#75B4FB"),
        "cmakelists.txt": Style("", "#DCE3EB"),
        "code_of_conduct": Style("", "#E41662"),
        "code_of_conduct.md": Style("", "#E41662"),
        "commit_editmsg": Style("", "#F54D27"),
        "commitlint.config.js": Style("󰜘", "#2B9689"),
        "commitlint.config.ts": Style("󰜘", "#2B9689"),
        "compose.yaml": Style("󰡨", "#458EE6"),
        "compose.yml": Style("󰡨", "#458EE6"),
        "config": Style("", "#6D8086"),
        "containerfile": Style("󰡨", "#458EE6"),
        "copying": Style("", "#CBCB41"),
        "copying.lesser": Style("", "#CBCB41"),
        "docker-compose.yaml": Style("󰡨", "#458EE6"),
        "docker-compose.yml": Style("󰡨", "#458EE6"),
        "dockerfile": Style("󰡨", "#458EE6"),
        "eslint.config.cjs": Style("", "#4B32C3"),
        "eslint.config.js": Style("", "#4B32C3"),
        "eslint.config.mjs": Style("", "#4B32C3"),
        "eslint.config.ts": Style("", "#4B32C3"),
        "ext_typoscript_setup.txt": Style("", "#FF8700"),
        "favicon.ico": Style("", "#CBCB41"),
        "fp-info-cache": Style("", "#FFFFFF"),
        "fp-lib-table": Style("", "#FFFFFF"),
        "gnumakefile": Style("", "#6D8086"),
        "go.mod": Style("", "#519ABA"),
        "go.sum": Style("", "#519ABA"),
        "go.work": Style("", "#519ABA"),
        "gradle-wrapper.properties": Style("", "#005F87"),
        "gradle.properties": Style("", "#005F87"),
        "gradlew": Style("", "#005F87"),
        "groovy": Style("", "#4A687C"),
        "gruntfile.babel.js": Style("", "#E37933"),
        "gruntfile.coffee": Style("", "#E37933"),
        "gruntfile.js": Style("", "#E37933"),
        "gruntfile.ts": Style("", "#E37933"),
        "gtkrc": Style("", "#FFFFFF"),
        "gulpfile.babel.js": Style("", "#CC3E44"),
        "gulpfile.coffee": Style("", "#CC3E44"),
        "gulpfile.js": Style("", "#CC3E44"),
        "gulpfile.ts": Style("", "#CC3E44"),
        "hypridle.conf": Style("", "#00AAAE"),
        "hyprland.conf": Style("", "#00AAAE"),
        "hyprlandd.conf": Style("", "#00AAAE"),
        "hyprlock.conf": Style("", "#00AAAE"),
        "hyprpaper.conf": Style("", "#00AAAE"),
        "i18n.config.js": Style("󰗊", "#7986CB"),
        "i18n.config.ts": Style("󰗊", "#7986CB"),
        "i3blocks.conf": Style("", "#E8EBEE"),
        "i3status.conf": Style("", "#E8EBEE"),
        "index.theme": Style("", "#2DB96F"),
        "ionic.config.json": Style("", "#4F8FF7"),
        "justfile": Style("", "#6D8086"),
        "kalgebrarc": Style("", "#1C99F3"),
        "kdeglobals": Style("", "#1C99F3"),
        "kdenlive-layoutsrc": Style("", "#83B8F2"),
        "kdenliverc": Style("", "#83B8F2"),
        "kritadisplayrc": Style("", "#F245FB"),
        "kritarc": Style("", "#F245FB"),
        "license": Style("", "#D0BF41"),
        "license.md": Style("", "#D0BF41"),
        "lxde-rc.xml": Style("", "#909090"),
        "lxqt.conf": Style("", "#0192D3"),
        "makefile": Style("", "#6D8086"),
        "mix.lock": Style("", "#A074C4"),
        "mpv.conf": Style("", "#3B1342"),
        "node_modules": Style("", "#E8274B"),
        "nuxt.config.cjs": Style("󱄆", "#00C58E"),
        "nuxt.config.js": Style("󱄆", "#00C58E"),
        "nuxt.config.mjs": Style("󱄆", "#00C58E"),
        "nuxt.config.ts": Style("󱄆", "#00C58E"),
        "package-lock.json": Style("", "#7A0D21"),
        "package.json": Style("", "#E8274B"),
        "platformio.ini": Style("", "#F6822B"),
        "pom.xml": Style("", "#7A0D21"),
        "prettier.config.cjs": Style("", "#4285F4"),
        "prettier.config.js": Style("", "#4285F4"),
        "prettier.config.mjs": Style("", "#4285F4"),
        "prettier.config.ts": Style("", "#4285F4"),
        "procfile": Style("", "#A074C4"),
        "py.typed": Style("", "#FFBC03"),
        "rakefile": Style("", "#701516"),
        "readme": Style("󰂺", "#EDEDED"),
        "readme.md": Style("󰂺", "#EDEDED"),
        "rmd": Style("", "#519ABA"),
        "robots.txt": Style("󰚩", "#5D7096"),
        "security": Style("󰒃", "#BEC4C9"),
        "security.md": Style("󰒃", "#BEC4C9"),
        "settings.gradle": Style("", "#005F87"),
        "svelte.config.js": Style("", "#FF3E00"),
        "sxhkdrc": Style("", "#2F2F2F"),
        "sym-lib-table": Style("", "#FFFFFF"),
        "tailwind.config.js": Style("󱏿", "#20C2E3"),
        "tailwind.config.mjs": Style("󱏿", "#20C2E3"),
        "tailwind.config.ts": Style("󱏿", "#20C2E3"),
        "tmux.conf": Style("", "#14BA19"),
        "tmux.conf.local": Style("", "#14BA19"),
        "tsconfig.json": Style("", "#519ABA"),
        "unlicense": Style("", "#D0BF41"),
        "vagrantfile": Style("", "#1563FF"),
        "vercel.json": Style("", "#FFFFFF"),
        "vlcrc": Style("󰕼", "#EE7A00"),
        "webpack": Style("󰜫", "#519ABA"),
        "weston.ini": Style("", "#FFBB01"),
        "workspace": Style("", "#89E051"),
        "wrangler.jsonc": Style("", "#F48120"),
        "wrangler.toml": Style("", "#F48120"),
        "xmobarrc": Style("", "#FD4D5D"),
        "xmobarrc.hs": Style("", "#FD4D5D"),
        "xmonad.hs": Style("", "#FD4D5D"),
        "xorg.conf": Style("", "#E54D18"),
        "xsettingsd.conf": Style("", "#E54D18"),
    }
)