# SPDX-License-Identifier: MIT
"""Sublime Text project file model and writer.

A SublimeTextProject holds the folders and build systems of one
.sublime-project file. render() turns it into text:

    {
        "name": "myproject",
        "folders":
        [
            {
                "path": "/src/myproject",
                "folder_exclude_patterns": [ "CMakeFiles" ],
                "file_exclude_patterns": [ "CMakeCache.txt" ]
            }
        ],
        "build_systems":
        [
            {
                "name": "myproject: default",
                "working_dir": "/build/myproject",
                "cmd": [ "/usr/bin/make" ]
            }
        ]
    }

Strings are escaped for backslash and double quote only.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import TextIO

PROJECT_FILE_EXTENSION = ".sublime-project"

_INDENT = "    "


def escape(value: str) -> str:
    """Escape a string for embedding between double quotes."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def project_filename(output_dir: str, name: str) -> str:
    """Path of the project file for a project written to output_dir."""
    return f"{output_dir}/{name}{PROJECT_FILE_EXTENSION}"


@dataclass
class Folder:
    """A folder shown in the editor's sidebar.

    Attributes:
        path: Directory path.
        folder_exclude_patterns: Directory names to hide.
        file_exclude_patterns: File names to hide.
    """

    path: str
    folder_exclude_patterns: list[str] = field(default_factory=list)
    file_exclude_patterns: list[str] = field(default_factory=list)

    def add_folder_exclude_pattern(self, pattern: str) -> None:
        self.folder_exclude_patterns.append(pattern)

    def add_file_exclude_pattern(self, pattern: str) -> None:
        self.file_exclude_patterns.append(pattern)


@dataclass
class BuildSystem:
    """A build command selectable from the editor's Tools menu.

    Attributes:
        name: Label in the build system menu.
        working_dir: Directory the command runs in.
        cmd: Program followed by its arguments.
        shell: Run the command through the system shell.
    """

    name: str
    working_dir: str
    cmd: list[str] = field(default_factory=list)
    shell: bool = False

    def add_to_command(self, part: str) -> None:
        self.cmd.append(part)


@dataclass
class SublimeTextProject:
    """Contents of one .sublime-project file."""

    name: str = ""
    filename: str = ""
    folders: list[Folder] = field(default_factory=list)
    build_systems: list[BuildSystem] = field(default_factory=list)

    def set_name(self, name: str) -> None:
        self.name = name

    def add_folder(self, folder: Folder) -> None:
        self.folders.append(folder)

    def add_build_system(self, build_system: BuildSystem) -> None:
        self.build_systems.append(build_system)


def render(project: SublimeTextProject) -> str:
    """Render a project as .sublime-project text."""
    out = io.StringIO()
    out.write("{\n")
    _write_field(out, 1, "name", _quote(project.name), last=False)

    out.write(f'{_INDENT}"folders":\n')
    out.write(f"{_INDENT}[\n")
    _write_entries(out, [_folder_fields(f) for f in project.folders])
    out.write(f"{_INDENT}],\n")

    out.write(f'{_INDENT}"build_systems":\n')
    out.write(f"{_INDENT}[\n")
    _write_entries(out, [_build_system_fields(bs) for bs in project.build_systems])
    out.write(f"{_INDENT}]\n")

    out.write("}\n")
    return out.getvalue()


def _quote(value: str) -> str:
    return f'"{escape(value)}"'


def _array(values: list[str]) -> str:
    # Always "[ ... ]", so an empty list is "[  ]"
    return "[ " + ", ".join(_quote(v) for v in values) + " ]"


def _folder_fields(folder: Folder) -> list[tuple[str, str]]:
    return [
        ("path", _quote(folder.path)),
        ("folder_exclude_patterns", _array(folder.folder_exclude_patterns)),
        ("file_exclude_patterns", _array(folder.file_exclude_patterns)),
    ]


def _build_system_fields(build_system: BuildSystem) -> list[tuple[str, str]]:
    fields = [
        ("name", _quote(build_system.name)),
        ("working_dir", _quote(build_system.working_dir)),
    ]
    if build_system.shell:
        fields.append(("shell", "true"))
    fields.append(("cmd", _array(build_system.cmd)))
    return fields


def _write_field(out: TextIO, depth: int, key: str, value: str, *, last: bool) -> None:
    comma = "" if last else ","
    out.write(f'{_INDENT * depth}"{key}": {value}{comma}\n')


def _write_entries(out: TextIO, entries: list[list[tuple[str, str]]]) -> None:
    """Write a list of objects, comma separated with no trailing comma."""
    for i, fields in enumerate(entries):
        out.write(f"{_INDENT * 2}{{\n")
        for j, (key, value) in enumerate(fields):
            _write_field(out, 3, key, value, last=j + 1 == len(fields))
        out.write(f"{_INDENT * 2}}}")
        if i + 1 != len(entries):
            out.write(",")
        out.write("\n")
