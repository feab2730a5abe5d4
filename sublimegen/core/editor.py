# SPDX-License-Identifier: MIT
"""Lookups for the configured cache editor.

The build configuration records an interactive cache editor per
sub-project. When it is a curses tool it cannot run from the editor's
build panel, so its target is left out of the project file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from sublimegen.core.subproject import EDIT_COMMAND_VAR

if TYPE_CHECKING:
    from sublimegen.core.subproject import SubProject


@runtime_checkable
class EditorLookup(Protocol):
    """Tells whether a sub-project's cache editor is console based."""

    def uses_console_editor(self, subproject: SubProject) -> bool: ...


class CursesEditorLookup:
    """Detects ccmake in the sub-project's edit command."""

    def __init__(self, marker: str = "ccmake") -> None:
        self.marker = marker

    def uses_console_editor(self, subproject: SubProject) -> bool:
        command = subproject.get_definition(EDIT_COMMAND_VAR) or ""
        return self.marker in command


class StaticEditorLookup:
    """Gives the same answer for every sub-project."""

    def __init__(self, console: bool) -> None:
        self.console = console

    def uses_console_editor(self, subproject: SubProject) -> bool:
        return self.console

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.console!r})"
