# SPDX-License-Identifier: MIT
"""Tests for sublimegen.core.editor."""

from sublimegen.core.editor import (
    CursesEditorLookup,
    EditorLookup,
    StaticEditorLookup,
)
from sublimegen.core.subproject import SubProject


def sub_with_editor(command: str | None) -> SubProject:
    definitions = {} if command is None else {"CMAKE_EDIT_COMMAND": command}
    return SubProject("p", "/src", "/build", definitions=definitions)


class TestCursesEditorLookup:
    def test_is_editor_lookup(self):
        assert isinstance(CursesEditorLookup(), EditorLookup)

    def test_ccmake_detected(self):
        lookup = CursesEditorLookup()
        assert lookup.uses_console_editor(sub_with_editor("/usr/bin/ccmake"))

    def test_gui_editor(self):
        lookup = CursesEditorLookup()
        assert not lookup.uses_console_editor(sub_with_editor("/usr/bin/cmake-gui"))

    def test_no_edit_command(self):
        assert not CursesEditorLookup().uses_console_editor(sub_with_editor(None))

    def test_custom_marker(self):
        lookup = CursesEditorLookup(marker="tui")
        assert lookup.uses_console_editor(sub_with_editor("/opt/cmake-tui"))


class TestStaticEditorLookup:
    def test_fixed_answer(self):
        sub = sub_with_editor("/usr/bin/ccmake")
        assert StaticEditorLookup(False).uses_console_editor(sub) is False
        assert StaticEditorLookup(True).uses_console_editor(sub) is True

    def test_repr(self):
        assert repr(StaticEditorLookup(True)) == "StaticEditorLookup(True)"
