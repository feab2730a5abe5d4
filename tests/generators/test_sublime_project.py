# SPDX-License-Identifier: MIT
"""Tests for sublimegen.generators.sublime_project."""

import json

from sublimegen.generators.sublime_project import (
    BuildSystem,
    Folder,
    SublimeTextProject,
    escape,
    project_filename,
    render,
)

EXPECTED_TEXT = """\
{
    "name": "Foo",
    "folders":
    [
        {
            "path": "/src",
            "folder_exclude_patterns": [ "CMakeFiles" ],
            "file_exclude_patterns": [ "CMakeCache.txt", "cmake_install.cmake" ]
        }
    ],
    "build_systems":
    [
        {
            "name": "Foo: default",
            "working_dir": "/build",
            "cmd": [ "/usr/bin/make" ]
        },
        {
            "name": "Foo: all",
            "working_dir": "/build",
            "shell": true,
            "cmd": [ "/usr/bin/make", "all" ]
        }
    ]
}
"""


class TestEscape:
    def test_plain_string_unchanged(self):
        assert escape("hello world") == "hello world"

    def test_escapes_quote_and_backslash(self):
        assert escape('say "hi"\\now') == 'say \\"hi\\"\\\\now'

    def test_control_characters_pass_through(self):
        assert escape("a\nb\tc") == "a\nb\tc"

    def test_non_ascii_passes_through(self):
        assert escape("größe") == "größe"

    def test_escaped_string_parses_back(self):
        """Escaped text embedded in quotes reads back as the original."""
        for value in ['"', "\\", 'C:\\dir\\"x"', '\\"', "trailing\\"]:
            assert json.loads(f'"{escape(value)}"') == value


class TestModel:
    def test_folder_patterns_keep_order_and_duplicates(self):
        folder = Folder("/src")
        folder.add_file_exclude_pattern("b")
        folder.add_file_exclude_pattern("a")
        folder.add_file_exclude_pattern("b")
        folder.add_folder_exclude_pattern("CMakeFiles")
        assert folder.file_exclude_patterns == ["b", "a", "b"]
        assert folder.folder_exclude_patterns == ["CMakeFiles"]

    def test_build_system_defaults(self):
        bs = BuildSystem("x", "/build")
        assert bs.cmd == []
        assert bs.shell is False
        bs.add_to_command("make")
        bs.add_to_command("all")
        assert bs.cmd == ["make", "all"]

    def test_project_is_append_only(self):
        project = SublimeTextProject()
        project.set_name("p")
        project.add_folder(Folder("/a"))
        project.add_folder(Folder("/a"))
        project.add_build_system(BuildSystem("p: default", "/b", ["make"]))
        assert project.name == "p"
        assert [f.path for f in project.folders] == ["/a", "/a"]
        assert len(project.build_systems) == 1

    def test_project_filename(self):
        assert project_filename("/build", "Foo") == "/build/Foo.sublime-project"


class TestRender:
    def _project(self) -> SublimeTextProject:
        project = SublimeTextProject(name="Foo")
        project.add_folder(
            Folder(
                "/src",
                folder_exclude_patterns=["CMakeFiles"],
                file_exclude_patterns=["CMakeCache.txt", "cmake_install.cmake"],
            )
        )
        project.add_build_system(BuildSystem("Foo: default", "/build", ["/usr/bin/make"]))
        project.add_build_system(
            BuildSystem("Foo: all", "/build", ["/usr/bin/make", "all"], shell=True)
        )
        return project

    def test_exact_layout(self):
        assert render(self._project()) == EXPECTED_TEXT

    def test_output_is_valid_json(self):
        data = json.loads(render(self._project()))
        assert data["name"] == "Foo"
        assert data["folders"][0]["path"] == "/src"
        assert data["build_systems"][1]["shell"] is True
        assert "shell" not in data["build_systems"][0]

    def test_render_is_idempotent(self):
        project = self._project()
        assert render(project) == render(project)

    def test_empty_project(self):
        text = render(SublimeTextProject())
        assert text == (
            "{\n"
            '    "name": "",\n'
            '    "folders":\n'
            "    [\n"
            "    ],\n"
            '    "build_systems":\n'
            "    [\n"
            "    ]\n"
            "}\n"
        )
        assert json.loads(text) == {"name": "", "folders": [], "build_systems": []}

    def test_empty_arrays_are_rendered(self):
        project = SublimeTextProject(name="p")
        project.add_folder(Folder("/src"))
        project.add_build_system(BuildSystem("p: nothing", "/b"))
        text = render(project)
        assert '"folder_exclude_patterns": [  ],' in text
        assert '"file_exclude_patterns": [  ]\n' in text
        assert '"cmd": [  ]\n' in text
        data = json.loads(text)
        assert data["build_systems"][0]["cmd"] == []

    def test_no_trailing_commas(self):
        for count in range(4):
            project = SublimeTextProject(name="p")
            for i in range(count):
                project.add_folder(Folder(f"/src/{i}", ["d"] * i, ["f"] * i))
                project.add_build_system(BuildSystem(f"p: {i}", "/b", ["make"] * (i + 1)))
            text = render(project)
            assert ",\n    ]" not in text
            assert ", ]" not in text
            assert ",\n        }" not in text
            data = json.loads(text)
            assert len(data["folders"]) == count
            assert len(data["build_systems"]) == count

    def test_escapes_every_string(self):
        project = SublimeTextProject(name='say "hi"\\now')
        project.add_folder(Folder('C:\\src', ['"x"'], ["a\\b"]))
        project.add_build_system(BuildSystem('n"', "C:\\b", ["m\\ake", '"q"']))
        text = render(project)
        assert '"name": "say \\"hi\\"\\\\now",' in text
        data = json.loads(text)
        assert data["name"] == 'say "hi"\\now'
        assert data["folders"][0] == {
            "path": "C:\\src",
            "folder_exclude_patterns": ['"x"'],
            "file_exclude_patterns": ["a\\b"],
        }
        assert data["build_systems"][0] == {
            "name": 'n"',
            "working_dir": "C:\\b",
            "cmd": ["m\\ake", '"q"'],
        }

    def test_field_order(self):
        project = self._project()
        data = json.loads(render(project))
        assert list(data) == ["name", "folders", "build_systems"]
        assert list(data["folders"][0]) == [
            "path",
            "folder_exclude_patterns",
            "file_exclude_patterns",
        ]
        assert list(data["build_systems"][1]) == ["name", "working_dir", "shell", "cmd"]
