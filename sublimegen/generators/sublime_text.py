# SPDX-License-Identifier: MIT
"""Sublime Text project generator.

Generates a .sublime-project file for every project group of a
Makefile based build. Each file lists the source folders of the group
and a build system for the default make invocation, "clean", "depend"
and every target declared on each sub-project.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sublimegen.core.editor import CursesEditorLookup
from sublimegen.generators.generator import (
    BaseGenerator,
    GeneratedFile,
    GeneratorDocumentation,
)
from sublimegen.generators.sublime_project import (
    BuildSystem,
    Folder,
    SublimeTextProject,
    project_filename,
    render,
)
from sublimegen.util.files import FileWriter

if TYPE_CHECKING:
    from sublimegen.core.editor import EditorLookup
    from sublimegen.core.subproject import ProjectGroup, SubProject
    from sublimegen.util.files import Writer

logger = logging.getLogger(__name__)

# Generated files hidden from the sidebar
FILE_EXCLUDE_PATTERNS = ["CMakeCache.txt", "cmake_install.cmake"]
FOLDER_EXCLUDE_PATTERNS = ["CMakeFiles"]

# Target that opens the cache editor; useless when that editor needs a terminal
EDIT_CACHE_TARGET = "edit_cache"


class SublimeTextGenerator(BaseGenerator):
    """Generator that produces Sublime Text project files.

    Example:
        groups = group_subprojects(subprojects)
        generator = SublimeTextGenerator()
        generator.generate(groups)
        # Creates <output_directory>/<name>.sublime-project per group

    Args:
        editor_lookup: Decides whether a sub-project's cache editor is
            console based (default: look for ccmake in its edit command).
        writer: Receives the rendered files (default: write to disk).
        project_dir: Directory for the project files (default: each
            group's output directory). Build commands still run in the
            group's output directory.
    """

    supported_global_generators = ["Unix Makefiles"]

    documentation = GeneratorDocumentation(
        name="Sublime Text",
        brief="Generates Sublime Text project files.",
        full=(
            "A project file for Sublime Text will be created in the top "
            "directory and in every subdirectory which features a "
            "CMakeLists.txt file containing a PROJECT() call. The "
            "appropriate make program can build the project through the "
            "default make target. Furthermore, clean, depend, "
            "rebuild_cache, and any CMakeLists.txt defined targets are "
            "also included as a build system."
        ),
    )

    def __init__(
        self,
        editor_lookup: EditorLookup | None = None,
        writer: Writer | None = None,
        project_dir: str | None = None,
    ) -> None:
        super().__init__("sublime_text")
        self.editor_lookup = editor_lookup or CursesEditorLookup()
        self.writer = writer or FileWriter()
        self.project_dir = project_dir

    def generate(self, groups: list[ProjectGroup]) -> list[GeneratedFile]:
        """Generate and write a project file for each group.

        Each group is built, rendered and written before the next one
        is started.

        Raises:
            MissingDefinitionError: If a sub-project has no make program.
            WriteError: If a project file cannot be written.
        """
        written: list[GeneratedFile] = []
        for group in groups:
            generated = self.generate_group(group)
            self.writer.write(generated.path, generated.content)
            logger.info("Generated %s", generated.path)
            written.append(generated)
        return written

    def generate_files(self, groups: list[ProjectGroup]) -> list[GeneratedFile]:
        """Render project files for all groups without writing them."""
        return [self.generate_group(group) for group in groups]

    def generate_group(self, group: ProjectGroup) -> GeneratedFile:
        """Build and render the project file of one group."""
        project = self.build_project(group)
        return GeneratedFile(project.filename, render(project))

    def build_project(self, group: ProjectGroup) -> SublimeTextProject:
        """Assemble the project file contents for one group."""
        project = SublimeTextProject()
        project.set_name(group.name)
        project.filename = project_filename(
            self.project_dir or group.output_directory, group.name
        )

        for sub in group.subprojects:
            project.add_folder(self._make_folder(sub))

        for sub in group.subprojects:
            for build_system in self._make_build_systems(sub, group.output_directory):
                project.add_build_system(build_system)

        logger.debug(
            "Project %s: %d folders, %d build systems",
            project.name,
            len(project.folders),
            len(project.build_systems),
        )
        return project

    def _make_folder(self, sub: SubProject) -> Folder:
        folder = Folder(sub.home_directory)
        for pattern in FILE_EXCLUDE_PATTERNS:
            folder.add_file_exclude_pattern(pattern)
        for pattern in FOLDER_EXCLUDE_PATTERNS:
            folder.add_folder_exclude_pattern(pattern)
        return folder

    def _make_build_systems(
        self, sub: SubProject, output_dir: str
    ) -> list[BuildSystem]:
        """Default make invocations followed by one per declared target."""
        make = sub.make_program
        prefix = sub.project_name

        build_systems = [
            BuildSystem(f"{prefix}: default", output_dir, [make]),
            BuildSystem(f"{prefix}: clean", output_dir, [make, "clean"]),
            BuildSystem(f"{prefix}: depend", output_dir, [make, "depend"]),
        ]

        skip_edit_cache = self.editor_lookup.uses_console_editor(sub)
        for target in sub.targets:
            if target.name == EDIT_CACHE_TARGET and skip_edit_cache:
                logger.debug("Skipping %s in %s", target.name, sub.current_directory)
                continue
            build_system = BuildSystem(f"{prefix}: {target.name}", sub.current_directory)
            build_system.add_to_command(make)
            build_system.add_to_command(target.name)
            build_systems.append(build_system)

        return build_systems
