# SPDX-License-Identifier: MIT
"""Sub-projects and project groups.

A SubProject is one configured build unit handed over by the build
configuration system: its directories, its definitions (including the
make program) and the targets declared on it. Sub-projects sharing a
top-level project name form a ProjectGroup, and each group yields one
project file.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sublimegen.core.errors import MissingDefinitionError

MAKE_PROGRAM_VAR = "CMAKE_MAKE_PROGRAM"
EDIT_COMMAND_VAR = "CMAKE_EDIT_COMMAND"


@dataclass
class BuildTarget:
    """A target declared on a sub-project.

    Attributes:
        name: Target name, passed to the make program.
        target_type: Kind of target ("executable", "utility", ...).
            Informational only.
    """

    name: str
    target_type: str = "utility"


@dataclass
class SubProject:
    """One configured build unit.

    Attributes:
        project_name: Name of the project this unit declares.
        home_directory: Top of the source tree.
        current_directory: Directory the unit's own targets are built from.
        start_output_directory: Build directory of the unit.
        definitions: Cached build variables.
        targets: Declared targets, in declaration order.
    """

    project_name: str
    home_directory: str
    current_directory: str
    start_output_directory: str = ""
    definitions: dict[str, str] = field(default_factory=dict)
    targets: list[BuildTarget] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.start_output_directory:
            self.start_output_directory = self.current_directory

    def get_definition(self, name: str, default: str | None = None) -> str | None:
        """Get a definition, or default if it is not set."""
        return self.definitions.get(name, default)

    def get_required_definition(self, name: str) -> str:
        """Get a definition that must be set.

        Raises:
            MissingDefinitionError: If the definition is absent or empty.
        """
        value = self.definitions.get(name)
        if not value:
            raise MissingDefinitionError(name, location=self.current_directory)
        return value

    @property
    def make_program(self) -> str:
        return self.get_required_definition(MAKE_PROGRAM_VAR)

    def add_target(self, target: BuildTarget | str) -> BuildTarget:
        if isinstance(target, str):
            target = BuildTarget(target)
        self.targets.append(target)
        return target


@dataclass
class ProjectGroup:
    """Sub-projects sharing one top-level project name.

    Attributes:
        name: Top-level project name; names the project file.
        output_directory: Where the project file goes, and where the
            default make commands run.
        subprojects: Members, top-level sub-project first.
    """

    name: str
    output_directory: str
    subprojects: list[SubProject] = field(default_factory=list)

    @classmethod
    def from_subprojects(cls, subprojects: list[SubProject]) -> ProjectGroup:
        """Create a group named after its first (top-level) sub-project."""
        if not subprojects:
            raise ValueError("cannot derive a project group from no sub-projects")
        top = subprojects[0]
        return cls(
            name=top.project_name,
            output_directory=top.start_output_directory,
            subprojects=list(subprojects),
        )


def group_subprojects(subprojects: list[SubProject]) -> list[ProjectGroup]:
    """Group sub-projects by project name.

    Groups are returned in the order their names are first seen; members
    keep their supplied order.
    """
    by_name: dict[str, list[SubProject]] = {}
    for sub in subprojects:
        by_name.setdefault(sub.project_name, []).append(sub)
    return [ProjectGroup.from_subprojects(members) for members in by_name.values()]
