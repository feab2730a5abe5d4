# SPDX-License-Identifier: MIT
"""Generator protocol for project file generation.

Generators take project groups described by the build configuration
and produce editor project files for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sublimegen.core.subproject import ProjectGroup


@dataclass(frozen=True)
class GeneratedFile:
    """A generated file: where it goes and what it contains."""

    path: str
    content: str


@dataclass(frozen=True)
class GeneratorDocumentation:
    """Help text describing a generator."""

    name: str
    brief: str
    full: str


@runtime_checkable
class Generator(Protocol):
    """Protocol for project file generators.

    A Generator takes the project groups of a configured build and
    writes one or more files for each. Different generators produce
    different formats (Sublime Text projects, other IDE projects, etc.).
    """

    @property
    def name(self) -> str:
        """Generator name (e.g., 'sublime_text')."""
        ...

    def generate(self, groups: list[ProjectGroup]) -> list[GeneratedFile]:
        """Generate and write files for the given project groups.

        Args:
            groups: Project groups, in the order to process them.

        Returns:
            The files written.
        """
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    def __init__(self, name: str) -> None:
        """Initialize a generator.

        Args:
            name: Generator name.
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def generate(self, groups: list[ProjectGroup]) -> list[GeneratedFile]:
        """Generate files. Subclasses must implement."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
