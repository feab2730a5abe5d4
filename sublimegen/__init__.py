# SPDX-License-Identifier: MIT
"""
Sublimegen: Sublime Text project files for Makefile based builds.

Sublimegen reads the sub-projects, directories, make program and targets
of a configured build and writes a .sublime-project file per project,
exposing every make target as a build system.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export commonly used classes for convenient imports
from sublimegen.configure.metadata import load_metadata  # noqa: E402
from sublimegen.core.subproject import (  # noqa: E402
    BuildTarget,
    ProjectGroup,
    SubProject,
    group_subprojects,
)
from sublimegen.generators.sublime_text import SublimeTextGenerator  # noqa: E402

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Core classes
    "BuildTarget",
    "ProjectGroup",
    "SubProject",
    "group_subprojects",
    # Metadata
    "load_metadata",
    # Generators
    "SublimeTextGenerator",
]
