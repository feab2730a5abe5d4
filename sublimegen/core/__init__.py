# SPDX-License-Identifier: MIT
"""Core data types for sublimegen."""

from sublimegen.core.editor import (
    CursesEditorLookup,
    EditorLookup,
    StaticEditorLookup,
)
from sublimegen.core.errors import (
    ConfigureError,
    GenerateError,
    MetadataError,
    MissingDefinitionError,
    SublimeGenError,
    WriteError,
)
from sublimegen.core.subproject import (
    BuildTarget,
    ProjectGroup,
    SubProject,
    group_subprojects,
)

__all__ = [
    "BuildTarget",
    "ConfigureError",
    "CursesEditorLookup",
    "EditorLookup",
    "GenerateError",
    "MetadataError",
    "MissingDefinitionError",
    "ProjectGroup",
    "StaticEditorLookup",
    "SubProject",
    "SublimeGenError",
    "WriteError",
    "group_subprojects",
]
