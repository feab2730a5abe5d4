# SPDX-License-Identifier: MIT
"""Loading build metadata.

The build configuration system writes out what it knows about each
sub-project as JSON or TOML. Two layouts are accepted. A flat list of
sub-projects, grouped by project name:

    [[subprojects]]
    project_name = "hello"
    home_directory = "/src/hello"
    current_directory = "/build/hello"
    targets = ["all", "install"]

    [subprojects.definitions]
    CMAKE_MAKE_PROGRAM = "/usr/bin/make"

or explicit groups, for nested projects whose sub-projects carry their
own names:

    [[projects]]
    name = "hello"
    output_directory = "/build/hello"

    [[projects.subprojects]]
    project_name = "hello_lib"
    ...
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from sublimegen.core.errors import ConfigureError, MetadataError
from sublimegen.core.subproject import (
    BuildTarget,
    ProjectGroup,
    SubProject,
    group_subprojects,
)

logger = logging.getLogger(__name__)


def load_metadata(path: Path | str) -> list[ProjectGroup]:
    """Load project groups from a .json or .toml metadata file.

    Raises:
        ConfigureError: If the file cannot be read or parsed.
        MetadataError: If its contents are malformed.
    """
    path = Path(path)
    logger.info("Loading build metadata from %s", path)
    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
    except OSError as e:
        raise ConfigureError(f"cannot read metadata: {e.strerror or e}", str(path)) from e
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigureError(f"invalid metadata: {e}", str(path)) from e

    return parse_metadata(data, location=str(path))


def parse_metadata(data: Any, location: str | None = None) -> list[ProjectGroup]:
    """Build project groups from decoded metadata."""
    if not isinstance(data, dict):
        raise MetadataError("<root>", "expected a table", location)

    if "projects" in data:
        return [
            _parse_group(entry, location)
            for entry in _require_list(data, "projects", location)
        ]
    if "subprojects" in data:
        subprojects = [
            _parse_subproject(entry, location)
            for entry in _require_list(data, "subprojects", location)
        ]
        return group_subprojects(subprojects)

    raise MetadataError("projects", "missing key", location)


def _parse_group(entry: Any, location: str | None) -> ProjectGroup:
    if not isinstance(entry, dict):
        raise MetadataError("projects", "expected a table", location)
    subprojects = [
        _parse_subproject(sub, location)
        for sub in _require_list(entry, "subprojects", location, default=[])
    ]
    return ProjectGroup(
        name=_require_str(entry, "name", location),
        output_directory=_require_str(entry, "output_directory", location),
        subprojects=subprojects,
    )


def _parse_subproject(entry: Any, location: str | None) -> SubProject:
    if not isinstance(entry, dict):
        raise MetadataError("subprojects", "expected a table", location)

    sub = SubProject(
        project_name=_require_str(entry, "project_name", location),
        home_directory=_require_str(entry, "home_directory", location),
        current_directory=_require_str(entry, "current_directory", location),
        start_output_directory=_optional_str(
            entry, "start_output_directory", location
        ),
        definitions=_parse_definitions(entry, location),
    )
    for target in _require_list(entry, "targets", location, default=[]):
        sub.add_target(_parse_target(target, location))
    return sub


def _parse_definitions(entry: dict[str, Any], location: str | None) -> dict[str, str]:
    """Stringify scalar definitions; a null definition counts as unset."""
    definitions = entry.get("definitions") or {}
    if not isinstance(definitions, dict):
        raise MetadataError("definitions", "expected a table", location)

    result: dict[str, str] = {}
    for key, value in definitions.items():
        if value is None:
            continue
        if isinstance(value, bool):
            result[str(key)] = "ON" if value else "OFF"
        elif isinstance(value, (str, int, float)):
            result[str(key)] = str(value)
        else:
            raise MetadataError(str(key), "expected a string", location)
    return result


def _parse_target(entry: Any, location: str | None) -> BuildTarget | str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        name = _require_str(entry, "name", location)
        return BuildTarget(name, _optional_str(entry, "type", location) or "utility")
    raise MetadataError("targets", "expected a name or table", location)


def _optional_str(entry: dict[str, Any], key: str, location: str | None) -> str:
    """A string value, or "" when the key is absent or null."""
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MetadataError(key, "expected a string", location)
    return value


def _require_str(entry: dict[str, Any], key: str, location: str | None) -> str:
    if key not in entry:
        raise MetadataError(key, "missing key", location)
    value = entry[key]
    if not isinstance(value, str):
        raise MetadataError(key, "expected a string", location)
    return value


def _require_list(
    entry: dict[str, Any],
    key: str,
    location: str | None,
    default: list[Any] | None = None,
) -> list[Any]:
    if key not in entry:
        if default is not None:
            return default
        raise MetadataError(key, "missing key", location)
    value = entry[key]
    if not isinstance(value, list):
        raise MetadataError(key, "expected a list", location)
    return value
