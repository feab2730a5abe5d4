# SPDX-License-Identifier: MIT
"""Custom exceptions for sublimegen.

All sublimegen exceptions inherit from SublimeGenError, which includes
optional location information (a metadata file or sub-project) for
better error messages.
"""

from __future__ import annotations


class SublimeGenError(Exception):
    """Base class for all sublimegen exceptions.

    Attributes:
        message: The error message.
        location: Optional location where the error occurred.
    """

    def __init__(
        self,
        message: str,
        location: str | None = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ConfigureError(SublimeGenError):
    """Error while reading build metadata.

    Raised when a metadata file cannot be read or parsed.
    """


class MetadataError(ConfigureError):
    """Build metadata is structurally invalid.

    Attributes:
        key: The offending key.
    """

    def __init__(
        self,
        key: str,
        reason: str,
        location: str | None = None,
    ) -> None:
        self.key = key
        super().__init__(f"{reason}: {key}", location)


class GenerateError(SublimeGenError):
    """Error during the generate phase.

    Raised when project file generation fails.
    """


class MissingDefinitionError(GenerateError):
    """A required definition is not set on a sub-project.

    Attributes:
        variable: The name of the missing definition.
    """

    def __init__(
        self,
        variable: str,
        location: str | None = None,
    ) -> None:
        self.variable = variable
        super().__init__(f"required definition not set: {variable}", location)


class WriteError(GenerateError):
    """A project file could not be written.

    Attributes:
        path: The output path.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        location: str | None = None,
    ) -> None:
        self.path = path
        super().__init__(f"cannot write {path}: {reason}", location)
