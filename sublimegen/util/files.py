# SPDX-License-Identifier: MIT
"""Writers for generated files.

Generators hand finished text to a Writer rather than opening files
themselves, so the same generator can write to disk or to memory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from sublimegen.core.errors import WriteError

logger = logging.getLogger(__name__)


@runtime_checkable
class Writer(Protocol):
    """Accepts an output path and the text to store there."""

    def write(self, path: str, text: str) -> None: ...


class FileWriter:
    """Write files to disk, overwriting existing ones."""

    def __init__(self, *, create_dirs: bool = False) -> None:
        """Create a file writer.

        Args:
            create_dirs: Create missing parent directories before writing.
        """
        self.create_dirs = create_dirs

    def write(self, path: str, text: str) -> None:
        """Write text to path.

        Raises:
            WriteError: If the file cannot be created or written.
        """
        dest = Path(path)
        try:
            if self.create_dirs:
                dest.parent.mkdir(parents=True, exist_ok=True)
            with open(dest, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise WriteError(str(path), e.strerror or str(e)) from e
        logger.debug("Wrote %s (%d bytes)", dest, len(text))


class MemoryWriter:
    """Collect written files in a dict instead of touching the disk."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}

    def write(self, path: str, text: str) -> None:
        self.files[path] = text
