# SPDX-License-Identifier: MIT
"""Reading build metadata produced by the build configuration."""

from sublimegen.configure.metadata import load_metadata, parse_metadata

__all__ = ["load_metadata", "parse_metadata"]
