# SPDX-License-Identifier: MIT
"""Project file generators for sublimegen."""

from sublimegen.generators.generator import (
    BaseGenerator,
    GeneratedFile,
    Generator,
    GeneratorDocumentation,
)
from sublimegen.generators.sublime_text import SublimeTextGenerator

__all__ = [
    "BaseGenerator",
    "GeneratedFile",
    "Generator",
    "GeneratorDocumentation",
    "SublimeTextGenerator",
]
