# SPDX-License-Identifier: MIT
"""Command-line interface for sublimegen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sublimegen.configure.metadata import load_metadata
from sublimegen.core.editor import StaticEditorLookup
from sublimegen.core.errors import SublimeGenError
from sublimegen.generators.sublime_text import SublimeTextGenerator
from sublimegen.util.files import FileWriter

# Set up logging
logger = logging.getLogger("sublimegen")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate project files from a metadata file.

    This command:
    1. Loads the project groups from the metadata file
    2. Builds and renders one project file per group
    3. Writes each file (or prints it with --dry-run)
    """
    setup_logging(args.verbose, args.debug)

    metadata = Path(args.metadata)
    if not metadata.exists():
        logger.error("Metadata file not found: %s", metadata)
        return 1

    editor_lookup = None
    if args.console_editor is not None:
        editor_lookup = StaticEditorLookup(args.console_editor)

    try:
        groups = load_metadata(metadata)

        generator = SublimeTextGenerator(
            editor_lookup=editor_lookup,
            writer=FileWriter(create_dirs=bool(args.output_dir)),
            project_dir=args.output_dir,
        )

        if args.dry_run:
            for generated in generator.generate_files(groups):
                print(f"# {generated.path}")
                print(generated.content, end="")
            return 0

        written = generator.generate(groups)
    except SublimeGenError as e:
        logger.error("%s", e)
        return 1

    if not written:
        logger.warning("No projects found in %s", metadata)
    for generated in written:
        print(f"Generated {generated.path}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Show what the generator produces."""
    setup_logging(args.verbose, args.debug)

    doc = SublimeTextGenerator.documentation
    print(f"{doc.name}: {doc.brief}")
    print()
    print(doc.full)
    print()
    print("Supported build generators:")
    for name in SublimeTextGenerator.supported_global_generators:
        print(f"  {name}")
    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the sublimegen CLI."""
    parser = argparse.ArgumentParser(
        prog="sublimegen",
        description="Generate Sublime Text project files for Makefile builds.",
        epilog="Run 'sublimegen <command> --help' for command-specific help.",
    )
    from sublimegen import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # sublimegen generate
    gen_parser = subparsers.add_parser(
        "generate", help="Generate project files from build metadata"
    )
    add_common_args(gen_parser)
    gen_parser.add_argument("metadata", help="Build metadata file (.json or .toml)")
    gen_parser.add_argument(
        "-o",
        "--output-dir",
        metavar="DIR",
        help="Write all project files to DIR instead of each build directory",
    )
    gen_parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the project files instead of writing them",
    )
    editor_group = gen_parser.add_mutually_exclusive_group()
    editor_group.add_argument(
        "--console-editor",
        dest="console_editor",
        action="store_true",
        default=None,
        help="Treat the cache editor as console based (drop edit_cache)",
    )
    editor_group.add_argument(
        "--no-console-editor",
        dest="console_editor",
        action="store_false",
        default=None,
        help="Treat the cache editor as graphical (keep edit_cache)",
    )
    gen_parser.set_defaults(func=cmd_generate)

    # sublimegen info
    info_parser = subparsers.add_parser("info", help="Describe the generator")
    add_common_args(info_parser)
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # Run the specified command
    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
