# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the enumtab command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from enumtab.codegen.emitter import EmitError
from enumtab.codegen.generate import generate, render_class
from enumtab.codegen.output import OutputError
from enumtab.codegen.resolver import UnsupportedTypeError
from enumtab.reflection.introspect import ReflectionError
from enumtab.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
    render_default_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the enumtab CLI."""
    parser = argparse.ArgumentParser(
        prog="enumtab",
        description="enumtab: generate Rust data tables from Python enums",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate one Rust source file per domain class",
        description="Render each configured enum class into a Rust source file in OUTPUT_DIR.",
    )
    generate_parser.add_argument("output_dir", metavar="OUTPUT_DIR", help="Directory to write the generated files to")
    _add_source_arguments(generate_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that every domain class can be rendered",
        description="Resolve and render every configured enum class without writing any files.",
    )
    _add_source_arguments(check_parser)

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a starter configuration file",
        description=f"Write a starter {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to create the configuration in (default: current directory)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_GENERATION_ERRORS = (ReflectionError, UnsupportedTypeError, EmitError, OutputError)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the generator configuration (default: ./{CONFIG_FILE_NAME} if present)",
    )
    parser.add_argument(
        "--class",
        dest="classes",
        action="append",
        default=None,
        metavar="MODULE:CLASS",
        help="Domain class to process; may be repeated and replaces the configured list",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "init":
        return _cmd_init(args)
    return 0


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load the configuration named on the command line, or the default one.

    Raises:
        GeneratorConfigError: If the configuration file is invalid.
    """
    if args.config is not None:
        config = load_generator_config(Path(args.config))
    elif (Path.cwd() / CONFIG_FILE_NAME).exists():
        config = load_generator_config(Path.cwd() / CONFIG_FILE_NAME)
    else:
        config = GeneratorConfig()

    if args.classes:
        config = config.model_copy(update={"domain_classes": list(args.classes)})
    return config


def _extend_import_path(args: argparse.Namespace) -> None:
    """Make domain modules next to the configuration and in the cwd importable.

    Console scripts start with their own bin directory on ``sys.path``, not the
    directory they are run from.
    """
    roots = [Path.cwd()]
    if args.config is not None:
        roots.insert(0, Path(args.config).resolve().parent)
    for root in reversed(roots):
        entry = str(root)
        if entry in sys.path:
            sys.path.remove(entry)
        sys.path.insert(0, entry)
        logger.debug("Added %s to the import path", entry)


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        config = _load_config(args)
    except GeneratorConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _extend_import_path(args)

    if not config.domain_classes:
        print("No domain classes configured. Nothing to generate.")
        return 0

    output_dir = Path(args.output_dir).resolve()
    print(f"Generating {len(config.domain_classes)} domain class(es) into '{output_dir}'...")
    try:
        written = generate(
            config.domain_classes,
            output_dir,
            prelude=config.prelude,
            suffix=config.file_suffix,
        )
    except _GENERATION_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in written:
        print(f"  {path.name}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        config = _load_config(args)
    except GeneratorConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _extend_import_path(args)

    if not config.domain_classes:
        print("No domain classes configured. Nothing to check.")
        return 0

    has_errors = False
    for reference in config.domain_classes:
        try:
            class_name, _ = render_class(reference, prelude=config.prelude)
        except _GENERATION_ERRORS as exc:
            print(f"Error: {reference}: {exc}", file=sys.stderr)
            has_errors = True
            continue
        print(f"  {class_name}: ok")

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(render_default_config(), encoding="utf-8")
    print(f"Created configuration at '{config_file}'.")
    return 0
