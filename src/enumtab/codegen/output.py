# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Naming and writing of generated source files."""

from pathlib import Path

from enumtab.codegen.identifiers import to_target_identifier

# ###############
# Public Interface
# ###############

SOURCE_SUFFIX = ".rs"


class OutputError(Exception):
    """Raised when a generated source file cannot be written."""


def source_file_name(class_name: str, suffix: str = SOURCE_SUFFIX) -> str:
    """Return the output file name for a domain class (e.g. ``unit_type.rs``)."""
    return to_target_identifier(class_name) + suffix


def write_source(text: str, path: Path) -> None:
    """Write one generated source unit to *path*, creating parent directories as needed.

    Raises:
        OutputError: If the directory or file cannot be created or written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as sink:
            sink.write(text)
    except OSError as exc:
        raise OutputError(f"Cannot write source file '{path}': {exc}") from exc
