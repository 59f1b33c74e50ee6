# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of mixed-case source names into snake_case Rust identifiers."""

# ###############
# Public Interface
# ###############

ACCESSOR_PREFIX = "get_"


def to_target_identifier(name: str) -> str:
    """Convert a mixed-case name to lower-case words delimited by ``_``.

    A delimiter is inserted only where an uppercase letter directly follows a
    lowercase one, so ``UnitType`` becomes ``unit_type`` and ``HTTPCode``
    becomes ``httpcode``.
    """
    out: list[str] = []
    previous = ""
    for c in name:
        if previous.islower() and c.isupper():
            out.append("_")
        out.append(c.lower())
        previous = c
    return "".join(out)


def strip_accessor_prefix(identifier: str) -> str:
    """Remove a leading ``get_`` word from a transformed identifier."""
    return identifier.removeprefix(ACCESSOR_PREFIX)


def to_field_name(name: str) -> str:
    """Return the struct field and accessor name for a source property name."""
    return strip_accessor_prefix(to_target_identifier(name))
