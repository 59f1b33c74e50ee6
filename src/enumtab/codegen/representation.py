# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rust renderings of property types and property values.

Each representation answers two questions: how the type is spelled in a Rust
declaration (:meth:`to_type`) and how one concrete Python value is spelled as
a Rust literal of that type (:meth:`to_value`). Representations are frozen
and hold no other state, so equal inputs always produce identical text.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# ###############
# Public Interface
# ###############

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


class ValueShapeMismatchError(Exception):
    """Raised when a value does not have the shape its representation expects.

    Attributes:
        representation: The representation that rejected the value.
        value: The offending value.
        reason: Short description of the expected shape.
    """

    def __init__(self, representation: TypeRepresentation, value: Any, reason: str) -> None:
        super().__init__(f"Cannot render {value!r} as {representation.to_type()}: {reason}")
        self.representation = representation
        self.value = value
        self.reason = reason


class ScalarKind(Enum):
    """Rust primitive scalar types."""

    F64 = "f64"
    I32 = "i32"
    BOOL = "bool"


@dataclass(frozen=True)
class Scalar:
    """A Rust primitive scalar (``f64``, ``i32`` or ``bool``)."""

    kind: ScalarKind

    def to_type(self) -> str:
        return self.kind.value

    def to_value(self, value: Any) -> str:
        if self.kind is ScalarKind.BOOL:
            if not isinstance(value, bool):
                raise ValueShapeMismatchError(self, value, "expected a bool")
            return "true" if value else "false"
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueShapeMismatchError(self, value, "expected a number")
        if self.kind is ScalarKind.I32:
            if not isinstance(value, int):
                raise ValueShapeMismatchError(self, value, "expected an integer")
            if not I32_MIN <= value <= I32_MAX:
                raise ValueShapeMismatchError(self, value, "integer out of i32 range")
            return str(value)
        try:
            number = float(value)
        except OverflowError:
            raise ValueShapeMismatchError(self, value, "integer out of f64 range") from None
        if isinstance(value, int) and number != value:
            raise ValueShapeMismatchError(self, value, "integer not exactly representable as f64")
        return _float_literal(number)


@dataclass(frozen=True)
class EnumRef:
    """A reference to another generated Rust enum.

    Attributes:
        name: The Rust enum type name.
        qualified: Whether values are rendered as ``Name::Variant``.
    """

    name: str
    qualified: bool = True

    def to_type(self) -> str:
        return self.name

    def to_value(self, value: Any) -> str:
        if isinstance(value, Enum):
            variant = value.name
        elif isinstance(value, str):
            variant = value
        else:
            raise ValueShapeMismatchError(self, value, "expected an enum member")
        return f"{self.name}::{variant}" if self.qualified else variant


@dataclass(frozen=True)
class Str:
    """Immutable static text.

    Values are wrapped in double quotes verbatim. Embedded quotes, backslashes
    and control characters are not escaped.
    """

    def to_type(self) -> str:
        return "&'static str"

    def to_value(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueShapeMismatchError(self, value, "expected a string")
        return f'"{value}"'


@dataclass(frozen=True)
class Position:
    """A named two-field ``{ x, y }`` coordinate struct."""

    name: str = "TilePosition"

    def to_type(self) -> str:
        return self.name

    def to_value(self, value: Any) -> str:
        x = getattr(value, "x", None)
        y = getattr(value, "y", None)
        if not _is_integral(x) or not _is_integral(y):
            raise ValueShapeMismatchError(self, value, "expected integral 'x' and 'y' components")
        return f"{self.name} {{ x: {x}, y: {y} }}"


@dataclass(frozen=True)
class Seq:
    """A static slice of elements; mappings render as slices of pairs."""

    of: TypeRepresentation

    def to_type(self) -> str:
        return f"&'static [{self.of.to_type()}]"

    def to_value(self, value: Any) -> str:
        if isinstance(value, Mapping):
            items: Iterable[Any] = value.items()
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            items = value
        else:
            raise ValueShapeMismatchError(self, value, "expected a collection or mapping")
        return "&[" + ", ".join(self.of.to_value(item) for item in items) + "]"


@dataclass(frozen=True)
class Pair:
    """A Rust 2-tuple."""

    first: TypeRepresentation
    second: TypeRepresentation

    def to_type(self) -> str:
        return f"({self.first.to_type()}, {self.second.to_type()})"

    def to_value(self, value: Any) -> str:
        # dict items arrive here as (key, value) tuples.
        if not isinstance(value, (tuple, list)) or len(value) != 2:
            raise ValueShapeMismatchError(self, value, "expected a 2-tuple or key/value entry")
        first, second = value
        return f"({self.first.to_value(first)}, {self.second.to_value(second)})"


TypeRepresentation = Scalar | EnumRef | Str | Position | Seq | Pair


# ################
# Implementation
# ################


def _is_integral(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _float_literal(value: float) -> str:
    """Return a Rust ``f64`` literal that parses back to exactly *value*."""
    if math.isnan(value):
        return "f64::NAN"
    if math.isinf(value):
        return "f64::INFINITY" if value > 0 else "f64::NEG_INFINITY"
    # repr() is the shortest round-tripping form and always has '.' or an exponent.
    return repr(value)
