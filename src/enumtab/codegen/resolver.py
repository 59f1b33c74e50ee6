# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping of declared property types onto Rust representations."""

from __future__ import annotations

from enumtab.codegen.representation import EnumRef, Pair, Position, Scalar, ScalarKind, Seq, Str, TypeRepresentation
from enumtab.model.types import (
    EnumDescriptor,
    ListDescriptor,
    MapDescriptor,
    PairDescriptor,
    PositionDescriptor,
    PrimitiveDescriptor,
    PrimitiveKind,
    TypeDescriptor,
    describe,
)

# ###############
# Public Interface
# ###############


class UnsupportedTypeError(Exception):
    """Raised when a declared type matches none of the recognized shapes.

    Attributes:
        descriptor: The unrecognized type descriptor.
    """

    def __init__(self, descriptor: TypeDescriptor) -> None:
        super().__init__(f"Unsupported property type: {describe(descriptor)}")
        self.descriptor = descriptor


def resolve(descriptor: TypeDescriptor) -> TypeRepresentation:
    """Resolve a type descriptor into its Rust representation.

    Containers are resolved recursively. A mapping has no native
    representation and becomes a slice of key/value pairs, so its iteration
    order is preserved in the emitted table.

    Raises:
        UnsupportedTypeError: If *descriptor* (or any nested descriptor) is
            not one of the recognized shapes.
    """
    if isinstance(descriptor, ListDescriptor):
        return Seq(resolve(descriptor.element))
    if isinstance(descriptor, PairDescriptor):
        return Pair(resolve(descriptor.first), resolve(descriptor.second))
    if isinstance(descriptor, MapDescriptor):
        return Seq(Pair(resolve(descriptor.key), resolve(descriptor.value)))
    if isinstance(descriptor, PrimitiveDescriptor):
        return _PRIMITIVES[descriptor.primitive]
    if isinstance(descriptor, PositionDescriptor):
        return Position(descriptor.name)
    if isinstance(descriptor, EnumDescriptor):
        return EnumRef(descriptor.name, qualified=True)
    raise UnsupportedTypeError(descriptor)


# ################
# Implementation
# ################

_PRIMITIVES: dict[PrimitiveKind, TypeRepresentation] = {
    PrimitiveKind.FLOAT: Scalar(ScalarKind.F64),
    PrimitiveKind.INT: Scalar(ScalarKind.I32),
    PrimitiveKind.BOOL: Scalar(ScalarKind.BOOL),
    PrimitiveKind.STRING: Str(),
}
