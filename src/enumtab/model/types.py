# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors for the declared types of domain class properties."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveKind(Enum):
    """Primitive kinds recognized by the reflection provider."""

    FLOAT = "Float"
    INT = "Int"
    BOOL = "Bool"
    STRING = "String"


class PrimitiveDescriptor(BaseModel):
    """A non-parameterized primitive type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind


class EnumDescriptor(BaseModel):
    """Reference to another enumeration type by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["enum"] = "enum"
    name: str


class PositionDescriptor(BaseModel):
    """A coordinate pair measured in tile units."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["position"] = "position"
    name: str = "TilePosition"


class ListDescriptor(BaseModel):
    """A parameterized ordered list of T."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    element: TypeDescriptor


class PairDescriptor(BaseModel):
    """A parameterized pair of (A, B)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pair"] = "pair"
    first: TypeDescriptor
    second: TypeDescriptor


class MapDescriptor(BaseModel):
    """A parameterized mapping of K to V."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["map"] = "map"
    key: TypeDescriptor
    value: TypeDescriptor


class GenericDescriptor(BaseModel):
    """A parameterized shape that has no dedicated descriptor.

    Kept so that diagnostics can name the container and its arguments.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["generic"] = "generic"
    origin: str
    arguments: tuple[TypeDescriptor, ...] = ()


class OpaqueDescriptor(BaseModel):
    """A non-parameterized type the reflection provider could not classify."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["opaque"] = "opaque"
    name: str


# A declared property type. The `kind` discriminator keeps the set closed.
TypeDescriptor = Annotated[
    PrimitiveDescriptor
    | EnumDescriptor
    | PositionDescriptor
    | ListDescriptor
    | PairDescriptor
    | MapDescriptor
    | GenericDescriptor
    | OpaqueDescriptor,
    _Field(discriminator="kind"),
]


def describe(descriptor: TypeDescriptor) -> str:
    """Return a short human-readable spelling of *descriptor* for diagnostics."""
    if isinstance(descriptor, PrimitiveDescriptor):
        return descriptor.primitive.value
    if isinstance(descriptor, (EnumDescriptor, PositionDescriptor, OpaqueDescriptor)):
        return descriptor.name
    if isinstance(descriptor, ListDescriptor):
        return f"List<{describe(descriptor.element)}>"
    if isinstance(descriptor, PairDescriptor):
        return f"Pair<{describe(descriptor.first)}, {describe(descriptor.second)}>"
    if isinstance(descriptor, MapDescriptor):
        return f"Map<{describe(descriptor.key)}, {describe(descriptor.value)}>"
    assert isinstance(descriptor, GenericDescriptor)
    inner = ", ".join(describe(a) for a in descriptor.arguments)
    return f"{descriptor.origin}<{inner}>"


# Resolve forward references for models that use TypeDescriptor.
ListDescriptor.model_rebuild()
PairDescriptor.model_rebuild()
MapDescriptor.model_rebuild()
GenericDescriptor.model_rebuild()
