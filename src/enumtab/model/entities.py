# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Domain classes, their properties, and their variants."""

from __future__ import annotations

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from enumtab.model.types import TypeDescriptor

# ###############
# Public Interface
# ###############


class TilePosition(NamedTuple):
    """A coordinate in tile units."""

    x: int
    y: int


class PropertyDef(BaseModel):
    """A named, typed property shared by every variant of a domain class."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeDescriptor


class Variant(BaseModel):
    """One member of a domain class with its live property values.

    Attributes:
        name: The member name.
        ordinal: Zero-based position in declaration order.
        values: Property values keyed by property name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    ordinal: int
    values: dict[str, Any] = _Field(default_factory=dict)


class DomainClass(BaseModel):
    """An enumeration whose members are tabulated into generated source."""

    model_config = ConfigDict(frozen=True)

    name: str
    properties: tuple[PropertyDef, ...] = ()
    variants: tuple[Variant, ...] = ()
