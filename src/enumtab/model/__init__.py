# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input model for enumtab (domain classes, variants, type descriptors)."""

from enumtab.model.entities import DomainClass, PropertyDef, TilePosition, Variant
from enumtab.model.types import (
    EnumDescriptor,
    GenericDescriptor,
    ListDescriptor,
    MapDescriptor,
    OpaqueDescriptor,
    PairDescriptor,
    PositionDescriptor,
    PrimitiveDescriptor,
    PrimitiveKind,
    TypeDescriptor,
    describe,
)

__all__ = [
    # Type descriptors
    "PrimitiveKind",
    "PrimitiveDescriptor",
    "EnumDescriptor",
    "PositionDescriptor",
    "ListDescriptor",
    "PairDescriptor",
    "MapDescriptor",
    "GenericDescriptor",
    "OpaqueDescriptor",
    "TypeDescriptor",
    "describe",
    # Entities
    "TilePosition",
    "PropertyDef",
    "Variant",
    "DomainClass",
]
