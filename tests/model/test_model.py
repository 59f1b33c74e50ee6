# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct the enumtab input model."""

import pytest
from pydantic import TypeAdapter, ValidationError

from enumtab.model import (
    DomainClass,
    EnumDescriptor,
    GenericDescriptor,
    ListDescriptor,
    MapDescriptor,
    OpaqueDescriptor,
    PairDescriptor,
    PositionDescriptor,
    PrimitiveDescriptor,
    PrimitiveKind,
    PropertyDef,
    TilePosition,
    TypeDescriptor,
    Variant,
    describe,
)

INT = PrimitiveDescriptor(primitive=PrimitiveKind.INT)


def test_primitive_descriptor() -> None:
    """A primitive descriptor carries its kind."""
    descriptor = PrimitiveDescriptor(primitive=PrimitiveKind.FLOAT)
    assert descriptor.kind == "primitive"
    assert descriptor.primitive == PrimitiveKind.FLOAT


def test_container_descriptors() -> None:
    """List, pair, and map descriptors wrap nested descriptors."""
    list_descriptor = ListDescriptor(element=EnumDescriptor(name="UnitType"))
    pair_descriptor = PairDescriptor(first=EnumDescriptor(name="UnitType"), second=INT)
    map_descriptor = MapDescriptor(key=EnumDescriptor(name="UnitType"), value=INT)

    assert list_descriptor.element == EnumDescriptor(name="UnitType")
    assert pair_descriptor.second == INT
    assert map_descriptor.key == EnumDescriptor(name="UnitType")


def test_position_descriptor_default_name() -> None:
    assert PositionDescriptor().name == "TilePosition"


def test_descriptors_are_immutable() -> None:
    descriptor = EnumDescriptor(name="Race")
    with pytest.raises(ValidationError):
        descriptor.name = "Other"  # type: ignore[misc]


def test_descriptor_validates_from_tagged_data() -> None:
    """The `kind` discriminator selects the descriptor model."""
    adapter: TypeAdapter[TypeDescriptor] = TypeAdapter(TypeDescriptor)
    descriptor = adapter.validate_python(
        {
            "kind": "map",
            "key": {"kind": "enum", "name": "Race"},
            "value": {"kind": "list", "element": {"kind": "primitive", "primitive": "Int"}},
        }
    )
    assert descriptor == MapDescriptor(key=EnumDescriptor(name="Race"), value=ListDescriptor(element=INT))


def test_unknown_kind_is_rejected() -> None:
    adapter: TypeAdapter[TypeDescriptor] = TypeAdapter(TypeDescriptor)
    with pytest.raises(ValidationError):
        adapter.validate_python({"kind": "set", "element": {"kind": "enum", "name": "Race"}})


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        (INT, "Int"),
        (EnumDescriptor(name="Race"), "Race"),
        (PositionDescriptor(), "TilePosition"),
        (OpaqueDescriptor(name="bytes"), "bytes"),
        (ListDescriptor(element=INT), "List<Int>"),
        (PairDescriptor(first=INT, second=EnumDescriptor(name="Race")), "Pair<Int, Race>"),
        (MapDescriptor(key=EnumDescriptor(name="Race"), value=INT), "Map<Race, Int>"),
        (GenericDescriptor(origin="tuple", arguments=(INT, INT, INT)), "tuple<Int, Int, Int>"),
    ],
)
def test_describe(descriptor: TypeDescriptor, expected: str) -> None:
    assert describe(descriptor) == expected


def test_domain_class() -> None:
    """A domain class lists its properties and its variants with their values."""
    domain_class = DomainClass(
        name="UnitType",
        properties=[
            PropertyDef(name="getMaxHitPoints", type=INT),
            PropertyDef(name="getTileSize", type=PositionDescriptor()),
        ],
        variants=[
            Variant(name="MARINE", ordinal=0, values={"getMaxHitPoints": 40, "getTileSize": TilePosition(1, 1)}),
        ],
    )
    assert isinstance(domain_class.properties, tuple)
    assert domain_class.properties[1].type == PositionDescriptor()
    assert domain_class.variants[0].values["getTileSize"] == TilePosition(1, 1)


def test_variant_keeps_live_values() -> None:
    """Variant values are stored as given, not converted."""
    mapping = {"a": 1}
    variant = Variant(name="A", ordinal=0, values={"getMap": mapping})
    assert variant.values["getMap"] is mapping


def test_empty_domain_class() -> None:
    domain_class = DomainClass(name="Marker")
    assert domain_class.properties == ()
    assert domain_class.variants == ()


def test_tile_position() -> None:
    position = TilePosition(3, 4)
    assert (position.x, position.y) == (3, 4)
