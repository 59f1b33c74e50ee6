# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Rust type and value renderings."""

from enum import Enum
from types import SimpleNamespace

import pytest

from enumtab.codegen.representation import (
    EnumRef,
    Pair,
    Position,
    Scalar,
    ScalarKind,
    Seq,
    Str,
    ValueShapeMismatchError,
)
from enumtab.model.entities import TilePosition

# ###############
# Helpers
# ###############


class Race(Enum):
    TERRAN = 1
    ZERG = 2
    PROTOSS = 3


class Order(Enum):
    ATTACK = 1
    HOLD = 2


F64 = Scalar(ScalarKind.F64)
I32 = Scalar(ScalarKind.I32)
BOOL = Scalar(ScalarKind.BOOL)


# ###############
# Scalars
# ###############


class TestScalar:
    def test_types(self) -> None:
        assert F64.to_type() == "f64"
        assert I32.to_type() == "i32"
        assert BOOL.to_type() == "bool"

    @pytest.mark.parametrize("value", [0.0, 0.1, -2.5, 1e-05, 123456789.125, 1e300, -0.0])
    def test_float_literal_parses_back_exactly(self, value: float) -> None:
        literal = F64.to_value(value)
        assert float(literal) == value
        assert "." in literal or "e" in literal

    def test_integral_value_renders_as_float_literal(self) -> None:
        assert F64.to_value(3) == "3.0"

    def test_non_finite_floats(self) -> None:
        assert F64.to_value(float("inf")) == "f64::INFINITY"
        assert F64.to_value(float("-inf")) == "f64::NEG_INFINITY"
        assert F64.to_value(float("nan")) == "f64::NAN"

    @pytest.mark.parametrize("value", [0, 42, -7, 2**31 - 1, -(2**31)])
    def test_int_literal_parses_back_exactly(self, value: int) -> None:
        assert int(I32.to_value(value)) == value

    def test_int_out_of_range(self) -> None:
        with pytest.raises(ValueShapeMismatchError, match="i32 range"):
            I32.to_value(2**31)

    def test_int_rejects_float(self) -> None:
        with pytest.raises(ValueShapeMismatchError):
            I32.to_value(1.5)

    def test_numbers_reject_bool(self) -> None:
        with pytest.raises(ValueShapeMismatchError):
            I32.to_value(True)
        with pytest.raises(ValueShapeMismatchError):
            F64.to_value(False)

    def test_numbers_reject_text(self) -> None:
        with pytest.raises(ValueShapeMismatchError):
            F64.to_value("1.0")

    def test_bool_literals(self) -> None:
        assert BOOL.to_value(True) == "true"
        assert BOOL.to_value(False) == "false"

    def test_bool_rejects_int(self) -> None:
        with pytest.raises(ValueShapeMismatchError, match="expected a bool"):
            BOOL.to_value(1)

    def test_type_is_independent_of_values(self) -> None:
        before = F64.to_type()
        F64.to_value(1.0)
        F64.to_value(-3.25)
        assert F64.to_type() == before


# ###############
# Enum references and text
# ###############


class TestEnumRef:
    def test_type_is_enum_name(self) -> None:
        assert EnumRef("Race").to_type() == "Race"

    def test_qualified_value(self) -> None:
        assert EnumRef("Race").to_value(Race.ZERG) == "Race::ZERG"

    def test_unqualified_value(self) -> None:
        assert EnumRef("Race", qualified=False).to_value(Race.ZERG) == "ZERG"

    def test_plain_string_value(self) -> None:
        assert EnumRef("Race").to_value("Terran") == "Race::Terran"

    def test_rejects_non_member(self) -> None:
        with pytest.raises(ValueShapeMismatchError, match="enum member"):
            EnumRef("Race").to_value(3)


class TestStr:
    def test_type(self) -> None:
        assert Str().to_type() == "&'static str"

    def test_value_is_quoted(self) -> None:
        assert Str().to_value("Terran Marine") == '"Terran Marine"'

    def test_value_is_not_escaped(self) -> None:
        assert Str().to_value('say "hi"') == '"say "hi""'

    def test_rejects_non_text(self) -> None:
        with pytest.raises(ValueShapeMismatchError):
            Str().to_value(5)


# ###############
# Positions
# ###############


class TestPosition:
    def test_type(self) -> None:
        assert Position().to_type() == "TilePosition"

    def test_value(self) -> None:
        assert Position().to_value(TilePosition(2, 3)) == "TilePosition { x: 2, y: 3 }"

    def test_accepts_any_object_with_x_and_y(self) -> None:
        assert Position("Tile").to_value(SimpleNamespace(x=-1, y=0)) == "Tile { x: -1, y: 0 }"

    def test_rejects_non_coordinate(self) -> None:
        with pytest.raises(ValueShapeMismatchError, match="'x' and 'y'"):
            Position().to_value("0,0")

    def test_rejects_fractional_components(self) -> None:
        with pytest.raises(ValueShapeMismatchError):
            Position().to_value(SimpleNamespace(x=1.5, y=2))


# ###############
# Containers
# ###############


class TestSeq:
    def test_type(self) -> None:
        assert Seq(EnumRef("Race")).to_type() == "&'static [Race]"

    def test_value(self) -> None:
        assert Seq(EnumRef("Race")).to_value([Race.TERRAN, Race.ZERG]) == "&[Race::TERRAN, Race::ZERG]"

    def test_empty_value(self) -> None:
        assert Seq(I32).to_value([]) == "&[]"

    def test_accepts_any_iterable(self) -> None:
        assert Seq(I32).to_value(x * 2 for x in range(3)) == "&[0, 2, 4]"

    def test_rejects_text(self) -> None:
        with pytest.raises(ValueShapeMismatchError):
            Seq(Str()).to_value("abc")

    def test_rejects_scalar(self) -> None:
        with pytest.raises(ValueShapeMismatchError, match="collection"):
            Seq(I32).to_value(5)

    def test_element_failure_propagates(self) -> None:
        with pytest.raises(ValueShapeMismatchError) as exc_info:
            Seq(I32).to_value([1, "two"])
        assert exc_info.value.value == "two"
        assert exc_info.value.representation == I32

    def test_nested_seq_type(self) -> None:
        assert Seq(Seq(F64)).to_type() == "&'static [&'static [f64]]"


class TestPair:
    def test_type(self) -> None:
        assert Pair(I32, Str()).to_type() == "(i32, &'static str)"

    def test_tuple_value(self) -> None:
        assert Pair(I32, Str()).to_value((1, "a")) == '(1, "a")'

    def test_list_value(self) -> None:
        assert Pair(BOOL, F64).to_value([True, 2]) == "(true, 2.0)"

    def test_rejects_wrong_arity(self) -> None:
        with pytest.raises(ValueShapeMismatchError, match="2-tuple"):
            Pair(I32, I32).to_value((1, 2, 3))


class TestMappingComposition:
    def test_map_renders_like_list_of_pairs(self) -> None:
        """A mapping rendered as a slice of pairs equals the equivalent ordered list."""
        representation = Seq(Pair(EnumRef("Race"), EnumRef("Order")))
        as_map = representation.to_value({Race.TERRAN: Order.ATTACK, Race.ZERG: Order.HOLD})
        as_list = representation.to_value([(Race.TERRAN, Order.ATTACK), (Race.ZERG, Order.HOLD)])
        assert as_map == as_list
        assert as_map == "&[(Race::TERRAN, Order::ATTACK), (Race::ZERG, Order::HOLD)]"

    def test_insertion_order_is_preserved(self) -> None:
        representation = Seq(Pair(EnumRef("Race"), I32))
        value = {Race.PROTOSS: 3, Race.TERRAN: 1}
        assert representation.to_value(value) == "&[(Race::PROTOSS, 3), (Race::TERRAN, 1)]"


# ###############
# Value semantics
# ###############


def test_representations_compare_by_value() -> None:
    """Representations are frozen values: equal shapes are equal and hashable."""
    assert Seq(Pair(I32, Str())) == Seq(Pair(Scalar(ScalarKind.I32), Str()))
    assert len({Position(), Position("TilePosition")}) == 1


def test_mismatch_error_carries_context() -> None:
    with pytest.raises(ValueShapeMismatchError) as exc_info:
        Position().to_value(42)
    error = exc_info.value
    assert error.value == 42
    assert error.representation == Position()
    assert "TilePosition" in str(error)


def test_huge_integer_does_not_fit_f64() -> None:
    with pytest.raises(ValueShapeMismatchError, match="f64 range"):
        F64.to_value(10**400)


def test_integer_that_would_round_is_rejected() -> None:
    with pytest.raises(ValueShapeMismatchError, match="not exactly representable"):
        F64.to_value(2**53 + 1)


def test_large_exact_integer_is_accepted() -> None:
    assert float(F64.to_value(2**53)) == 2**53
