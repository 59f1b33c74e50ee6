# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Introspection of Python ``Enum`` classes into :class:`DomainClass` models.

This module is the only place where Python type annotations are inspected.
Everything it hands to the code generator is normalized into the closed
:data:`~enumtab.model.types.TypeDescriptor` set first.

A property is *eligible* when it is defined on the enum class (or one of its
non-enum mixins), has a public name, and is either a readable ``property`` or
a plain method taking only ``self``. Members annotated to return ``None`` are
skipped; members without a return annotation are kept and described as
opaque, so that generation fails loudly instead of guessing.
"""

from __future__ import annotations

import functools
import importlib
import inspect
import logging
import types
import typing
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

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
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

# Enum members that are not part of any domain schema.
INCIDENTAL_MEMBERS = frozenset({"name", "value"})


class ReflectionError(Exception):
    """Raised when a domain class cannot be located or introspected."""


@dataclass(frozen=True)
class Accessor:
    """An eligible zero-argument property of a domain class.

    Attributes:
        name: The attribute name on the class.
        type: The normalized declared return type.
        is_method: True for plain methods that must be called to read the value.
    """

    name: str
    type: TypeDescriptor
    is_method: bool

    def read(self, member: Enum) -> Any:
        """Return this property's value for one enum member."""
        attribute = getattr(member, self.name)
        return attribute() if self.is_method else attribute


def import_domain_class(reference: str) -> type[Enum]:
    """Import an enum class from a ``package.module:ClassName`` reference.

    The dotted form ``package.module.ClassName`` is accepted as well.

    Raises:
        ReflectionError: If the module or attribute cannot be found, or the
            object is not an ``Enum`` subclass.
    """
    if ":" in reference:
        module_name, _, attribute_path = reference.partition(":")
    else:
        module_name, _, attribute_path = reference.rpartition(".")
    if not module_name or not attribute_path:
        raise ReflectionError(f"Invalid domain class reference '{reference}': expected 'module:ClassName'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ReflectionError(f"Cannot import module '{module_name}': {exc}") from exc

    for part in attribute_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ReflectionError(f"'{reference}' not found: no attribute '{part}'") from None

    if not (isinstance(obj, type) and issubclass(obj, Enum)):
        raise ReflectionError(f"'{reference}' is not an Enum class")
    return obj


def describe_type(annotation: Any) -> TypeDescriptor:
    """Normalize a Python type annotation into a :data:`TypeDescriptor`."""
    origin = typing.get_origin(annotation)
    if origin is not None:
        return _describe_parameterized(origin, typing.get_args(annotation))

    primitive = _PRIMITIVES.get(annotation) if isinstance(annotation, type) else None
    if primitive is not None:
        return PrimitiveDescriptor(primitive=primitive)
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return EnumDescriptor(name=annotation.__name__)
    if isinstance(annotation, type) and (
        issubclass(annotation, TilePosition) or getattr(annotation, "__tile_position__", False)
    ):
        return PositionDescriptor(name=annotation.__name__)
    return OpaqueDescriptor(name=_type_name(annotation))


def discover_properties(cls: type[Enum]) -> list[Accessor]:
    """Return the eligible properties of *cls* in definition order.

    Classes are visited base-first, so properties contributed by a mixin come
    before those declared on the enum itself. An override keeps the position
    of the member it overrides.

    Raises:
        ReflectionError: If a return annotation cannot be evaluated.
    """
    names: list[str] = []
    for owner in reversed(cls.__mro__):
        if owner.__module__ in _MACHINERY_MODULES:
            continue
        for name in vars(owner):
            if name.startswith("_") or name in INCIDENTAL_MEMBERS or name in cls.__members__ or name in names:
                continue
            names.append(name)

    accessors: list[Accessor] = []
    for name in names:
        accessor = _accessor_for(cls, name, inspect.getattr_static(cls, name))
        if accessor is not None:
            accessors.append(accessor)
    return accessors


def load_domain_class(cls: type[Enum]) -> DomainClass:
    """Capture the schema and every member's property values of *cls*.

    Members are taken in declaration order; aliases are skipped.

    Raises:
        ReflectionError: If introspection fails or reading a property raises.
    """
    accessors = discover_properties(cls)
    variants: list[Variant] = []
    for ordinal, member in enumerate(cls):
        values: dict[str, Any] = {}
        for accessor in accessors:
            try:
                values[accessor.name] = accessor.read(member)
            except Exception as exc:
                raise ReflectionError(
                    f"Reading '{accessor.name}' of {cls.__name__}.{member.name} failed: {exc}"
                ) from exc
        variants.append(Variant(name=member.name, ordinal=ordinal, values=values))

    return DomainClass(
        name=cls.__name__,
        properties=tuple(PropertyDef(name=a.name, type=a.type) for a in accessors),
        variants=tuple(variants),
    )


# ################
# Implementation
# ################

_MACHINERY_MODULES = frozenset({"builtins", "enum"})

_PRIMITIVES: dict[type, PrimitiveKind] = {
    bool: PrimitiveKind.BOOL,
    int: PrimitiveKind.INT,
    float: PrimitiveKind.FLOAT,
    str: PrimitiveKind.STRING,
}


def _describe_parameterized(origin: Any, args: tuple[Any, ...]) -> TypeDescriptor:
    if origin in (list, Sequence) and len(args) == 1:
        return ListDescriptor(element=describe_type(args[0]))
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return ListDescriptor(element=describe_type(args[0]))
    if origin is tuple and len(args) == 2:
        return PairDescriptor(first=describe_type(args[0]), second=describe_type(args[1]))
    if origin in (dict, Mapping) and len(args) == 2:
        return MapDescriptor(key=describe_type(args[0]), value=describe_type(args[1]))
    return GenericDescriptor(
        origin=_type_name(origin),
        arguments=tuple(describe_type(a) for a in args if a is not Ellipsis),
    )


def _type_name(annotation: Any) -> str:
    if annotation is None or annotation is type(None):
        return "None"
    name = getattr(annotation, "__qualname__", None) or getattr(annotation, "__name__", None)
    return name if isinstance(name, str) else repr(annotation)


def _accessor_for(cls: type[Enum], name: str, attribute: Any) -> Accessor | None:
    if isinstance(attribute, property):
        if attribute.fget is None:
            return None
        function: Callable[..., Any] = attribute.fget
        is_method = False
    elif inspect.isfunction(attribute):
        parameters = list(inspect.signature(attribute).parameters.values())
        if len(parameters) != 1 or parameters[0].kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            logger.debug("Skipping %s.%s: method takes arguments besides self", cls.__name__, name)
            return None
        function = attribute
        is_method = True
    elif isinstance(attribute, (functools.cached_property, types.DynamicClassAttribute)):
        # enum.property is a DynamicClassAttribute.
        logger.warning(
            "Skipping %s.%s: %s is not supported, declare it as a property or a method",
            cls.__name__,
            name,
            type(attribute).__name__,
        )
        return None
    else:
        # staticmethod, classmethod, nested classes and other descriptors.
        logger.debug("Skipping %s.%s: not a property or a method", cls.__name__, name)
        return None

    try:
        hints = typing.get_type_hints(function)
    except Exception as exc:
        raise ReflectionError(f"Cannot evaluate the return annotation of {cls.__name__}.{name}: {exc}") from exc

    if "return" not in hints:
        return Accessor(name, OpaqueDescriptor(name="<unannotated>"), is_method)
    if hints["return"] is type(None):
        return None
    return Accessor(name, describe_type(hints["return"]), is_method)
