# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of one domain class into a self-contained Rust source unit.

The unit consists of, in order:

1. a fixed prelude line,
2. a ``<Class>Data`` record struct with one field per schema entry,
3. a static array holding one ``<Class>Data`` initializer per variant, and
4. an ``impl <Class>`` facade with one accessor per schema entry that looks up
   the static array by the variant's ordinal.

All three sections are rendered from the same :class:`Schema` instance so
that field order and naming stay consistent between them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from enumtab.codegen.identifiers import to_field_name, to_target_identifier
from enumtab.codegen.representation import TypeRepresentation, ValueShapeMismatchError
from enumtab.codegen.resolver import resolve
from enumtab.model.entities import DomainClass, Variant

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_PRELUDE = "use crate::prelude::*;"
INDENT = "    "


class EmitError(Exception):
    """Raised when a domain class cannot be rendered into valid source text.

    Attributes:
        class_name: Name of the domain class being emitted.
    """

    def __init__(self, message: str, class_name: str) -> None:
        super().__init__(f"{class_name}: {message}")
        self.class_name = class_name


@dataclass(frozen=True)
class SchemaField:
    """One property of a domain class as it appears in generated code.

    Attributes:
        identifier: Rust field and accessor name.
        source_name: Property name as discovered on the domain class.
        representation: How the property's type and values are rendered.
    """

    identifier: str
    source_name: str
    representation: TypeRepresentation


@dataclass(frozen=True)
class Schema:
    """The ordered fields of one domain class."""

    class_name: str
    fields: tuple[SchemaField, ...]

    @property
    def record_name(self) -> str:
        return f"{self.class_name}Data"

    @property
    def table_name(self) -> str:
        return to_target_identifier(self.record_name).upper()


def build_schema(domain_class: DomainClass) -> Schema:
    """Resolve every property of *domain_class* into a schema field.

    Raises:
        UnsupportedTypeError: If a property type has no representation.
        EmitError: If two properties map to the same identifier.
    """
    fields: list[SchemaField] = []
    seen: dict[str, str] = {}
    for prop in domain_class.properties:
        identifier = to_field_name(prop.name)
        if identifier in seen:
            raise EmitError(
                f"properties '{seen[identifier]}' and '{prop.name}' both map to field '{identifier}'",
                domain_class.name,
            )
        seen[identifier] = prop.name
        fields.append(SchemaField(identifier, prop.name, resolve(prop.type)))

    schema = Schema(domain_class.name, tuple(fields))
    logger.debug(
        "Schema for %s: %s",
        domain_class.name,
        ", ".join(f"{f.identifier}: {f.representation.to_type()}" for f in schema.fields),
    )
    return schema


def emit(domain_class: DomainClass, prelude: str = DEFAULT_PRELUDE) -> str:
    """Render *domain_class* and its variants as Rust source text.

    A value that does not match its field's representation fails the whole
    class; partially rendered text is never returned.

    Args:
        domain_class: The class with its properties and variants.
        prelude: The import line placed at the top of the unit.

    Returns:
        The complete source unit, terminated by a newline.

    Raises:
        UnsupportedTypeError: If a property type has no representation.
        EmitError: If any variant value cannot be rendered.
    """
    schema = build_schema(domain_class)
    sections = [
        prelude,
        _render_record(schema),
        _render_table(schema, domain_class.variants),
        _render_facade(schema),
    ]
    return "\n\n".join(sections) + "\n"


# ################
# Implementation
# ################


def _render_record(schema: Schema) -> str:
    lines = [f"pub(crate) struct {schema.record_name} {{"]
    for field in schema.fields:
        lines.append(f"{INDENT}pub(crate) {field.identifier}: {field.representation.to_type()},")
    lines.append("}")
    return "\n".join(lines)


def _render_table(schema: Schema, variants: tuple[Variant, ...]) -> str:
    lines = [f"pub(crate) static {schema.table_name}: [{schema.record_name}; {len(variants)}] = ["]
    for index, variant in enumerate(variants):
        # The facade indexes the table with `*self as usize`.
        if variant.ordinal != index:
            raise EmitError(
                f"variant {variant.name} has ordinal {variant.ordinal} but is at table position {index}",
                schema.class_name,
            )
        lines.append(f"{INDENT}{_render_element(schema, variant)},")
    lines.append("];")
    return "\n".join(lines)


def _render_element(schema: Schema, variant: Variant) -> str:
    if not schema.fields:
        return f"{schema.record_name} {{}}"
    initializers = []
    for field in schema.fields:
        if field.source_name not in variant.values:
            raise EmitError(f"variant {variant.name} has no value for '{field.source_name}'", schema.class_name)
        try:
            rendered = field.representation.to_value(variant.values[field.source_name])
        except ValueShapeMismatchError as exc:
            logger.exception("Failed to render %s.%s.%s", schema.class_name, variant.name, field.source_name)
            raise EmitError(
                f"variant {variant.name}, property '{field.source_name}': {exc}",
                schema.class_name,
            ) from exc
        initializers.append(f"{field.identifier}: {rendered}")
    return f"{schema.record_name} {{ {', '.join(initializers)} }}"


def _render_facade(schema: Schema) -> str:
    lines = [
        f"impl {schema.class_name} {{",
        f"{INDENT}fn d(&self) -> &{schema.record_name} {{",
        f"{INDENT * 2}&{schema.table_name}[*self as usize]",
        f"{INDENT}}}",
    ]
    for field in schema.fields:
        lines.append("")
        lines.append(f"{INDENT}pub fn {field.identifier}(&self) -> {field.representation.to_type()} {{")
        lines.append(f"{INDENT * 2}self.d().{field.identifier}")
        lines.append(f"{INDENT}}}")
    lines.append("}")
    return "\n".join(lines)
