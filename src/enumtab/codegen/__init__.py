# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rust code generation: type resolution, value rendering, and emission."""

from enumtab.codegen.emitter import DEFAULT_PRELUDE, EmitError, Schema, SchemaField, build_schema, emit
from enumtab.codegen.generate import generate, render_class
from enumtab.codegen.identifiers import strip_accessor_prefix, to_field_name, to_target_identifier
from enumtab.codegen.output import SOURCE_SUFFIX, OutputError, source_file_name, write_source
from enumtab.codegen.representation import (
    EnumRef,
    Pair,
    Position,
    Scalar,
    ScalarKind,
    Seq,
    Str,
    TypeRepresentation,
    ValueShapeMismatchError,
)
from enumtab.codegen.resolver import UnsupportedTypeError, resolve

__all__ = [
    # Representations
    "ScalarKind",
    "Scalar",
    "EnumRef",
    "Str",
    "Position",
    "Seq",
    "Pair",
    "TypeRepresentation",
    "ValueShapeMismatchError",
    # Resolution
    "resolve",
    "UnsupportedTypeError",
    # Identifiers
    "to_target_identifier",
    "strip_accessor_prefix",
    "to_field_name",
    # Emission
    "Schema",
    "SchemaField",
    "build_schema",
    "emit",
    "EmitError",
    "DEFAULT_PRELUDE",
    # Output
    "source_file_name",
    "write_source",
    "OutputError",
    "SOURCE_SUFFIX",
    "generate",
    "render_class",
]
