# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reflection provider turning Python enums into domain class models."""

from enumtab.reflection.introspect import (
    INCIDENTAL_MEMBERS,
    Accessor,
    ReflectionError,
    describe_type,
    discover_properties,
    import_domain_class,
    load_domain_class,
)

__all__ = [
    "INCIDENTAL_MEMBERS",
    "Accessor",
    "ReflectionError",
    "describe_type",
    "discover_properties",
    "import_domain_class",
    "load_domain_class",
]
