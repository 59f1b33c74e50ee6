# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation workflow: load each domain class, render it, and write it out.

Classes are processed one at a time in the order given. A class is either
rendered completely and written, or generation stops with the first fatal
error; the failing class never produces a file. Files written for earlier
classes are left in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from enumtab.codegen.emitter import DEFAULT_PRELUDE, emit
from enumtab.codegen.output import SOURCE_SUFFIX, source_file_name, write_source
from enumtab.reflection.introspect import import_domain_class, load_domain_class

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def render_class(reference: str, prelude: str = DEFAULT_PRELUDE) -> tuple[str, str]:
    """Import, introspect and render one domain class.

    Args:
        reference: A ``package.module:ClassName`` reference.
        prelude: The import line placed at the top of the unit.

    Returns:
        A ``(class_name, source_text)`` tuple.

    Raises:
        ReflectionError: If the class cannot be imported or introspected.
        UnsupportedTypeError: If a property type has no representation.
        EmitError: If a value cannot be rendered.
    """
    domain_class = load_domain_class(import_domain_class(reference))
    logger.debug(
        "Loaded %s: %d properties, %d variants",
        domain_class.name,
        len(domain_class.properties),
        len(domain_class.variants),
    )
    return domain_class.name, emit(domain_class, prelude=prelude)


def generate(
    references: list[str],
    output_dir: Path,
    *,
    prelude: str = DEFAULT_PRELUDE,
    suffix: str = SOURCE_SUFFIX,
) -> list[Path]:
    """Generate one source file per domain class into *output_dir*.

    Returns:
        The paths written, in the order of *references*.

    Raises:
        ReflectionError, UnsupportedTypeError, EmitError: For the first class
            that cannot be rendered.
        OutputError: If a file cannot be written.
    """
    written: list[Path] = []
    for reference in references:
        class_name, text = render_class(reference, prelude=prelude)
        path = output_dir / source_file_name(class_name, suffix)
        write_source(text, path)
        logger.info("Wrote %s", path)
        written.append(path)
    return written
