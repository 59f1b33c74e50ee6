# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the enumtab generator configuration file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from enumtab.codegen.emitter import DEFAULT_PRELUDE
from enumtab.codegen.output import SOURCE_SUFFIX

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = "enumtab.yaml"


class GeneratorConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


class GeneratorConfig(BaseModel):
    """The parsed generator configuration.

    Attributes:
        domain_classes: ``package.module:ClassName`` references, generated in order.
        prelude: Import line placed at the top of every generated file.
        file_suffix: Suffix appended to every generated file name.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    domain_classes: list[str] = Field(alias="domain-classes", default_factory=list)
    prelude: str = DEFAULT_PRELUDE
    file_suffix: str = Field(alias="file-suffix", default=SOURCE_SUFFIX)


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and validate a generator configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``enumtab.yaml`` file.

    Returns:
        A validated GeneratorConfig instance.

    Raises:
        GeneratorConfigError: If the file cannot be read, contains invalid
            YAML, or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read generator config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{path}: generator config must be a YAML mapping")

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        raise GeneratorConfigError(f"Invalid generator config '{path}': {exc}") from exc


def render_default_config(domain_classes: list[str] | None = None) -> str:
    """Return the YAML text of a starter configuration file."""
    config = GeneratorConfig(domain_classes=domain_classes or [])
    header = "# enumtab generator configuration\n# List enum classes as 'package.module:ClassName'.\n"
    return header + yaml.dump(config.model_dump(by_alias=True), default_flow_style=False, sort_keys=False)
