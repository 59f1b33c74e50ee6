# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration handling."""

from enumtab.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
    render_default_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "GeneratorConfig",
    "GeneratorConfigError",
    "load_generator_config",
    "render_default_config",
]
