# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for enumtab documentation."""

project = "enumtab"
author = "enumtab Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
