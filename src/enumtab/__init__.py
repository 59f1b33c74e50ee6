# Copyright 2026 enumtab Contributors
# SPDX-License-Identifier: Apache-2.0

"""enumtab: static Rust data tables generated from Python enum classes."""

__version__ = "0.1.0"
