# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Single-admin invoicing backend."""

__version__ = "1.0.0"
