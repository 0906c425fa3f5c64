# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Allow ``python -m tenant_hasher``."""

from tenant_hasher.cli import app

if __name__ == "__main__":
    app()
