# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from dataclasses import dataclass, field
from typing import Optional


def _get_bool(value: str, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}

def _get_csv_list(value: str) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    # NOTE: use default_factory so env vars are read when Settings() is instantiated,
    # not at import time (important for tests and predictable runtime behavior).
    # None means the packaged resources/excludes.json.
    exclude_file: Optional[str] = field(default_factory=lambda: os.getenv("LIB_WIZARD_EXCLUDE_FILE") or None)
    extensions: list[str] = field(
        default_factory=lambda: _get_csv_list(os.getenv("LIB_WIZARD_EXTENSIONS", ".js,.nut"))
    )
    # None means the packaged resources/LICENSE.example.
    license_template: Optional[str] = field(default_factory=lambda: os.getenv("LIB_WIZARD_LICENSE_TEMPLATE") or None)
    license_filename: str = field(default_factory=lambda: os.getenv("LIB_WIZARD_LICENSE_FILE", "LICENSE"))

    # Remote checkouts.
    # - branch is passed to `git clone --branch`; empty means the remote default.
    # - local reuses an existing checkout without contacting the remote.
    branch: str = field(default_factory=lambda: os.getenv("LIB_WIZARD_BRANCH", ""))
    local: bool = field(default_factory=lambda: _get_bool(os.getenv("LIB_WIZARD_LOCAL"), False))
    workdir: str = field(default_factory=lambda: os.getenv("LIB_WIZARD_WORKDIR", "."))

    log_level: str = field(default_factory=lambda: os.getenv("LIB_WIZARD_LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LIB_WIZARD_LOG_FILE") or None)
    log_max_bytes: int = field(default_factory=lambda: int(os.getenv("LIB_WIZARD_LOG_MAX_BYTES", "10485760")))
    log_backup_count: int = field(default_factory=lambda: int(os.getenv("LIB_WIZARD_LOG_BACKUP_COUNT", "5")))
    log_json_format: bool = field(default_factory=lambda: _get_bool(os.getenv("LIB_WIZARD_LOG_JSON"), False))
