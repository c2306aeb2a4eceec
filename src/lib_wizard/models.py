# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OutcomeKind(str, Enum):
    LICENSE_ADDED = "license_added"
    LICENSE_REGENERATED = "license_regenerated"
    LICENSE_FILE_WRITTEN = "license_file_written"
    REWRITE_FAILED = "rewrite_failed"


class RewriteOutcome(BaseModel):
    kind: OutcomeKind
    path: str
    message: str
    rewriter: str = Field(default="LicenseRewriter", description="Name of the rewriter that produced it")

    @property
    def failed(self) -> bool:
        return self.kind is OutcomeKind.REWRITE_FAILED

    def __str__(self) -> str:
        return f"[{self.rewriter}] {self.message}: {self.path}"


class ExcludeConfig(BaseModel):
    """Exclusion file contents, one pattern list per rewriter."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    license_rewriter: List[str] = Field(
        default_factory=list,
        alias="LicenseRewriter",
        description="Glob patterns skipped by the license rewriter",
    )
