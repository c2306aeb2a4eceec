# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
from importlib.resources import files
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from .composer import LicenseTemplate
from .config import Settings
from .errors import ConfigurationError
from .excludes import ExcludeRuleSet
from .logging_config import get_logger
from .models import ExcludeConfig, RewriteOutcome
from .repo import clone_or_pull, local_path_for
from .rewriter import LicenseRewriter

DEFAULT_EXCLUDE_RESOURCE = "resources/excludes.json"


class LibWizard:
    def __init__(self, settings: Optional[Settings] = None, logger: Optional[logging.Logger] = None):
        self.settings = settings or Settings()
        self.logger = logger or get_logger("lib_wizard.wizard")
        self.exclude = ExcludeConfig()
        self.rewriters: List[LicenseRewriter] = []
        self.outcomes: List[RewriteOutcome] = []

    def load_excludes(self, path: Optional[Union[str, Path]] = None) -> ExcludeConfig:
        path = path if path is not None else self.settings.exclude_file
        try:
            if path is None:
                raw = files("lib_wizard").joinpath(DEFAULT_EXCLUDE_RESOURCE).read_text(encoding="utf-8")
            else:
                raw = Path(path).read_text(encoding="utf-8")
            return ExcludeConfig.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            raise ConfigurationError(f"Cannot load exclude file {path or DEFAULT_EXCLUDE_RESOURCE}: {exc}") from exc

    def init(self, current_year: Optional[int] = None) -> None:
        try:
            self.exclude = self.load_excludes()
        except ConfigurationError as exc:
            self.logger.error(str(exc))
            self.exclude = ExcludeConfig()

        rules = ExcludeRuleSet.from_patterns(self.exclude.license_rewriter)
        template = (
            LicenseTemplate.load(self.settings.license_template)
            if self.settings.license_template
            else LicenseTemplate.default()
        )
        self.rewriters = [
            LicenseRewriter(
                rules,
                template,
                extensions=self.settings.extensions,
                license_filename=self.settings.license_filename,
                logger=get_logger("lib_wizard.rewriter"),
                current_year=current_year,
            )
        ]

    def conjure(self, path: Union[str, Path]) -> bool:
        """Run every rewriter on ``path``. True when nothing had to be reported."""
        if not self.rewriters:
            self.init()

        verified = True
        for rewriter in self.rewriters:
            outcomes = rewriter.rewrite(path)
            for outcome in outcomes:
                if outcome.failed:
                    self.logger.error(str(outcome))
                else:
                    self.logger.info(str(outcome))
                verified = False
            self.outcomes.extend(outcomes)
        return verified

    def get_repo(self, link: str) -> Path:
        destination = Path(self.settings.workdir) / local_path_for(link)
        if self.settings.local and destination.exists():
            self.logger.info(f"Using local copy {destination}")
            return destination
        return clone_or_pull(link, destination, branch=self.settings.branch, log=self.logger)
