# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .composer import LicenseTemplate, compose_license
from .enumerator import iter_files
from .excludes import ExcludeRuleSet
from .logging_config import get_logger
from .models import OutcomeKind, RewriteOutcome
from .scanner import LINE_COMMENT, CommentStyle, scan_header

DEFAULT_EXTENSIONS = (".js", ".nut")


class LicenseRewriter:
    name = "LicenseRewriter"

    def __init__(
        self,
        rules: Optional[ExcludeRuleSet] = None,
        template: Optional[LicenseTemplate] = None,
        *,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        license_filename: str = "LICENSE",
        logger: Optional[logging.Logger] = None,
        current_year: Optional[int] = None,
    ):
        self.rules = rules or ExcludeRuleSet()
        self.template = template or LicenseTemplate.default()
        self.extensions = frozenset(ext if ext.startswith(".") else f".{ext}" for ext in extensions)
        self.license_filename = license_filename
        self.logger = logger or get_logger("lib_wizard.rewriter")
        self.current_year = current_year

    def rewrite(self, root: Union[str, Path]) -> List[RewriteOutcome]:
        root = Path(root)
        outcomes: List[RewriteOutcome] = []

        def unreadable(exc: OSError) -> None:
            outcomes.append(self._failed(Path(exc.filename or root), exc))

        for path in iter_files(root, self.rules, onerror=unreadable):
            if path.suffix in self.extensions:
                outcomes.append(self.rewrite_source_file(path))
        outcomes.append(self.rewrite_license_file(root))
        return outcomes

    def rewrite_license_file(self, root: Union[str, Path]) -> RewriteOutcome:
        path = Path(root) / self.license_filename
        # always the current year alone, whatever the sources carry
        text = compose_license(self.template, CommentStyle.NONE, "", self.current_year)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            return self._failed(path, exc)
        return self._outcome(OutcomeKind.LICENSE_FILE_WRITTEN, path, f"New {self.license_filename} file generated")

    def rewrite_source_file(self, path: Union[str, Path]) -> RewriteOutcome:
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return self._failed(path, exc)

        new_content, kind = self.render(content)

        try:
            path.write_text(new_content, encoding="utf-8")
        except OSError as exc:
            return self._failed(path, exc)

        if kind is OutcomeKind.LICENSE_ADDED:
            return self._outcome(kind, path, "file had no license, license was added")
        return self._outcome(kind, path, "license generated")

    def render(self, content: str) -> tuple[str, OutcomeKind]:
        lines = content.split("\n")
        scan = scan_header(lines)

        if not scan.has_license:
            header = compose_license(self.template, CommentStyle.LINE, "", self.current_year)
            rest = lines[scan.body_start:]
            if rest and rest[0].strip().startswith(LINE_COMMENT):
                # keep an existing line comment from merging into the license block
                rest = [""] + rest
            return _assemble(scan.interpreter_marker, header, rest), OutcomeKind.LICENSE_ADDED

        header = compose_license(self.template, scan.comment_style, scan.resolved_year, self.current_year)
        rest = lines[scan.header_end:]
        if scan.trailing:
            # code sharing the line with the closing */
            rest = [scan.trailing] + rest
        return _assemble(scan.interpreter_marker, header, rest), OutcomeKind.LICENSE_REGENERATED

    def _outcome(self, kind: OutcomeKind, path: Path, message: str) -> RewriteOutcome:
        self.logger.debug(f"{message}: {path}")
        return RewriteOutcome(kind=kind, path=str(path), message=message, rewriter=self.name)

    def _failed(self, path: Path, exc: Exception) -> RewriteOutcome:
        self.logger.error(f"Failed to rewrite {path}: {exc}")
        return RewriteOutcome(
            kind=OutcomeKind.REWRITE_FAILED,
            path=str(path),
            message=f"could not rewrite file: {exc}",
            rewriter=self.name,
        )


def _assemble(marker: Optional[str], header: str, rest: Sequence[str]) -> str:
    parts = [marker] if marker else []
    parts.append(header)
    parts.extend(rest)
    return "\n".join(parts)
