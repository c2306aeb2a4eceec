# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Optional, Union

from .scanner import BLOCK_CLOSE, BLOCK_OPEN, LINE_COMMENT, CommentStyle

YEAR_PLACEHOLDER = "YYYY"
DEFAULT_TEMPLATE_RESOURCE = "resources/LICENSE.example"


@dataclass(frozen=True)
class LicenseTemplate:
    text: str

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "LicenseTemplate":
        if path is None:
            text = files("lib_wizard").joinpath(DEFAULT_TEMPLATE_RESOURCE).read_text(encoding="utf-8")
        else:
            text = Path(path).read_text(encoding="utf-8")
        if YEAR_PLACEHOLDER not in text:
            raise ValueError(f"License template has no {YEAR_PLACEHOLDER} placeholder: {path or DEFAULT_TEMPLATE_RESOURCE}")
        return cls(text=text)

    @classmethod
    def default(cls) -> "LicenseTemplate":
        return _default_template()

    def render(self, year_string: str) -> str:
        return self.text.replace(YEAR_PLACEHOLDER, year_string, 1)


@lru_cache(maxsize=1)
def _default_template() -> LicenseTemplate:
    return LicenseTemplate.load()


def year_string(year: str, current_year: Optional[int] = None) -> str:
    current = str(current_year or date.today().year)
    if not year or year == current:
        return current
    return f"{year}-{current}"


def compose_license(
    template: LicenseTemplate,
    style: CommentStyle,
    year: str = "",
    current_year: Optional[int] = None,
) -> str:
    text = template.render(year_string(year, current_year))

    if style is CommentStyle.LINE:
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return "\n".join(LINE_COMMENT + line for line in lines)
    if style is CommentStyle.BLOCK:
        return BLOCK_OPEN + text + BLOCK_CLOSE
    return text
