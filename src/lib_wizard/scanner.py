# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

SHEBANG_PREFIX = "#!"
LINE_COMMENT = "//"
BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"

YEAR_PATTERN = re.compile(r"(\d{4})(-\d{4})?")
LICENSE_PATTERN = re.compile(r"license", re.IGNORECASE)


class CommentStyle(Enum):
    NONE = "none"
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True)
class HeaderScanResult:
    comment_style: CommentStyle
    # first line after the interpreter marker (0 without one)
    body_start: int
    # first line after the header
    header_end: int
    interpreter_marker: Optional[str] = None
    header_lines: List[str] = field(default_factory=list)
    resolved_year: str = ""
    has_license: bool = False
    # text after */ on the closing line
    trailing: str = ""


def find_year(line: str, year: str = "") -> str:
    """Return ``year`` if already resolved, else the first 4-digit year in ``line``.

    A range such as ``2017-2019`` resolves to its starting year.
    """
    if year:
        return year
    match = YEAR_PATTERN.search(line)
    if match:
        return match.group(1)
    return ""


def has_license_marker(line: str) -> bool:
    return LICENSE_PATTERN.search(line) is not None


def _strip_block_marker(text: str) -> str:
    text = text.strip()
    if text.startswith("*"):
        text = text[1:].strip()
    return text


def scan_header(lines: Sequence[str]) -> HeaderScanResult:
    style = CommentStyle.NONE
    marker: Optional[str] = None
    body_start = 0
    header_lines: List[str] = []
    year = ""
    has_license = False
    block_start = 0

    def consume(text: str) -> None:
        nonlocal year, has_license
        year = find_year(text, year)
        has_license = has_license or has_license_marker(text)
        header_lines.append(text)

    for index, raw in enumerate(lines):
        line = raw.strip()

        if style is CommentStyle.NONE:
            if not line:
                continue
            if marker is None and line.startswith(SHEBANG_PREFIX):
                marker = line
                body_start = index + 1
                continue
            if line.startswith(LINE_COMMENT):
                style = CommentStyle.LINE
                consume(line[len(LINE_COMMENT):].strip())
                continue
            if line.startswith(BLOCK_OPEN):
                style = CommentStyle.BLOCK
                block_start = index
                rest = line[len(BLOCK_OPEN):]
                close = rest.find(BLOCK_CLOSE)
                if close > -1:
                    consume(_strip_block_marker(rest[:close]))
                    return HeaderScanResult(
                        comment_style=style,
                        body_start=body_start,
                        header_end=index + 1,
                        interpreter_marker=marker,
                        header_lines=header_lines,
                        resolved_year=year,
                        has_license=has_license,
                        trailing=rest[close + len(BLOCK_CLOSE):].strip(),
                    )
                consume(_strip_block_marker(rest))
                continue
            return HeaderScanResult(
                comment_style=CommentStyle.NONE,
                body_start=body_start,
                header_end=index,
                interpreter_marker=marker,
            )

        if style is CommentStyle.LINE:
            if not line.startswith(LINE_COMMENT):
                return HeaderScanResult(
                    comment_style=style,
                    body_start=body_start,
                    header_end=index,
                    interpreter_marker=marker,
                    header_lines=header_lines,
                    resolved_year=year,
                    has_license=has_license,
                )
            consume(line[len(LINE_COMMENT):].strip())
            continue

        # CommentStyle.BLOCK
        close = line.find(BLOCK_CLOSE)
        if close > -1:
            consume(_strip_block_marker(line[:close]))
            return HeaderScanResult(
                comment_style=style,
                body_start=body_start,
                header_end=index + 1,
                interpreter_marker=marker,
                header_lines=header_lines,
                resolved_year=year,
                has_license=has_license,
                trailing=line[close + len(BLOCK_CLOSE):].strip(),
            )
        consume(_strip_block_marker(line))

    if style is CommentStyle.LINE:
        return HeaderScanResult(
            comment_style=style,
            body_start=body_start,
            header_end=len(lines),
            interpreter_marker=marker,
            header_lines=header_lines,
            resolved_year=year,
            has_license=has_license,
        )

    # empty file, or an unterminated block comment
    return HeaderScanResult(
        comment_style=CommentStyle.NONE,
        body_start=body_start,
        header_end=block_start if style is CommentStyle.BLOCK else len(lines),
        interpreter_marker=marker,
    )
