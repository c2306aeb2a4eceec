# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, List, Optional, Tuple, Union

from .logging_config import get_logger

logger = get_logger(__name__)

COMMENT_PREFIX = "#"
NEGATION_PREFIX = "!"

# Wildcards never match a leading "." in a path segment, and "**" never
# descends into dot directories, unless the pattern spells the dot out.
NO_DOT = r"(?!\.)"
GLOBSTAR_PREFIX = rf"(?:{NO_DOT}[^/]*/)*"
GLOBSTAR_SUFFIX = rf"(?:/{NO_DOT}[^/]*)*"
GLOBSTAR_ONLY = rf"(?:{NO_DOT}[^/]*{GLOBSTAR_SUFFIX})?"

NUMERIC_RANGE = re.compile(r"^(-?\d+)\.\.(-?\d+)$")


def _brace_alternatives(body: str) -> Optional[List[str]]:
    numeric = NUMERIC_RANGE.match(body)
    if numeric:
        start, end = int(numeric.group(1)), int(numeric.group(2))
        step = 1 if end >= start else -1
        return [str(value) for value in range(start, end + step, step)]

    alternatives = []
    depth = 0
    last = 0
    for index, ch in enumerate(body):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            alternatives.append(body[last:index])
            last = index + 1
    if not alternatives:
        # "{a}" is not an expansion
        return None
    alternatives.append(body[last:])
    return alternatives


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` and ``{1..3}`` groups, nested ones included."""
    start = pattern.find("{")
    while start != -1:
        depth = 0
        for index in range(start, len(pattern)):
            if pattern[index] == "{":
                depth += 1
            elif pattern[index] == "}":
                depth -= 1
                if depth == 0:
                    alternatives = _brace_alternatives(pattern[start + 1:index])
                    if alternatives is None:
                        break
                    prefix, suffix = pattern[:start], pattern[index + 1:]
                    expanded = []
                    for alternative in alternatives:
                        expanded.extend(expand_braces(prefix + alternative + suffix))
                    return expanded
        start = pattern.find("{", start + 1)
    return [pattern]


def _translate_segment(segment: str) -> str:
    out = [] if segment.startswith(".") else [NO_DOT]
    i = 0
    n = len(segment)
    while i < n:
        ch = segment[i]
        i += 1
        if ch == "*":
            while i < n and segment[i] == "*":
                i += 1
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        elif ch == "[":
            end = segment.find("]", i + 1 if i < n and segment[i] in "!^" else i)
            if end == -1:
                out.append(re.escape(ch))
                continue
            body = segment[i:end]
            i = end + 1
            if body[:1] in ("!", "^"):
                body = "^/" + body[1:]
            out.append("[" + body.replace("\\", "\\\\") + "]")
        else:
            out.append(re.escape(ch))
    return "".join(out)


def glob_to_regex(pattern: str) -> str:
    """Translate one brace-free glob into a regular expression for ``re.fullmatch``.

    A pattern without ``/`` matches a name at any depth. A trailing ``/**``
    also matches the directory itself.
    """
    pattern = pattern.strip()
    anchored = "/" in pattern.rstrip("/")
    pattern = pattern.lstrip("/").rstrip("/")
    if pattern.startswith("./"):
        pattern = pattern[2:]

    parts = []
    for segment in pattern.split("/"):
        if segment == "**":
            if parts and parts[-1] is None:
                continue
            parts.append(None)
        elif segment:
            parts.append(_translate_segment(segment))

    if not anchored and parts and parts[0] is not None:
        parts.insert(0, None)

    regex = ""
    last_index = len(parts) - 1
    for index, part in enumerate(parts):
        if part is None:
            if index == 0 and index == last_index:
                regex += GLOBSTAR_ONLY
            elif index == 0:
                regex += GLOBSTAR_PREFIX
            elif index == last_index:
                regex += GLOBSTAR_SUFFIX
            else:
                regex += "/" + GLOBSTAR_PREFIX
        else:
            if index > 0 and parts[index - 1] is not None:
                regex += "/"
            regex += part
    return regex


@dataclass(frozen=True)
class ExcludeRule:
    pattern: str
    regexes: Tuple[re.Pattern, ...]
    # "!pattern" excludes every path the pattern does not match
    negate: bool = False

    def matches(self, path: str) -> bool:
        hit = any(regex.fullmatch(path) for regex in self.regexes)
        return hit != self.negate


@dataclass(frozen=True)
class ExcludeRuleSet:
    rules: Tuple[ExcludeRule, ...] = ()

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "ExcludeRuleSet":
        rules = []
        for raw in patterns:
            value = raw.lstrip()
            if not value or value.startswith(COMMENT_PREFIX):
                continue
            body = value.lstrip(NEGATION_PREFIX)
            negate = (len(value) - len(body)) % 2 == 1
            try:
                regexes = tuple(re.compile(glob_to_regex(item)) for item in expand_braces(body))
            except re.error as exc:
                logger.warning(f"Skipping invalid exclude pattern {value!r}: {exc}")
                continue
            rules.append(ExcludeRule(pattern=value, regexes=regexes, negate=negate))
        return cls(rules=tuple(rules))

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(rule.pattern for rule in self.rules)

    def is_excluded(self, path: Union[str, PurePath]) -> bool:
        if isinstance(path, PurePath):
            path = path.as_posix()
        path = path.lstrip("/")
        if path.startswith("./"):
            path = path[2:]
        return any(rule.matches(path) for rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)
