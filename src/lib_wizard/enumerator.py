# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from .excludes import ExcludeRuleSet


def iter_files(
    root: Union[str, Path],
    rules: Optional[ExcludeRuleSet] = None,
    onerror: Optional[Callable[[OSError], None]] = None,
) -> Iterator[Path]:
    """Yield every file under ``root`` that no exclusion rule matches.

    Excluded directories are pruned before descending. A directory that cannot
    be listed is passed to ``onerror`` and skipped.
    """
    root = Path(root)
    rules = rules or ExcludeRuleSet()

    for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
        current = Path(dirpath)
        relative = current.relative_to(root)

        dirnames[:] = sorted(
            name for name in dirnames
            if not rules.is_excluded((relative / name).as_posix())
        )
        for name in sorted(filenames):
            if rules.is_excluded((relative / name).as_posix()):
                continue
            yield current / name
