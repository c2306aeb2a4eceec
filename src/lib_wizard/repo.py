# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import urlparse

from .errors import RepositoryError
from .logging_config import get_logger

logger = get_logger(__name__)

REMOTE_SCHEMES = {"http", "https", "ssh", "git", "file"}


def is_remote(link: str) -> bool:
    return urlparse(link).scheme in REMOTE_SCHEMES


def local_path_for(link: str) -> str:
    """Name of the local checkout directory for a repository URL.

    ``https://github.com/org/lib.git`` becomes ``org_lib_git``.
    """
    path = urlparse(link).path
    return path[1:].replace(".", "_").replace("/", "_")


def _git(args: List[str], cwd: Optional[Path] = None) -> str:
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True,
        )
    except FileNotFoundError as exc:
        raise RepositoryError("git executable not found") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or exc.stdout or "").strip()
        raise RepositoryError(f"git {args[0]} failed: {detail}") from exc
    return result.stdout


def clone_or_pull(
    link: str,
    destination: Union[str, Path],
    branch: str = "",
    log: Optional[logging.Logger] = None,
) -> Path:
    """Clone ``link`` into ``destination``, or fast-forward an existing checkout."""
    log = log or logger
    destination = Path(destination)

    if (destination / ".git").exists():
        log.info(f"Updating {destination} from {link}")
        args = ["pull", "--ff-only", "origin"]
        if branch:
            args.append(branch)
        _git(args, cwd=destination)
        return destination

    log.info(f"Cloning {link} into {destination}")
    args = ["clone"]
    if branch:
        args.extend(["--branch", branch])
    args.extend([link, str(destination)])
    _git(args)
    return destination
