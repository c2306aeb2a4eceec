# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import argparse
from typing import List, Optional

from . import __version__
from .config import Settings
from .errors import LibWizardError
from .logging_config import setup_logging
from .repo import is_remote
from .wizard import LibWizard


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lib-wizard",
        description="Insert or refresh license headers in a source tree.",
    )
    parser.add_argument("path", nargs="?", help="Directory to process, or a git repository URL")
    parser.add_argument("--exclude-file", help="JSON file with exclude patterns per rewriter")
    parser.add_argument("--branch", help="Branch to check out when PATH is a repository URL")
    parser.add_argument(
        "--local",
        action="store_true",
        default=None,
        help="Reuse an existing checkout instead of contacting the remote",
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help()
        return 0

    settings = Settings()
    if args.exclude_file:
        settings.exclude_file = args.exclude_file
    if args.branch:
        settings.branch = args.branch
    if args.local is not None:
        settings.local = args.local
    if args.log_level:
        settings.log_level = args.log_level

    logger = setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        json_format=settings.log_json_format,
    )
    logger.info(f"LibWizard v{__version__}")

    wizard = LibWizard(settings=settings, logger=logger)
    try:
        wizard.init()
        target = wizard.get_repo(args.path) if is_remote(args.path) else args.path
        wizard.conjure(target)
    except (LibWizardError, ValueError, OSError) as exc:
        logger.error(f"{exc}")
        return 1

    failures = [outcome for outcome in wizard.outcomes if outcome.failed]
    if failures:
        logger.error(f"{len(failures)} file(s) could not be rewritten")
        return 1
    logger.info(f"Processed {len(wizard.outcomes)} file(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
