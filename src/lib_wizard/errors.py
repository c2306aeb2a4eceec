# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later


class LibWizardError(RuntimeError):
    pass


class ConfigurationError(LibWizardError):
    """The exclusion configuration could not be loaded."""


class RepositoryError(LibWizardError):
    """A remote repository could not be cloned or updated."""
