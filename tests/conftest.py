# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import pytest

from lib_wizard.composer import LicenseTemplate

CURRENT_YEAR = 2024


@pytest.fixture
def template() -> LicenseTemplate:
    return LicenseTemplate(text="MIT License\n\nCopyright YYYY Example Corp\n")


@pytest.fixture
def current_year() -> int:
    return CURRENT_YEAR
