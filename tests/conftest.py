# -*- coding: utf-8 -*-
"""Location: ./tests/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
"""

# Standard
import logging
import os

# Third-Party
import pytest

# First-Party
from toonkit.config import get_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every TOON_* variable from the environment."""
    for name in list(os.environ):
        if name.upper().startswith("TOON_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Settings cache fixtures for test isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_settings_cache(clean_env, tmp_path):
    """Clear cached settings before and after each test to ensure isolation.

    Tests run from an empty directory so a stray ``.env`` file cannot leak in.
    """
    clean_env.chdir(tmp_path)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    logging.getLogger("toonkit").setLevel(logging.NOTSET)
