"""Root test configuration: isolate tests from ambient SAFESLUG_* settings"""

import os

import pytest

from safeslug.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop SAFESLUG_* env vars so a developer's shell does not leak into tests."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
