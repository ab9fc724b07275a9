"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


# Pin every setting so tests never depend on the host locale or a stray .env
TEST_ENV = {
    "LOCALE_INDEX_OF_DEFAULT_LOCALE": "en",
    "LOCALE_INDEX_OF_SEGMENTER": "icu",
    "LOCALE_INDEX_OF_LOG_LEVEL": "info",
    "LOCALE_INDEX_OF_LOG_JSON": "true",
    "LOCALE_INDEX_OF_SERVICE_NAME": "locale-index-of-tests",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset locale-index-of environment variables before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
