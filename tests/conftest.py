# tests/conftest.py
from __future__ import annotations

import pytest

from domain.credentials import Credentials
from tests.doubles import RecordingExecutor, RecordingLogger


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        api_key="sk_test_123456",
        api_base_url="https://api.example.test",
        api_version="2019-03-14",
        profile="test",
    )


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()
