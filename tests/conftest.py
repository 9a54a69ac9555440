"""Global pytest configuration and fixtures for the Telraam client tests.

Provides settings isolation and access to the JSON bodies under tests/data.
"""

import json
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True, scope="function")
def reset_settings_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings with no token configured."""
    from telraam.config import reset_settings

    monkeypatch.chdir(DATA_DIR)  # keep a developer's .env out of the tests
    monkeypatch.delenv("TELRAAM_TOKEN", raising=False)
    reset_settings()

    yield

    reset_settings()


@pytest.fixture
def load_json() -> Callable[[str], Any]:
    """Load a response body from tests/data by file name."""

    def _load(name: str) -> Any:
        with open(DATA_DIR / name, encoding="utf-8") as f:
            return json.load(f)

    return _load
