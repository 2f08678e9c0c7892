"""Pytest configuration and fixtures."""
import os

import pytest

SAMPLE_ENV = """
# Comment line
PORT=8080 # HTTP port
STATIC=/app/assets
SESSION_SECRET=supersecret
DB_PATH=/app/data.db # SQLite database location
"""


class ScriptedPrompter:
    """Prompter that replays canned answers and records every question."""

    def __init__(self, strings=(), confirms=()):
        self.strings = list(strings)
        self.confirms = list(confirms)
        self.asked = []

    def prompt_string(self, title, default=None):
        self.asked.append(("string", title, default))
        if not self.strings:
            raise AssertionError(f"Unexpected string prompt: {title}")
        return self.strings.pop(0)

    def prompt_confirm(self, title, default=False):
        self.asked.append(("confirm", title, default))
        if not self.confirms:
            raise AssertionError(f"Unexpected confirm prompt: {title}")
        return self.confirms.pop(0)


@pytest.fixture
def sample_env(tmp_path):
    """Write the sample .env file into a temp directory and return its path."""
    path = tmp_path / "sample.env"
    path.write_text(SAMPLE_ENV, encoding="utf-8")
    return path


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def clean_env2tf_vars(monkeypatch):
    """Keep ENV2TF_* overrides from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("ENV2TF_RENDER_") or name.startswith("ENV2TF_PATHS_"):
            monkeypatch.delenv(name)
