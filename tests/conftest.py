import os

import pytest
from typer.testing import CliRunner

from stringext.core.models import RepairConfig


class FakeRepairer:
    """Records repair calls and returns a canned document."""

    def __init__(self, document=b"<html><body><p>repaired</p></body></html>"):
        self.document = document
        self.calls = []

    def repair(self, markup, config):
        self.calls.append((markup, config))
        return self.document


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep STRINGEXT_* variables (including ones loaded from .env) out of tests."""
    for key in list(os.environ):
        if key.startswith("STRINGEXT_"):
            monkeypatch.delenv(key)
    yield
    for key in list(os.environ):
        if key.startswith("STRINGEXT_"):
            del os.environ[key]


@pytest.fixture
def fake_repairer():
    return FakeRepairer()


@pytest.fixture
def repair_config():
    return RepairConfig()


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Empty project root (pyproject.toml + config/) used as cwd."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
    (tmp_path / "config").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def runner(project_dir):
    return CliRunner()


@pytest.fixture
def sample_article_html():
    return (
        "<div class=\"article\">"
        "<!-- teaser starts -->"
        "<p>The <strong>first</strong> paragraph talks about <em>music</em>.</p>\n"
        "<p>A second paragraph with a <a href=\"https://example.com\">link</a> "
        "and a <span class=\"note\">note</span>.</p>\n"
        "<p>Third and last.</p>"
        "</div>"
    )
