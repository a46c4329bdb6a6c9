"""Root test configuration: shared fixtures and logger cleanup"""

import logging

import pytest

from mdpage.logging_config import LOGGER_NAME


@pytest.fixture(name="md_file")
def md_file_fixture(tmp_path):
    """Factory writing a UTF-8 Markdown file under tmp_path."""
    def _make(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _make


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run each test from an empty directory with no MDPAGE_* overrides."""
    monkeypatch.chdir(tmp_path)
    for name in ("OUTPUT_DIR", "LANG", "ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(f"MDPAGE_{name}", raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to CliRunner streams once a test finishes."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
