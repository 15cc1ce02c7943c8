"""Shared fixtures for the transkit test suite."""

import logging
from pathlib import Path

import pytest
import structlog
import yaml

from transkit.i18n import service

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Keep transkit log events out of the test output."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    yield
    structlog.reset_defaults()


@pytest.fixture
def fixture_locales_dir():
    """Directory with the sample locale files shipped with the tests."""
    return FIXTURES_DIR / "locales"


@pytest.fixture
def write_locale_file(tmp_path):
    """Write a locale file under tmp_path and return its path.

    Mappings are dumped as YAML; strings are written verbatim so tests can
    provide JSON, TOML or malformed content.
    """

    def _write(relative_path, content):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            with open(path, "w", encoding="utf-8") as f:
                yaml.dump(content, f, allow_unicode=True)
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_translation_service():
    """Ensure no process-wide translation service leaks between tests."""
    service.reset()
    yield
    service.reset()
