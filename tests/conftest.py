"""Pytest configuration and shared fixtures."""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path for all tests
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wikiquery.page import WikiPage
from wikiquery.wiki_api import WikiAPI


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep WIKIQUERY_* and LOG_DIR from the developer's shell out of tests."""
    for var in ("WIKIQUERY_LANGUAGE", "WIKIQUERY_TIMEOUT", "WIKIQUERY_USER_AGENT", "LOG_DIR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers setup_logging attached to the package logger."""
    yield
    logger = logging.getLogger("wikiquery")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_log_dir(tmp_path):
    """Provide a temporary directory for log files."""
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    return log_dir


def json_response(data):
    """Build a mock requests response whose body parses to ``data``."""
    response = Mock()
    response.json.return_value = data
    response.raise_for_status = Mock()
    return response


@pytest.fixture
def api():
    """WikiAPI with its session.get replaced by a Mock."""
    client = WikiAPI({"language": "en"})
    client.session.get = Mock()
    return client


@pytest.fixture
def respond(api):
    """Queue JSON bodies returned by successive session.get calls."""
    def _respond(*bodies):
        api.session.get.side_effect = [json_response(body) for body in bodies]
        return api.session.get
    return _respond


@pytest.fixture
def batman(api):
    """A resolved page handle for 'Batman' (page id 1234)."""
    return WikiPage.from_api({"pageid": 1234, "ns": 0, "title": "Batman"}, api)


@pytest.fixture
def sample_page_info():
    """Sample response of a page-info query."""
    return {
        "batchcomplete": "",
        "query": {
            "pages": {
                "1234": {
                    "pageid": 1234,
                    "ns": 0,
                    "title": "Batman",
                    "contentmodel": "wikitext",
                    "pagelanguage": "en",
                    "touched": "2024-01-01T00:00:00Z",
                    "lastrevid": 99,
                    "length": 12345,
                    "fullurl": "https://en.wikipedia.org/wiki/Batman",
                    "editurl": "https://en.wikipedia.org/w/index.php?title=Batman&action=edit",
                }
            }
        },
    }
