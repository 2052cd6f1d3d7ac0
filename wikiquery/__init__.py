"""
Client library for the Wikipedia query API.

Provides:
- WikiAPI: requests, pagination, aggregation, search/random/geosearch/page lookup
- WikiPage: content, summary, images, links, categories, coordinates, infobox
- parse_infobox: infobox extraction from wikitext
- setup_logging: Logging configuration for console and file output
"""

from wikiquery.errors import (
    APIError,
    ConfigError,
    NotFoundError,
    ParseError,
    ProtocolError,
    TransportError,
    WikiError,
)
from wikiquery.infobox import parse_infobox
from wikiquery.logging_config import get_log_dir, setup_logging
from wikiquery.page import WikiPage
from wikiquery.wiki_api import PaginationResult, WikiAPI

__version__ = "0.1.0"

__all__ = [
    "WikiAPI",
    "WikiPage",
    "PaginationResult",
    "parse_infobox",
    "setup_logging",
    "get_log_dir",
    "WikiError",
    "TransportError",
    "ParseError",
    "NotFoundError",
    "ProtocolError",
    "APIError",
    "ConfigError",
]
