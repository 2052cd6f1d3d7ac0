#!/usr/bin/env python3
"""
Exceptions raised by the wikiquery client.

Every public operation either returns parsed data or raises one of these.
Nothing is retried or swallowed.
"""

from typing import Optional


class WikiError(Exception):
    """Base class for all wikiquery errors."""


class TransportError(WikiError):
    """The HTTP request failed (connection error, timeout, error status)."""


class ParseError(WikiError):
    """The response body was not valid JSON."""


class NotFoundError(WikiError):
    """A page, or a field expected in the response, does not exist."""


class ProtocolError(WikiError):
    """The server sent a continuation the client cannot follow."""


class APIError(WikiError):
    """The API answered with an ``error`` object."""

    def __init__(self, code: str, info: Optional[str] = None):
        self.code = code
        self.info = info
        super().__init__(f"{code}: {info}" if info else code)


class ConfigError(WikiError):
    """Client options are invalid."""
