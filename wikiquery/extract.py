#!/usr/bin/env python3
"""Helpers for reading fields out of query API responses."""

from typing import Iterable

from wikiquery.errors import NotFoundError


def pluck(items: Iterable[dict], field: str) -> list:
    """Collect ``field`` from each item that has it."""
    return [item[field] for item in items if field in item]


def query_list(response: dict, name: str) -> list:
    """
    Read ``query.<name>`` from a list-query response.

    Raises:
        NotFoundError: if the response has no such list
    """
    try:
        return response["query"][name]
    except (KeyError, TypeError):
        raise NotFoundError(f"Response has no query.{name}") from None


def page_entry(response: dict, pageid: int) -> dict:
    """
    Read ``query.pages.<pageid>`` from a property-query response.

    Raises:
        NotFoundError: if the response has no entry for the page
    """
    try:
        return response["query"]["pages"][str(pageid)]
    except (KeyError, TypeError):
        raise NotFoundError(f"Response has no entry for page id {pageid}") from None
