#!/usr/bin/env python3
"""
Wikipedia query API client.

Provides:
- Single requests with fixed format/action parameters and JSON parsing
- Cursor-based pagination over list and property queries
- Aggregation of a pagination chain into one list
- Search, random, geosearch and page lookup

Usage:
    from wikiquery.wiki_api import WikiAPI

    api = WikiAPI({"language": "en"})
    first = api.search("star wars")
    titles = api.aggregate(first)
    page = api.page("Batman")
    print(page.summary())
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

import requests

from wikiquery.config import api_url_for, resolve_options
from wikiquery.errors import (
    APIError,
    NotFoundError,
    ParseError,
    ProtocolError,
    TransportError,
)
from wikiquery.extract import pluck, query_list
from wikiquery.page import WikiPage

FIXED_PARAMS = {
    "format": "json",
    "action": "query",
}


@dataclass
class PaginationResult:
    """One page of results and, when the server has more, a way to get the next one."""

    results: list
    next: Optional[Callable[[], "PaginationResult"]] = None

    @property
    def has_next(self) -> bool:
        return self.next is not None


def continuation_cursor(response: dict) -> Optional[tuple[str, Any]]:
    """
    Find the cursor in a response's ``continue`` object.

    Args:
        response: Parsed API response

    Returns:
        (parameter name, cursor value), or None when there are no more pages

    Raises:
        ProtocolError: if ``continue`` holds more than one cursor field
    """
    cont = response.get("continue")
    if not cont:
        return None

    keys = [key for key in cont if key != "continue"]
    if not keys:
        return None
    if len(keys) > 1:
        raise ProtocolError(f"Ambiguous continuation, cursor fields: {sorted(keys)}")
    return keys[0], cont[keys[0]]


class WikiAPI:
    """Client for the read-only MediaWiki query API of one Wikipedia edition."""

    def __init__(
        self,
        options: Optional[dict] = None,
        defaults_win: bool = False,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the client.

        Args:
            options: Overrides for the default options (language, api_url_fr,
                api_url_en, timeout, user_agent)
            defaults_win: Use the legacy merge order where defaults replace
                caller options
            session: Session to send requests with (creates one if not provided).
                Its User-Agent and Accept headers are overwritten in place.
            logger: Logger instance (creates one if not provided)
        """
        self.options = resolve_options(options, defaults_win=defaults_win)
        self.language = self.options["language"]
        self.api_url = api_url_for(self.options)
        self.timeout = self.options["timeout"]

        self.logger = logger or logging.getLogger(f"wikiquery.{self.language}")

        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.options["user_agent"],
            "Accept": "application/json",
        })

    def __enter__(self) -> "WikiAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def request(
        self,
        params: dict,
        description: str = "API request",
        timeout: Optional[float] = None,
    ) -> dict:
        """
        Make one API request.

        Args:
            params: Query parameters for the API call (not mutated)
            description: Human-readable description for logging
            timeout: Seconds before giving up (defaults to the client timeout)

        Returns:
            JSON response as dict

        Raises:
            TransportError: if the request fails or returns an error status
            ParseError: if the body is not JSON
            APIError: if the API reports an error
        """
        query = {**params, **FIXED_PARAMS}
        self.logger.debug(f"{description}: {query}")

        try:
            response = self.session.get(
                self.api_url,
                params=query,
                timeout=self.timeout if timeout is None else timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.warning(f"Request failed for {description}: {e}")
            raise TransportError(f"{description} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            self.logger.warning(f"Invalid JSON for {description}: {e}")
            raise ParseError(f"{description} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            self.logger.warning(f"Unexpected JSON for {description}: {type(data).__name__}")
            raise ParseError(f"{description} returned {type(data).__name__}, expected an object")

        if "error" in data:
            error = data["error"]
            if isinstance(error, dict):
                raise APIError(error.get("code", "unknown"), error.get("info"))
            raise APIError("unknown", str(error))
        return data

    def paginate(
        self,
        params: dict,
        extract: Callable[[dict], Iterable],
        description: str = "paginated query",
        timeout: Optional[float] = None,
    ) -> PaginationResult:
        """
        Fetch one page of a list or property query.

        Args:
            params: Query parameters (a snapshot is taken, the dict is not mutated)
            extract: Function from a raw response to the page's result items
            description: Human-readable description for logging
            timeout: Seconds before giving up on each request

        Returns:
            PaginationResult whose ``next`` fetches the following page
        """
        snapshot = dict(params)
        data = self.request(snapshot, description, timeout=timeout)
        results = list(extract(data))

        cursor = continuation_cursor(data)
        if cursor is None:
            return PaginationResult(results)

        key, value = cursor
        following = {**snapshot, key: value}

        def next_page() -> PaginationResult:
            return self.paginate(following, extract, description, timeout=timeout)

        return PaginationResult(results, next_page)

    def aggregate(
        self,
        pagination: PaginationResult,
        accumulated: Optional[list] = None,
        max_pages: Optional[int] = None,
    ) -> list:
        """
        Follow a pagination chain to the end and concatenate every page.

        Args:
            pagination: First page of the chain
            accumulated: Results to prepend (not mutated)
            max_pages: Stop with ProtocolError after this many pages (None = no limit)

        Returns:
            All results in page order
        """
        results = list(accumulated or [])
        pages = 0

        while True:
            results.extend(pagination.results)
            pages += 1
            self.logger.debug(f"Retrieved {len(results)} results over {pages} pages...")

            if pagination.next is None:
                return results
            if max_pages is not None and pages >= max_pages:
                raise ProtocolError(f"Continuation did not end after {max_pages} pages")
            pagination = pagination.next()

    def search(
        self,
        query: str,
        limit: int = 50,
        aggregated: bool = False,
        timeout: Optional[float] = None,
    ):
        """
        Search article titles.

        Args:
            query: Search keywords
            limit: Results per page
            aggregated: Return every result instead of the first page
            timeout: Seconds before giving up on each request

        Returns:
            PaginationResult of titles, or a list of titles if aggregated
        """
        pagination = self.paginate(
            {
                "list": "search",
                "srsearch": query,
                "srlimit": limit,
            },
            lambda res: pluck(query_list(res, "search"), "title"),
            f"searching '{query}'",
            timeout=timeout,
        )
        if aggregated:
            return self.aggregate(pagination)
        return pagination

    def random(self, limit: int = 1, timeout: Optional[float] = None) -> list[str]:
        """Titles of random main-namespace articles."""
        data = self.request(
            {
                "list": "random",
                "rnnamespace": 0,
                "rnlimit": limit,
            },
            "fetching random articles",
            timeout=timeout,
        )
        return pluck(query_list(data, "random"), "title")

    def geo_search(
        self,
        lat: float,
        lon: float,
        radius: int = 1000,
        timeout: Optional[float] = None,
    ) -> list[str]:
        """
        Titles of articles near a point.

        Args:
            lat: Latitude
            lon: Longitude
            radius: Search radius in meters
        """
        data = self.request(
            {
                "list": "geosearch",
                "gsradius": radius,
                "gscoord": f"{lat}|{lon}",
            },
            f"geosearch around {lat}|{lon}",
            timeout=timeout,
        )
        return pluck(query_list(data, "geosearch"), "title")

    def page(self, title: str, timeout: Optional[float] = None) -> WikiPage:
        """
        Look up an article and return a handle to it.

        Raises:
            NotFoundError: if no existing page has this exact title
        """
        data = self.request(
            {
                "prop": "info|pageprops",
                "inprop": "url",
                "ppprop": "disambiguation",
                "titles": title,
            },
            f"fetching page info for '{title}'",
            timeout=timeout,
        )

        pages = (data.get("query") or {}).get("pages") or {}
        for page_id, props in pages.items():
            if props.get("title") != title:
                continue
            if "missing" in props or "invalid" in props:
                break
            self.logger.debug(f"Resolved '{title}' to page id {page_id}")
            return WikiPage.from_api(props, self, pageid=page_id)

        raise NotFoundError(f"No article found: {title}")
