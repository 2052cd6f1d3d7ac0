#!/usr/bin/env python3
"""Handle to one resolved Wikipedia article."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from wikiquery.errors import NotFoundError
from wikiquery.extract import page_entry, pluck, query_list
from wikiquery.infobox import parse_infobox

if TYPE_CHECKING:
    from wikiquery.wiki_api import WikiAPI

# Fields of the page-info entry stored as named attributes
KNOWN_FIELDS = ("pageid", "title", "ns", "fullurl", "pageprops")


@dataclass(frozen=True)
class WikiPage:
    """
    An article identified by page id and title.

    Every content method issues a fresh query; nothing is cached.
    Fields of the page-info response without a named attribute are kept
    in ``extra``.
    """

    pageid: int
    title: str
    api: "WikiAPI" = field(repr=False, compare=False)
    ns: Optional[int] = None
    fullurl: Optional[str] = None
    disambiguation: bool = False
    extra: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, props: dict, api: "WikiAPI", pageid: Any = None) -> "WikiPage":
        """Build a page from one entry of ``query.pages``."""
        pageprops = props.get("pageprops") or {}
        return cls(
            pageid=int(props.get("pageid", pageid)),
            title=props["title"],
            api=api,
            ns=props.get("ns"),
            fullurl=props.get("fullurl"),
            disambiguation="disambiguation" in pageprops,
            extra={k: v for k, v in props.items() if k not in KNOWN_FIELDS},
        )

    def _query(self, params: dict, description: str, timeout: Optional[float]) -> dict:
        data = self.api.request(
            {**params, "titles": self.title},
            f"{description} of '{self.title}'",
            timeout=timeout,
        )
        return page_entry(data, self.pageid)

    def _revision_text(self, entry: dict) -> str:
        try:
            return entry["revisions"][0]["*"]
        except (KeyError, IndexError, TypeError):
            raise NotFoundError(f"No revisions for '{self.title}'") from None

    def _extract(self, entry: dict) -> str:
        if "extract" not in entry:
            raise NotFoundError(f"No extract for '{self.title}'")
        return entry["extract"]

    def _paged(self, params: dict, extract, description: str, aggregated: bool, timeout):
        pagination = self.api.paginate(
            params, extract, f"{description} of '{self.title}'", timeout=timeout
        )
        if aggregated:
            return self.api.aggregate(pagination)
        return pagination

    def _page_list(self, prop: str):
        # MediaWiki omits an empty list property, so a missing key means no entries
        def extract(data: dict) -> list:
            return pluck(page_entry(data, self.pageid).get(prop, []), "title")
        return extract

    def html(self, timeout: Optional[float] = None) -> str:
        """Rendered HTML of the latest revision."""
        entry = self._query(
            {
                "prop": "revisions",
                "rvprop": "content",
                "rvlimit": 1,
                "rvparse": "",
            },
            "fetching html",
            timeout,
        )
        return self._revision_text(entry)

    def content(self, timeout: Optional[float] = None) -> str:
        """Plain text of the whole article."""
        entry = self._query(
            {"prop": "extracts", "explaintext": ""},
            "fetching content",
            timeout,
        )
        return self._extract(entry)

    def summary(self, timeout: Optional[float] = None) -> str:
        """Plain text of the lead section."""
        entry = self._query(
            {"prop": "extracts", "explaintext": "", "exintro": ""},
            "fetching summary",
            timeout,
        )
        return self._extract(entry)

    def images(self, timeout: Optional[float] = None) -> list[str]:
        """URLs of every image used on the page."""
        data = self.api.request(
            {
                "generator": "images",
                "gimlimit": "max",
                "prop": "imageinfo",
                "iiprop": "url",
                "titles": self.title,
            },
            f"fetching images of '{self.title}'",
            timeout=timeout,
        )
        if "query" not in data:
            return []

        urls = []
        for image in (data["query"].get("pages") or {}).values():
            urls.extend(pluck(image.get("imageinfo", []), "url"))
        return urls

    def references(self, timeout: Optional[float] = None) -> list[str]:
        """External link URLs."""
        entry = self._query(
            {"prop": "extlinks", "ellimit": "max"},
            "fetching references",
            timeout,
        )
        # Absent when the page has no external links
        return pluck(entry.get("extlinks", []), "*")

    def links(self, aggregated: bool = True, limit: int = 100, timeout: Optional[float] = None):
        """
        Titles of main-namespace articles linked from the page.

        Args:
            aggregated: Return every link instead of the first page
            limit: Links per page
            timeout: Seconds before giving up on each request

        Returns:
            List of titles, or a PaginationResult if not aggregated
        """
        return self._paged(
            {
                "prop": "links",
                "plnamespace": 0,
                "pllimit": limit,
                "titles": self.title,
            },
            self._page_list("links"),
            "fetching links",
            aggregated,
            timeout,
        )

    def categories(self, aggregated: bool = True, limit: int = 100, timeout: Optional[float] = None):
        """Category titles of the page, paginated like links()."""
        return self._paged(
            {
                "prop": "categories",
                "cllimit": limit,
                "titles": self.title,
            },
            self._page_list("categories"),
            "fetching categories",
            aggregated,
            timeout,
        )

    def backlinks(self, aggregated: bool = True, limit: int = 100, timeout: Optional[float] = None):
        """Titles of pages linking here, paginated like links()."""
        return self._paged(
            {
                "list": "backlinks",
                "bllimit": limit,
                "bltitle": self.title,
            },
            lambda data: pluck(query_list(data, "backlinks"), "title"),
            "fetching backlinks",
            aggregated,
            timeout,
        )

    def coordinates(self, timeout: Optional[float] = None) -> dict:
        """
        Primary coordinates of the page (lat, lon, primary, globe).

        Raises:
            NotFoundError: if the page has no coordinates
        """
        entry = self._query({"prop": "coordinates"}, "fetching coordinates", timeout)
        coordinates = entry.get("coordinates") or []
        if not coordinates:
            raise NotFoundError(f"No coordinates for '{self.title}'")
        return coordinates[0]

    def info(self, timeout: Optional[float] = None) -> dict[str, str]:
        """Infobox key/value pairs from the lead section."""
        entry = self._query(
            {
                "prop": "revisions",
                "rvprop": "content",
                "rvsection": 0,
            },
            "fetching infobox",
            timeout,
        )
        return parse_infobox(self._revision_text(entry))
