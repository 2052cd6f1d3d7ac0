#!/usr/bin/env python3
"""
Command line access to the Wikipedia query API.

Usage:
    wikiquery search "star wars" --all
    wikiquery --language en summary Batman
    wikiquery geo 48.8584 2.2945 --radius 500
    wikiquery info Paris
"""

import argparse
import json
import logging
import sys
from typing import Optional

from wikiquery.errors import WikiError
from wikiquery.logging_config import setup_logging
from wikiquery.wiki_api import WikiAPI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wikiquery", description="Query Wikipedia from the command line")
    parser.add_argument("--language", help="Language edition (fr or en)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-dir", help="Also write logs to this directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every request")

    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search article titles")
    search.add_argument("query")
    search.add_argument("--limit", type=int, default=50, help="Results per page")
    search.add_argument("--all", action="store_true", help="Follow every result page")

    random = sub.add_parser("random", help="Random article titles")
    random.add_argument("--limit", type=int, default=1)

    geo = sub.add_parser("geo", help="Articles near a coordinate")
    geo.add_argument("lat", type=float)
    geo.add_argument("lon", type=float)
    geo.add_argument("--radius", type=int, default=1000, help="Radius in meters")

    for name, help_text in (
        ("summary", "Lead section as plain text"),
        ("links", "Titles linked from an article"),
        ("info", "Infobox of an article as JSON"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("title")

    return parser


def run(args: argparse.Namespace, api: WikiAPI) -> list[str]:
    """Execute one command and return the lines to print."""
    if args.command == "search":
        if args.all:
            return api.search(args.query, args.limit, aggregated=True)
        return api.search(args.query, args.limit).results
    if args.command == "random":
        return api.random(args.limit)
    if args.command == "geo":
        return api.geo_search(args.lat, args.lon, args.radius)

    page = api.page(args.title)
    if args.command == "summary":
        return [page.summary()]
    if args.command == "links":
        return page.links()
    return [json.dumps(page.info(), indent=2, ensure_ascii=False)]


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    options = {}
    if args.language:
        options["language"] = args.language
    if args.timeout is not None:
        options["timeout"] = args.timeout

    logger = setup_logging(
        name="wikiquery",
        language=args.language,
        log_dir=args.log_dir,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        with WikiAPI(options) as api:
            lines = run(args, api)
    except WikiError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
