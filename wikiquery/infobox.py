#!/usr/bin/env python3
"""Infobox extraction from a page's lead-section wikitext."""

import wikitextparser as wtp


def _plain_value(value: str) -> str:
    """Reduce wiki links to their display text and drop HTML comments."""
    parsed = wtp.parse(value)
    for comment in reversed(parsed.comments):
        comment.string = ""
    for link in reversed(parsed.wikilinks):
        link.string = link.text if link.text is not None else link.title
    return parsed.string.strip()


def parse_infobox(wikitext: str) -> dict[str, str]:
    """Return the first infobox of ``wikitext`` as a key/value mapping.

    Only the top-level arguments of the first template named ``Infobox ...``
    are read. Nested templates inside values are not expanded.
    Returns an empty dict when the text has no infobox.
    """
    parsed = wtp.parse(wikitext or "")

    for template in parsed.templates:
        name = template.name.strip().lower()
        if not name.startswith("infobox"):
            continue
        infobox: dict[str, str] = {}
        for arg in template.arguments:
            key = arg.name.strip()
            if key:
                infobox[key] = _plain_value(arg.value)
        return infobox

    return {}
