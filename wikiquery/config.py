#!/usr/bin/env python3
"""
Client options for wikiquery.

Options are a plain mapping. Caller-supplied keys override the defaults and
the defaults only fill in what is missing. Keys the caller leaves out can also
come from the environment:

    WIKIQUERY_LANGUAGE    language edition ("fr" or "en")
    WIKIQUERY_TIMEOUT     request timeout in seconds
    WIKIQUERY_USER_AGENT  User-Agent header sent with every request

Usage:
    from wikiquery.config import resolve_options, api_url_for

    options = resolve_options({"language": "en"})
    api_url = api_url_for(options)
"""

import os
from typing import Any, Optional

from wikiquery.errors import ConfigError

DEFAULT_OPTIONS = {
    "api_url_fr": "https://fr.wikipedia.org/w/api.php",
    "api_url_en": "https://en.wikipedia.org/w/api.php",
    "language": "fr",
    "timeout": 30.0,
    "user_agent": "wikiquery/0.1.0 (MediaWiki query client)",
}

ENV_OVERRIDES = {
    "language": "WIKIQUERY_LANGUAGE",
    "timeout": "WIKIQUERY_TIMEOUT",
    "user_agent": "WIKIQUERY_USER_AGENT",
}


def _from_env() -> dict:
    values: dict[str, Any] = {}
    for key, var in ENV_OVERRIDES.items():
        value = os.environ.get(var)
        if value is None or value == "":
            continue
        values[key] = value
    return values


def resolve_options(
    options: Optional[dict] = None,
    defaults_win: bool = False,
) -> dict:
    """
    Merge caller options with environment overrides and defaults.

    Args:
        options: Caller options (never mutated)
        defaults_win: Legacy merge order where the defaults replace any
            caller value for the same key. Off by default.

    Returns:
        New dict with every default key present

    Raises:
        ConfigError: if the timeout is not a number
    """
    env = _from_env()
    if defaults_win:
        resolved = {**env, **(options or {}), **DEFAULT_OPTIONS}
    else:
        resolved = {**DEFAULT_OPTIONS, **env, **(options or {})}

    resolved["language"] = str(resolved["language"]).lower()
    try:
        resolved["timeout"] = float(resolved["timeout"])
    except (TypeError, ValueError):
        raise ConfigError(f"timeout must be a number, got {resolved['timeout']!r}") from None
    return resolved


def api_url_for(options: dict) -> str:
    """
    Pick the endpoint for the configured language edition.

    Raises:
        ConfigError: if no ``api_url_<language>`` option exists
    """
    language = options["language"]
    key = f"api_url_{language}"
    if key not in options:
        raise ConfigError(f"No API endpoint configured for language '{language}'")
    return options[key]
