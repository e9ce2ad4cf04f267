import logging
import os
import re

import pandas as pd
import requests

logger = logging.getLogger(__name__)

REGISTRAR_SEARCH_URL = "https://www.godaddy.com/domainsearch/find"

MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()<>#+\-.!|~$])")


def registrar_url(name, extension):
    """GoDaddy search page URL for ``name + extension``."""
    request = requests.Request("GET", REGISTRAR_SEARCH_URL, params={"domainToCheck": f"{name}{extension}"})
    return request.prepare().url


def escape_markdown(text):
    """Backslash-escape Markdown so model output renders literally."""
    return MARKDOWN_SPECIAL.sub(r"\\\1", text)


def log_level(default=logging.INFO):
    name = os.getenv("LOG_LEVEL", "")
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown LOG_LEVEL {name!r}, using {logging.getLevelName(default)}")
        return default
    return level


def suggestions_frame(suggestions):
    rows = []
    for suggestion in suggestions:
        for ext in suggestion.extensions:
            rows.append({
                "name": suggestion.name,
                "domain": f"{suggestion.name}{ext}",
                "extension": ext,
                "url": registrar_url(suggestion.name, ext)
            })
    return pd.DataFrame(rows, columns=["name", "domain", "extension", "url"])
