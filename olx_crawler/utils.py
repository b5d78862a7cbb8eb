"""Utilities for modules"""

import logging
import re
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from olx_crawler.config.core import config


logger = logging.getLogger("olx_crawler")
logger.setLevel(logging.INFO)

# Create console handler with a higher log level
ch = logging.StreamHandler()
ch.setLevel(logging.DEBUG)

logger.addHandler(ch)


class FetchError(Exception):
    """A page could not be fetched: transport failure or non-success status."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch URL {url}: {reason}")
        self.url = url
        self.reason = reason


class ExtractionDefect(Exception):
    """A pattern that the page layout guarantees did not match."""


def get_headers() -> dict:
    """Headers sent with every request."""
    return {"User-Agent": config.user_agent}


def parse_raw_html(body: str) -> BeautifulSoup:
    """Parse html while keeping character references as they appear in the markup.

    Every ``&`` is escaped before parsing, so the parser decodes it back to
    the literal ``&`` and references such as ``&amp;`` or ``&#1069;`` survive.
    """
    return BeautifulSoup(body.replace("&", "&amp;"), "lxml")


def get_soup(session: requests.Session, link: str) -> BeautifulSoup:
    """Fetches the page content and returns a BeautifulSoup object."""
    logger.debug(f"Fetching {link}")
    try:
        response = session.get(
            link, headers=get_headers(), timeout=config.request_timeout
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(link, str(e)) from e

    return parse_raw_html(response.text)


def get_text_from_css(soup, selector: str) -> str:
    """Trimmed text of every element matching the selector, or an empty string."""
    return "".join(el.get_text() for el in soup.select(selector)).strip()


def get_attrs_from_css(soup, selector: str, attribute: str) -> List[str]:
    """Values of ``attribute`` on every matching element that has it.

    Elements without the attribute are left out rather than kept as a placeholder.
    """
    values = (el.get(attribute) for el in soup.select(selector))
    return [value for value in values if value is not None]


def get_attr_from_css(soup, selector: str, attribute: str) -> Optional[str]:
    """Attribute of the first element matching the selector."""
    el = soup.select_one(selector)
    if el is None:
        return None
    return el.get(attribute)


def normalize_href(href: str) -> str:
    """Drops everything after the first '.html' of an ad link.

    :example:
    >>> normalize_href("/ad/123.html?ref=search")
    '/ad/123.html'
    """
    return re.sub(r"\.html.*", ".html", href, count=1, flags=re.S)
