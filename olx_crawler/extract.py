import re
from datetime import date
from typing import List, Optional, Tuple

import requests
from bs4 import BeautifulSoup
from dateutil.parser import parserinfo

from olx_crawler.config.core import config
from olx_crawler.offer import ListingDetail
from olx_crawler.utils import (
    ExtractionDefect,
    get_attrs_from_css,
    get_soup,
    get_text_from_css,
    logger,
)

DATE_PATTERN = re.compile(r"(\d+) (.+?) (\d{4})")
ID_PATTERN = re.compile(r"\d{6,}")


class RussianParserInfo(parserinfo):
    """Month names as the site prints them, e.g. '5 марта 2019'."""

    MONTHS = [
        ("янв", "январь", "января"),
        ("фев", "февраль", "февраля"),
        ("мар", "март", "марта"),
        ("апр", "апрель", "апреля"),
        ("май", "мая"),
        ("июн", "июнь", "июня"),
        ("июл", "июль", "июля"),
        ("авг", "август", "августа"),
        ("сен", "сент", "сентябрь", "сентября"),
        ("окт", "октябрь", "октября"),
        ("ноя", "ноябрь", "ноября"),
        ("дек", "декабрь", "декабря"),
    ]


RUSSIAN = RussianParserInfo(dayfirst=True)


def parse_russian_date(text: str) -> Optional[date]:
    """Find a 'day month year' date in the text and parse it with Russian month names.

    Returns None when the match is not a valid date.
    Raises ExtractionDefect when the text holds no such date at all.

    :example:
    >>> parse_russian_date("в 12:34, 5 марта 2019")
    datetime.date(2019, 3, 5)
    """
    match = DATE_PATTERN.search(text)
    if match is None:
        raise ExtractionDefect(f"No date found in {text!r}")

    day, month_name, year = match.groups()
    # Strictly day, month name, year: nothing is guessed or filled in
    month = RUSSIAN.month(month_name)
    if month is None:
        return None

    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


class DetailExtractor(object):
    """Reads the fields of one ad from its detail page."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.selectors = config.css_selector
        self.labels = {label: key for key, label in config.property_labels.items()}
        self.session = session or requests.Session()

    def extract_details(self, url: str) -> ListingDetail:
        soup = get_soup(self.session, url)
        return self.extract_from_soup(soup)

    def extract_from_soup(self, soup: BeautifulSoup) -> ListingDetail:
        # Selector misses degrade to empty values
        fields = {
            "id": self.get_id(soup),
            "date": self.get_date(soup),
            "title": get_text_from_css(soup, self.selectors.title),
            "district": self.get_district(soup),
            "description": get_text_from_css(soup, self.selectors.description),
            "seller": get_text_from_css(soup, self.selectors.seller),
            "photos": tuple(get_attrs_from_css(soup, self.selectors.photos, "src")),
        }

        props = self.get_props(soup)
        for label, value in props:
            key = self.labels.get(label)
            if key is not None:
                fields[key] = value
        fields["props"] = tuple(props)

        return ListingDetail(**fields)

    def get_district(self, soup: BeautifulSoup) -> str:
        position = get_text_from_css(soup, self.selectors.position).split(",")
        if len(position) > 2 and position[2]:
            return position[2].strip()
        return ""

    def get_date(self, soup: BeautifulSoup) -> Optional[date]:
        text = get_text_from_css(soup, self.selectors.date)
        try:
            return parse_russian_date(text)
        except ExtractionDefect as e:
            logger.warning(f"{e}; leaving the date empty")
            return None

    def get_id(self, soup: BeautifulSoup) -> str:
        match = ID_PATTERN.search(get_text_from_css(soup, self.selectors.offer_id))
        return match.group(0) if match else ""

    def get_props(self, soup: BeautifulSoup) -> List[Tuple[str, str]]:
        """One (label, value) pair per row of the property table."""
        return [
            (get_text_from_css(row, "th"), get_text_from_css(row, "td"))
            for row in soup.select(self.selectors.props)
        ]
