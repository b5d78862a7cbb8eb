"""Main olx crawler module"""

import argparse
import logging
import sys
from dataclasses import asdict
from pprint import pprint
from typing import List, Optional, Tuple

import pandas as pd
import requests
from bs4 import BeautifulSoup

from olx_crawler.config.core import config
from olx_crawler.extract import DetailExtractor
from olx_crawler.offer import ListingSummary, Offer
from olx_crawler.prompter import ConsolePrompter, Prompter
from olx_crawler.utils import (
    get_attr_from_css,
    get_soup,
    get_text_from_css,
    logger,
    normalize_href,
)


class OlxScraper(object):
    """
    Walks the result pages of an OLX search and collects the ads the operator opens.
    """

    def __init__(
        self,
        prompter: Prompter,
        session: Optional[requests.Session] = None,
        extractor: Optional[DetailExtractor] = None,
    ):
        """

        :param prompter: Asked before every next page and every ad.
        :param session: HTTP session shared by list and detail pages.
        :param extractor: Reads detail pages, built on the same session if omitted.
        """
        self.prompter = prompter
        self.session = session or requests.Session()
        self.extractor = extractor or DetailExtractor(self.session)
        self.selectors = config.css_selector

    def __repr__(self):
        return f"OlxScraper(prompter={self.prompter!r})"

    def extract_listings(
        self, soup: BeautifulSoup
    ) -> Tuple[List[ListingSummary], Optional[str]]:
        """Returns the ads of one result page and the link to the next page, if any."""
        summaries = []
        for row in soup.select(self.selectors.offers_table):
            summaries.append(
                ListingSummary(
                    title=get_text_from_css(row, self.selectors.details_link),
                    price=get_text_from_css(row, self.selectors.price),
                    href=get_attr_from_css(row, self.selectors.details_link, "href") or "",
                )
            )

        next_page = get_attr_from_css(soup, self.selectors.next_page, "href")
        return summaries, next_page

    def get_ads_from_pages(self, url: str) -> List[ListingSummary]:
        """Collects ads page by page while there is a next page and the operator agrees."""
        ads: List[ListingSummary] = []
        page = 1
        while True:
            summaries, next_page = self.extract_listings(get_soup(self.session, url))
            logger.info(f"Page {page}: found {len(summaries)}")
            ads += summaries

            if not next_page or not self.prompter.confirm("Next page?"):
                break
            url = next_page
            page += 1

        return ads

    def run(self, start_url: str) -> List[Offer]:
        """
        Runs the full crawl starting from a search result page.

        :param start_url: url of the first result page
        :return: the opened ads, in the order they were listed
        """
        offers: List[Offer] = []
        ads = self.get_ads_from_pages(start_url)
        total = len(ads)
        logger.info(f"Total ads found: {total}")

        for ad in ads:
            total -= 1
            if not self.prompter.confirm(f"Open this ad: {ad.title}?"):
                logger.info(f"left: {total} ads")
                continue

            if not ad.href:
                logger.warning(f"Ad {ad.title!r} has no link, skipping it")
                logger.info(f"left: {total} ads")
                continue

            href = normalize_href(ad.href)
            detail = self.extractor.extract_details(href)
            offers.append(Offer.merge(ad.price, href, detail))
            logger.info(f"left: {total} ads")

        logger.info(f"*** Done! {len(offers)} ads collected ***")
        return offers


def to_dataframe(offers: List[Offer]) -> pd.DataFrame:
    """One row per offer, with photos and props flattened to strings."""
    return pd.DataFrame(
        [
            {
                **{k: v for k, v in vars(offer).items() if k not in ("photos", "props")},
                "photos": offer.photos_string,
                "props": offer.props_string,
            }
            for offer in offers
        ],
        columns=[f for f in Offer.__dataclass_fields__],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive OLX real-estate crawler")
    parser.add_argument("url", type=str, help="Search result page to start from")
    parser.add_argument(
        "--automatic",
        action="store_true",
        help="Answer yes to every prompt",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the result as a table instead of records",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every fetched url",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    scraper = OlxScraper(ConsolePrompter(automatic=args.automatic or None))
    try:
        offers = scraper.run(args.url)
    except Exception as e:
        logger.error(f"Crawl failed: {e}", exc_info=True)
        return 1

    if args.table:
        print(to_dataframe(offers))
    else:
        pprint([asdict(offer) for offer in offers])
    return 0


if __name__ == "__main__":
    sys.exit(main())
