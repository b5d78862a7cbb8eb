"""Access the directory in python"""

from olx_crawler.scrape import OlxScraper
from olx_crawler.extract import DetailExtractor
from olx_crawler.prompter import ConsolePrompter, Prompter

__all__ = ["OlxScraper", "DetailExtractor", "ConsolePrompter", "Prompter"]
