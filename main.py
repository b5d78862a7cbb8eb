import sys

from olx_crawler.scrape import main

if __name__ == "__main__":

    # e.g. python main.py "https://www.olx.ua/nedvizhimost/kvartiry-komnaty/prodazha-kvartir-komnat/kiev/"
    sys.exit(main())
