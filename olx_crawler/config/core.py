"""Configuration used for crawling"""

from pathlib import Path

import yaml
from diot import Diot
from yaml.loader import SafeLoader

import olx_crawler

PACKAGE_ROOT = Path(olx_crawler.__file__).resolve().parent
CONFIG_PATH = PACKAGE_ROOT / "config/config.yaml"

with open(CONFIG_PATH, encoding="utf-8") as f:
    data = yaml.load(f, Loader=SafeLoader)

config = Diot(data)
