"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
ASSETS_DIR = ROOT_DIR / "assets"

ITEMS_FILE = Path(os.getenv("PAGE_NAVIGATOR_ITEMS_FILE", str(DATA_DIR / "items.csv")))

# Upper bound on page links in a window, first and last page included.
# Odd values give the current page an equal number of neighbours on each side.
DEFAULT_MAX_DISPLAY_PAGES = 13
MIN_DISPLAY_PAGES = 3
# A chapter jump never moves fewer pages than this.
MIN_CHAPTER_JUMP = 3

DEFAULT_PAGE_SIZE = 25
PAGE_SIZE_OPTIONS = [10, 25, 50, 100]

PAGE_QUERY_PARAM = "page"
PAGE_URL_TEMPLATE = "?" + PAGE_QUERY_PARAM + "={page}"

PREVIOUS_LABEL = "‹"
NEXT_LABEL = "›"
PREVIOUS_CHAPTER_LABEL = "«"
NEXT_CHAPTER_LABEL = "»"
GAP_LABEL = "…"
