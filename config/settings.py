"""
Global settings for the token registry sync
Values can be overridden from the environment or a .env file
"""
import os
from typing import Final

from dotenv import load_dotenv

load_dotenv()

# Logging level
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

# Request timeout in seconds (whole request, including body)
REQUEST_TIMEOUT: Final[float] = float(os.getenv("REQUEST_TIMEOUT", "60"))

# Root of the assets repository checkout (contains blockchains/)
ASSETS_REPO_ROOT: Final[str] = os.getenv("ASSETS_REPO_ROOT", os.getcwd())

# Binance chain endpoints
BINANCE_DEX_URL: Final[str] = os.getenv("BINANCE_DEX_URL", "https://dex-atlantic.binance.org")
BINANCE_URL_TOKEN_ASSETS: Final[str] = os.getenv(
    "BINANCE_URL_TOKEN_ASSETS",
    "https://explorer.binance.org/api/v1/assets?page=1&rows=1000",
)

# Page sizes for the paginated DEX endpoints
TOKEN_PAGE_SIZE: Final[int] = int(os.getenv("TOKEN_PAGE_SIZE", "1000"))
MARKET_PAGE_SIZE: Final[int] = int(os.getenv("MARKET_PAGE_SIZE", "10000"))
# Token page size when building the token list (BEP2 only, uncached)
TOKENLIST_TOKEN_PAGE_SIZE: Final[int] = int(os.getenv("TOKENLIST_TOKEN_PAGE_SIZE", "10000"))

# Parallel image downloads
IMAGE_FETCH_CONCURRENCY: Final[int] = int(os.getenv("IMAGE_FETCH_CONCURRENCY", "5"))

# Public API rate limit (requests per second, per host)
API_RATE_PER_SECOND: Final[float] = float(os.getenv("API_RATE_PER_SECOND", "5"))
API_RATE_BURST: Final[int] = int(os.getenv("API_RATE_BURST", "2"))

# Fixed so regenerating an unchanged list does not touch the file
TOKEN_LIST_TIMESTAMP: Final[str] = os.getenv("TOKEN_LIST_TIMESTAMP", "2020-10-03T12:37:57.000+00:00")
# Version (major, minor, patch) stamped on a freshly generated token list
TOKEN_LIST_VERSION: Final[tuple[int, int, int]] = (0, 1, 0)
