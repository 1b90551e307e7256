"""
Binance chain public API: explorer asset infos, DEX tokens and markets
"""
from typing import Any, Callable, Protocol, TypeVar

from config.settings import (
    BINANCE_DEX_URL,
    BINANCE_URL_TOKEN_ASSETS,
    MARKET_PAGE_SIZE,
    TOKEN_PAGE_SIZE,
)
from core.errors import ApiError
from core.models import AssetInfo, Market, Token
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class JsonClient(Protocol):
    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any: ...


class TokenCache:
    """
    Merged token list kept for one run, the DEX API being rate limited.
    Empty means not fetched yet.
    """

    def __init__(self):
        self.tokens: list[Token] = []

    def __bool__(self) -> bool:
        return bool(self.tokens)


class BinanceApi:
    """Binance explorer and DEX endpoints"""

    def __init__(
        self,
        http: JsonClient,
        dex_url: str = BINANCE_DEX_URL,
        asset_infos_url: str = BINANCE_URL_TOKEN_ASSETS,
        token_page_size: int = TOKEN_PAGE_SIZE,
        cache: TokenCache | None = None,
    ):
        self.http = http
        self.dex_url = dex_url.rstrip("/")
        self.asset_infos_url = asset_infos_url
        self.token_page_size = token_page_size
        self.cache = cache if cache is not None else TokenCache()

    async def _get_list(self, url: str, params: dict[str, Any] | None = None) -> list[Any]:
        data = await self.http.get_json(url, params=params)
        if not isinstance(data, list):
            raise ApiError(url, f"expected a JSON array, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse(url: str, records: list[Any], parse: Callable[[dict[str, Any]], T]) -> list[T]:
        try:
            return [parse(record) for record in records]
        except (KeyError, TypeError, AttributeError) as e:
            raise ApiError(url, f"malformed record: {e!r}") from e

    async def fetch_asset_infos(self) -> list[AssetInfo]:
        logger.info(f"Retrieving token asset infos from: {self.asset_infos_url}")
        data = await self.http.get_json(self.asset_infos_url)
        try:
            records = data["assetInfoList"]
        except (KeyError, TypeError) as e:
            raise ApiError(self.asset_infos_url, "missing assetInfoList") from e
        infos = self._parse(self.asset_infos_url, records, AssetInfo.from_api)
        logger.info(f"Retrieved {len(infos)} token asset infos")
        return infos

    async def fetch_tokens(self, limit: int = TOKEN_PAGE_SIZE) -> list[Token]:
        """BEP2 tokens, uncached"""
        url = f"{self.dex_url}/v1/tokens"
        return self._parse(url, await self._get_list(url, params={"limit": limit}), Token.from_api)

    async def fetch_mini_tokens(self, limit: int = TOKEN_PAGE_SIZE) -> list[Token]:
        """BEP8 mini tokens, uncached"""
        url = f"{self.dex_url}/v1/mini/tokens"
        return self._parse(url, await self._get_list(url, params={"limit": limit}), Token.from_api)

    async def fetch_markets(self, limit: int = MARKET_PAGE_SIZE) -> list[Market]:
        url = f"{self.dex_url}/v1/markets"
        return self._parse(url, await self._get_list(url, params={"limit": limit}), Market.from_api)

    async def retrieve_assets(self) -> list[Token]:
        """All BEP2 and BEP8 tokens, fetched once per cache"""
        if not self.cache:
            logger.info("Retrieving token infos")
            bep2 = await self.fetch_tokens(self.token_page_size)
            bep8 = await self.fetch_mini_tokens(self.token_page_size)
            self.cache.tokens = bep2 + bep8
        logger.info(f"Using {len(self.cache.tokens)} assets")
        return self.cache.tokens

    async def retrieve_asset_symbols(self) -> list[str]:
        assets = await self.retrieve_assets()
        return [token.symbol for token in assets]
