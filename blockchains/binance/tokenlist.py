"""
Binance chain token list: tokens joined with the markets they trade in
"""
from blockchains.binance.api import BinanceApi
from config.chains import CHAINS, ChainConfig, ChainId
from config.settings import MARKET_PAGE_SIZE, TOKENLIST_TOKEN_PAGE_SIZE
from core.asset import asset_id_symbol, logo_uri, token_type
from core.models import Market, Pair, Token, TokenListEntry
from utils.logger import get_logger
from utils.numbers import to_minimal_units

logger = get_logger(__name__)


def build_token_entries(
    markets: list[Market],
    tokens: list[Token],
    chain: ChainConfig,
) -> list[TokenListEntry]:
    """
    One entry per symbol seen in `markets`, in first-seen order (base before
    quote). Each entry lists the pairs where it is the quote asset.
    Symbols with no token record are skipped.
    """
    decimals = chain.native_decimals
    tokens_map = {token.symbol: token for token in tokens}
    pairs_map: dict[str, list[Pair]] = {}
    symbols: dict[str, None] = {}  # insertion-ordered set

    for market in markets:
        pair = Pair(
            asset=asset_id_symbol(market.base_asset_symbol, chain),
            lot_size=to_minimal_units(market.lot_size, decimals),
            tick_size=to_minimal_units(market.tick_size, decimals),
        )
        pairs_map.setdefault(market.quote_asset_symbol, []).append(pair)
        symbols[market.base_asset_symbol] = None
        symbols[market.quote_asset_symbol] = None

    entries = []
    for symbol in symbols:
        token = tokens_map.get(symbol)
        if token is None:
            logger.warning(f"[yellow]Market symbol {symbol} has no token record, skipped[/yellow]")
            continue
        entries.append(TokenListEntry(
            asset=asset_id_symbol(token.symbol, chain),
            type=token_type(token.symbol, chain),
            address=token.symbol,
            name=token.name,
            symbol=token.original_symbol,
            decimals=decimals,
            logo_uri=logo_uri(token.symbol, chain),
            pairs=pairs_map.get(token.symbol, []),
        ))
    return entries


async def generate_binance_tokens_list(
    api: BinanceApi,
    chain: ChainConfig = CHAINS[ChainId.BINANCE],
    market_limit: int = MARKET_PAGE_SIZE,
    token_limit: int = TOKENLIST_TOKEN_PAGE_SIZE,
) -> list[TokenListEntry]:
    markets = await api.fetch_markets(market_limit)
    tokens = await api.fetch_tokens(token_limit)
    logger.info(f"Building token list from {len(markets)} markets and {len(tokens)} tokens")
    return build_token_entries(markets, tokens, chain)
