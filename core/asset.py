"""
Asset identifiers, token types and logo URLs as used in token lists
"""
from config.chains import ChainConfig

ASSETS_CDN = "https://assets-cdn.trustwallet.com/blockchains"
COIN_TYPE = "coin"


def asset_id(coin: int, token_id: str = "") -> str:
    """c<coin> for a native coin, c<coin>_t<token> for a token"""
    if not token_id:
        return f"c{coin}"
    return f"c{coin}_t{token_id}"


def asset_id_symbol(symbol: str, chain: ChainConfig) -> str:
    if symbol == chain.native_token:
        return asset_id(chain.coin)
    return asset_id(chain.coin, symbol)


def token_type(symbol: str, chain: ChainConfig) -> str:
    if symbol == chain.native_token:
        return COIN_TYPE
    return chain.token_type


def logo_uri(symbol: str, chain: ChainConfig) -> str:
    if symbol == chain.native_token:
        return f"{ASSETS_CDN}/{chain.folder}/info/logo.png"
    return f"{ASSETS_CDN}/{chain.folder}/assets/{symbol}/logo.png"
