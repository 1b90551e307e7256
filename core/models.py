"""
Records exchanged between the fetchers, the aggregator and the writers
"""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class AssetInfo:
    """Explorer metadata for one asset"""
    symbol: str
    image_url: Optional[str] = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "AssetInfo":
        return cls(symbol=raw["asset"], image_url=raw.get("assetImg") or None)


@dataclass(frozen=True)
class Token:
    """Token as listed by the DEX API"""
    symbol: str           # on-chain symbol, e.g. "BUSD-BD1"
    name: str
    original_symbol: str  # e.g. "BUSD"

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Token":
        return cls(
            symbol=raw["symbol"],
            name=raw.get("name", ""),
            original_symbol=raw.get("original_symbol", ""),
        )


@dataclass(frozen=True)
class Market:
    """Trading market; sizes stay decimal strings"""
    base_asset_symbol: str
    quote_asset_symbol: str
    lot_size: str
    tick_size: str

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Market":
        return cls(
            base_asset_symbol=raw["base_asset_symbol"],
            quote_asset_symbol=raw["quote_asset_symbol"],
            lot_size=raw["lot_size"],
            tick_size=raw["tick_size"],
        )


@dataclass(frozen=True)
class Pair:
    """Trading pair seen from the quote asset"""
    asset: str      # asset id of the counter (base) asset
    lot_size: int   # minimal units
    tick_size: int  # minimal units

    def to_dict(self) -> dict[str, Any]:
        return {
            "asset": self.asset,
            "lotSize": str(self.lot_size),
            "tickSize": str(self.tick_size),
        }


@dataclass
class TokenListEntry:
    """One token of the token list document"""
    asset: str
    type: str
    address: str
    name: str
    symbol: str
    decimals: int
    logo_uri: str
    pairs: list[Pair] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "asset": self.asset,
            "type": self.type,
            "address": self.address,
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "logoURI": self.logo_uri,
            "pairs": [pair.to_dict() for pair in self.pairs],
        }


@dataclass(frozen=True)
class ImageFetch:
    """A logo missing locally and fetchable from the explorer"""
    symbol: str
    image_url: str


@dataclass
class FetchReport:
    """Outcome of an image fetch batch"""
    fetched: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)  # (symbol, error)
