"""
Chain registry: coin ids, native symbols and decimal precision
"""
from dataclasses import dataclass
from enum import Enum


class ChainId(Enum):
    """SLIP-44 coin types of supported chains"""
    BINANCE = 714


@dataclass(frozen=True)
class ChainConfig:
    """Configuration for a blockchain"""
    chain_id: ChainId
    name: str
    folder: str  # directory name under blockchains/
    native_token: str
    native_decimals: int
    token_type: str  # type of non-native tokens in the token list

    @property
    def coin(self) -> int:
        return self.chain_id.value


CHAINS: dict[ChainId, ChainConfig] = {
    ChainId.BINANCE: ChainConfig(
        chain_id=ChainId.BINANCE,
        name="Binance chain",
        folder="binance",
        native_token="BNB",
        native_decimals=8,
        token_type="BEP2",
    ),
}
