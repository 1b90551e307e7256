"""
Available chain actions, keyed by chain folder
"""
from typing import Callable

from blockchains.base import ActionInterface
from blockchains.binance.action import BinanceAction

ACTIONS: dict[str, Callable[[], ActionInterface]] = {
    "binance": BinanceAction,
}


def create_action(chain: str) -> ActionInterface:
    try:
        factory = ACTIONS[chain]
    except KeyError:
        raise KeyError(f"No action for chain {chain}; known: {', '.join(sorted(ACTIONS))}") from None
    return factory()
