"""
Base classes for per-chain update actions
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from core.models import FetchReport

CheckResult = tuple[list[str], list[str]]  # (errors, warnings)


@dataclass
class CheckStep:
    """A named sanity check"""
    name: str
    check: Callable[[], Awaitable[CheckResult]]


class ActionInterface(ABC):
    """Abstract base class for chain actions"""

    # Image fetch outcome of the last update, if the chain fetches images
    last_report: Optional[FetchReport] = None

    @abstractmethod
    def get_name(self) -> str:
        pass

    def get_sanity_checks(self) -> list[CheckStep]:
        """Checks run before updating; none by default"""
        return []

    @abstractmethod
    async def update_auto(self):
        """
        Refresh everything that can be refreshed without review:
        images, token lists
        """
        pass

    async def close(self):
        """Release network resources"""
        pass
