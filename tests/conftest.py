from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

DEX_URL = "https://dex.test"
ASSET_INFOS_URL = "https://explorer.test/api/v1/assets"


class FakeHttp:
    """Scripted stand-in for HttpClient"""

    def __init__(
        self,
        json_responses: dict[str, Any] | None = None,
        images: dict[str, bytes] | None = None,
    ):
        self.json_responses = dict(json_responses or {})
        self.images = dict(images or {})
        self.json_calls: list[tuple[str, dict | None]] = []
        self.downloads: list[str] = []
        self.closed = False

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        self.json_calls.append((url, params))
        response = self.json_responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    async def download(self, url: str, path: Path):
        self.downloads.append(url)
        content = self.images.get(url)
        if content is None:
            raise ConnectionError("404 Not Found")
        path.write_bytes(content)

    async def close(self):
        self.closed = True


def binance_responses(
    *,
    asset_infos: list[dict] | None = None,
    tokens: list[dict] | None = None,
    mini_tokens: list[dict] | None = None,
    markets: list[dict] | None = None,
) -> dict[str, Any]:
    return {
        ASSET_INFOS_URL: {"assetInfoList": asset_infos or []},
        f"{DEX_URL}/v1/tokens": tokens or [],
        f"{DEX_URL}/v1/mini/tokens": mini_tokens or [],
        f"{DEX_URL}/v1/markets": markets or [],
    }


def make_logo(root: Path, chain: str, symbol: str) -> Path:
    path = root / "blockchains" / chain / "assets" / symbol / "logo.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"png")
    return path


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    (tmp_path / "blockchains" / "binance" / "assets").mkdir(parents=True)
    return tmp_path
