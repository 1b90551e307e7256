"""
Shared aiohttp session with JSON and streaming helpers
"""
import asyncio
import os
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import aiohttp

from config.settings import REQUEST_TIMEOUT
from core.errors import ApiError
from utils.logger import get_logger
from utils.rate_limiter import MultiRateLimiter

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024


class HttpClient:
    """
    Thin wrapper around one aiohttp session per run.
    Requests are rate limited per host; errors are not retried.
    """

    def __init__(self, timeout: float = REQUEST_TIMEOUT, rate_limiter: MultiRateLimiter | None = None):
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self.rate_limiter = rate_limiter or MultiRateLimiter()

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL and decode its JSON body"""
        await self.rate_limiter.acquire(urlsplit(url).netloc)
        session = await self._get_session()
        async with session.get(url, params=params) as response:
            if response.status >= 400:
                raise ApiError(url, response.reason or "request failed", status=response.status)
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise ApiError(url, f"invalid JSON: {e}", status=response.status) from e

    async def download(self, url: str, path: Path):
        """Stream a URL to a local file, removing the partial file on failure"""
        await self.rate_limiter.acquire(urlsplit(url).netloc)
        session = await self._get_session()
        try:
            async with session.get(url) as response:
                if response.status >= 400:
                    raise ApiError(url, response.reason or "request failed", status=response.status)
                with open(path, "wb") as f:
                    async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                        # Disk writes run off the event loop
                        await asyncio.to_thread(f.write, chunk)
        except BaseException:
            if os.path.exists(path):
                os.remove(path)
            raise

    async def close(self):
        """Close the underlying session"""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
