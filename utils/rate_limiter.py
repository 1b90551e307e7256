"""
Rate limiter for public API calls
"""
import asyncio
import time

from config.settings import API_RATE_PER_SECOND, API_RATE_BURST


class TokenBucketRateLimiter:
    """
    Token bucket rate limiter for controlling API request rates
    """

    def __init__(self, rate: float, burst: int = 1):
        """
        Args:
            rate: Requests per second
            burst: Maximum burst size
        """
        self.rate = rate
        self.burst = burst
        self.tokens = float(burst)
        self.last_update = time.monotonic()
        self._lock = asyncio.Lock()

    async def acquire(self):
        """Wait until a token is available"""
        wait_time = 0
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self.last_update
            if elapsed > 0:
                self.tokens = min(self.burst, self.tokens + elapsed * self.rate)
                self.last_update = now

            if self.tokens < 1:
                wait_time = (1 - self.tokens) / self.rate
                self.tokens = 0  # Reserve the token we're waiting for
            else:
                self.tokens -= 1

        if wait_time > 0:
            await asyncio.sleep(wait_time)


class MultiRateLimiter:
    """
    Manages one rate limiter per host
    """

    def __init__(self, rate: float = API_RATE_PER_SECOND, burst: int = API_RATE_BURST):
        self._limiters: dict[str, TokenBucketRateLimiter] = {}
        self._rate = rate
        self._burst = burst

    async def acquire(self, key: str):
        """Acquire a token for the given key"""
        # Single event loop: no await between lookup and insert
        if key not in self._limiters:
            self._limiters[key] = TokenBucketRateLimiter(self._rate, self._burst)

        await self._limiters[key].acquire()
