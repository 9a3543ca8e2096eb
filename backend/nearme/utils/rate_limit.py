import time
from collections import defaultdict, deque


class SimpleRateLimiter:
    """Sliding-window counter keyed by client (IP address for the admin API)."""

    def __init__(self, max_requests: int, window_seconds: int):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._hits: dict[str, deque[float]] = defaultdict(deque)

    def _prune(self, key: str, now: float) -> deque[float]:
        bucket = self._hits[key]
        while bucket and now - bucket[0] > self.window_seconds:
            bucket.popleft()
        return bucket

    def hit(self, key: str) -> bool:
        now = time.monotonic()
        bucket = self._prune(key, now)
        if len(bucket) >= self.max_requests:
            return False
        bucket.append(now)
        return True

    def remaining(self, key: str) -> int:
        bucket = self._prune(key, time.monotonic())
        return max(self.max_requests - len(bucket), 0)

    def reset(self, key: str) -> None:
        self._hits.pop(key, None)
