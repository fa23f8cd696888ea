import time, ipaddress
from functools import lru_cache
from typing import Optional

import redis
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.responses import JSONResponse
from app.core.config import settings
from app.core.log import get_logger

log = get_logger(__name__)

# paths that always reach the generator; /api/resume only does for
# action=optimize, so that route checks the quota itself
GUARDED_PATHS = ("/api/analyze", "/api/optimize")
LIMIT_DETAIL = "Slow down. Try again tomorrow."


def client_ip(scope_client) -> str:
    ip = scope_client[0] if scope_client else "0.0.0.0"
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        ip = "0.0.0.0"
    return ip


class DailyQuota:
    """Per-IP counter that resets daily. Fails open when redis is unreachable."""

    def __init__(self, client: "redis.Redis | None" = None, daily_limit: int | None = None):
        self.r = client or redis.from_url(settings.redis_url, decode_responses=True)
        self.limit = daily_limit if daily_limit is not None else settings.anon_daily_limit
        self.window = 86400  # 1 day

    def allow(self, ip: str) -> bool:
        day = time.strftime("%Y%m%d")
        key_ip = f"rl:ip:{ip}:{day}"
        try:
            cnt = self.r.incr(key_ip)
            if cnt == 1:
                self.r.expire(key_ip, self.window)
        except redis.RedisError as exc:
            log.warning("rate limiter unavailable: %s", exc)
            return True

        if cnt > self.limit:
            log.info("rate limit hit for %s (%d)", ip, cnt)
            return False
        return True


@lru_cache(maxsize=1)
def get_quota() -> Optional[DailyQuota]:
    """Route dependency; None when no redis is configured."""
    if not settings.redis_url:
        return None
    return DailyQuota()


class RateLimitMiddleware:
    def __init__(self, app: ASGIApp, client: "redis.Redis | None" = None, daily_limit: int | None = None):
        self.app = app
        self.quota = DailyQuota(client, daily_limit)

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        if scope.get("path", "") not in GUARDED_PATHS:
            return await self.app(scope, receive, send)

        if not self.quota.allow(client_ip(scope.get("client"))):
            return await JSONResponse({"detail": LIMIT_DETAIL}, status_code=429)(scope, receive, send)

        return await self.app(scope, receive, send)
