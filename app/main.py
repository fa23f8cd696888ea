# app/main.py
from __future__ import annotations
import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.log import get_logger
from app.middleware.rate_limit import RateLimitMiddleware
from app.routes import analyze, optimize, parse, resume

log = get_logger(__name__)

# observability
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, traces_sample_rate=0.1)

app = FastAPI(title=settings.api_title, version=settings.api_version)

# generator-backed routes are rate limited when redis is available
if settings.redis_url:
    app.add_middleware(RateLimitMiddleware)

# routers
app.include_router(resume.router, prefix="/api/resume", tags=["score"])
app.include_router(parse.router, prefix="/api/parse", tags=["parse"])
app.include_router(analyze.router, prefix="/api/analyze", tags=["analyze"])
app.include_router(optimize.router, prefix="/api/optimize", tags=["optimize"])


@app.exception_handler(Exception)
async def server_error(request: Request, exc: Exception):
    log.exception("unhandled error on %s", request.url.path)
    return JSONResponse({"detail": "Server error"}, status_code=500)


@app.get("/healthz")
def health():
    return {"ok": True, "model": settings.gemini_model}
