from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from www import config
from www.routers import pages, posts
from www.services.content_loader import get_catalog


logger = logging.getLogger(__name__)

app = FastAPI(title="www")

app.include_router(pages.router)
app.include_router(posts.router)

app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")


@app.on_event("startup")
def startup() -> None:
    get_catalog()


@app.middleware("http")
async def trace_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.debug(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("404", status_code=404)
    return await http_exception_handler(request, exc)


@app.api_route("/health", methods=["GET", "HEAD"])
async def healthcheck() -> dict[str, str]:
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
