"""Bookmarket FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the bookmarket domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import time
import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookmarket.domain import bookmarket
from bookmarket.utils.logging import bind_request_context, clear_request_context, configure_logging

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - "test"       → in-memory everything, testing flag on
#   - "production" → sqlite database (run `python src/manage.py setup-db` first)
configure_logging()
bookmarket.init()

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Bookmarket API",
    description="Campus book marketplace: shops, students, orders and reviews",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the bookmarket domain context and tag log lines with a request id."""
    clear_request_context()
    bind_request_context(
        request_id=request.headers.get("X-Request-ID", uuid.uuid4().hex),
        method=request.method,
        path=request.url.path,
    )
    started = time.perf_counter()
    with bookmarket.domain_context():
        response = await call_next(request)
    logger.info(
        "request_completed",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from bookmarket.api import ROUTERS, register_exception_handlers  # noqa: E402

for router in ROUTERS:
    app.include_router(router)

register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": bookmarket.name})
