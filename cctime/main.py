"""cctime FastAPI app.

Serve it with any ASGI server, e.g. ``uvicorn cctime.main:app``.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from cctime import __version__, config
from cctime.discovery import get_claude_paths
from cctime.routers.conversations import conversations_router

logging.basicConfig(level=logging.DEBUG if config.DEBUG else logging.INFO)
logger = logging.getLogger("cctime")

app = FastAPI(
    title="cctime API",
    description="Daily Claude Code conversation time summaries",
    version=__version__,
)

app.include_router(conversations_router)


@app.get("/api/health")
def health():
    """Health check endpoint."""
    paths = get_claude_paths()
    return {
        "status": "ok",
        "claudePaths": [str(p) for p in paths],
        "timezone": config.TIMEZONE or "local",
    }
