# ghsync/api/app.py
"""
FastAPI application factory.

Usage:
    with SyncRuntime.from_config(load_sync_config()) as runtime:
        uvicorn.run(create_app(runtime))
"""

from __future__ import annotations

import threading

from fastapi import FastAPI

from ghsync import __version__
from ghsync.api.routes import health, webhook
from ghsync.runtime import SyncRuntime


def create_app(runtime: SyncRuntime) -> FastAPI:
    """Build the webhook receiver around an existing runtime."""
    app = FastAPI(title="ghsync", version=__version__)
    app.state.runtime = runtime
    app.state.import_lock = threading.Lock()

    app.include_router(health.router)
    app.include_router(webhook.router)
    return app


__all__ = ["create_app"]
