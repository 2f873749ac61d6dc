# ghsync/api/dependencies.py
"""Shared dependencies for API routes."""

from __future__ import annotations

import threading

from fastapi import Request

from ghsync.runtime import SyncRuntime


def get_runtime(request: Request) -> SyncRuntime:
    """The runtime the app was created with."""
    return request.app.state.runtime


def get_import_lock(request: Request) -> threading.Lock:
    """Lock serializing imports; deliveries are handled on a threadpool."""
    return request.app.state.import_lock
