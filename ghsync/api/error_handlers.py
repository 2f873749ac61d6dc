# ghsync/api/error_handlers.py
"""
Mapping of SyncError onto webhook responses.

Benign errors (the commit was already imported) are reported as success so
the sender does not retry; everything else is a 500 listing every cause.
"""

from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

from ghsync.api.models.schemas import ErrorDetail, WebhookResponse
from ghsync.core.errors import SyncError
from ghsync.logging import tags
from ghsync.logging.logger import get_logger

logger = get_logger(__name__)


def sync_error_response(error: SyncError) -> JSONResponse:
    details = [ErrorDetail(code=code, message=message) for code, message in error.errors]

    if error.benign:
        body = WebhookResponse(status="synced", message=error.message, errors=details)
        return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())

    logger.error(f"{tags.WEBHOOK} Import failed: {error}")
    body = WebhookResponse(status="failed", message=error.message, errors=details)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump())


__all__ = ["sync_error_response"]
