# ghsync/api/routes/webhook.py
"""
Push webhook endpoint.

Deliveries other than pushes to the configured branch are acknowledged
with 202 and a reason. Pushes are imported through the PayloadImporter.
"""

from __future__ import annotations

import hashlib
import hmac
import threading
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ghsync.api.dependencies import get_import_lock, get_runtime
from ghsync.api.error_handlers import sync_error_response
from ghsync.api.models.schemas import WebhookResponse
from ghsync.core.errors import SyncError
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.payload import Payload
from ghsync.runtime import SyncRuntime

logger = get_logger(__name__)

router = APIRouter(tags=["webhook"])

SIGNATURE_PREFIX = "sha256="


def sign(secret: str, body: bytes) -> str:
    """X-Hub-Signature-256 value for a body."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(secret: str, body: bytes, signature: Optional[str]) -> bool:
    if not signature:
        return False
    return hmac.compare_digest(sign(secret, body), signature)


def _ignored(reason: str) -> JSONResponse:
    logger.info(f"{tags.WEBHOOK} Ignored delivery: {reason}")
    body = WebhookResponse(status="ignored", message=reason)
    return JSONResponse(status_code=status.HTTP_202_ACCEPTED, content=body.model_dump())


@router.post("/webhook", response_model=WebhookResponse)
async def webhook(
    request: Request,
    x_github_event: str = Header("push"),
    x_hub_signature_256: Optional[str] = Header(None),
    runtime: SyncRuntime = Depends(get_runtime),
    lock: threading.Lock = Depends(get_import_lock),
):
    """Receive a push delivery and import it."""
    body = await request.body()

    secret = runtime.config.webhook_secret
    if secret and not verify_signature(secret, body, x_hub_signature_256):
        logger.warning(f"{tags.WEBHOOK} Rejected delivery with a bad signature")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid signature")

    if x_github_event == "ping":
        return WebhookResponse(status="pong", message="pong")

    if x_github_event != "push":
        return _ignored(f"Event {x_github_event!r} is not handled")

    try:
        payload = Payload.model_validate_json(body)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid payload: {e}")

    branch = runtime.config.branch
    if not payload.is_for_branch(branch):
        return _ignored(f"Push to {payload.branch or '<unknown>'} is not for {branch}")

    if payload.is_deletion():
        return _ignored(f"Branch {branch} was deleted")

    def run() -> str:
        with lock:
            return runtime.importer.import_payload(payload)

    try:
        message = await run_in_threadpool(run)
    except SyncError as e:
        return sync_error_response(e)

    logger.info(f"{tags.WEBHOOK} {message} for {payload.get_commit_id()[:7]}")
    return WebhookResponse(status="processed", message=message)
