# ghsync/api/models/__init__.py
from ghsync.api.models.schemas import ErrorDetail, HealthResponse, WebhookResponse

__all__ = ["ErrorDetail", "HealthResponse", "WebhookResponse"]
