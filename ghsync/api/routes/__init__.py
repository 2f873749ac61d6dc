# ghsync/api/routes/__init__.py
from ghsync.api.routes import health, webhook

__all__ = ["health", "webhook"]
