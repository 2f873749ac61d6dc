# ghsync/export/__init__.py
from ghsync.export.base import LogNotifier, Notifier
from ghsync.export.webhook import WebhookNotifier

__all__ = ["Notifier", "LogNotifier", "WebhookNotifier"]
