# ghsync/api/__init__.py
"""HTTP surface: the push webhook receiver."""

from ghsync.api.app import create_app

__all__ = ["create_app"]
