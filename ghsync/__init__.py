# ghsync/__init__.py
"""
ghsync - import repository content into a local content store.

Architecture:
    ghsync/
    ├── core/       # Errors, hooks, config loading, paths, HTTP
    ├── models/     # Blob, Commit, Post, Payload
    ├── importer/   # Classifier, change detector, processors, importers
    ├── remote/     # GitHub commit fetcher
    ├── store/      # SQLite content store
    ├── export/     # New-post notifiers
    ├── api/        # Webhook receiver
    └── cli/        # Command line
"""

__version__ = "0.1.0"
