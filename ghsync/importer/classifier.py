# ghsync/importer/classifier.py
"""
Decides which blobs are in scope for import.

A blob is importable unless its path, extension or mime type is excluded.
Each predicate runs through its own extension point and the final answer
runs through `importable_blob`.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ghsync.core import hooks as hook_names
from ghsync.core.hooks import HookRegistry
from ghsync.models.blob import Blob


class ContentClassifier:
    """Pure importability decision for blobs."""

    def __init__(self, hooks: HookRegistry) -> None:
        self._hooks = hooks

    def excluded_by_path(self, path: str) -> bool:
        # The repository readme (at any depth) is never content.
        excluded = PurePosixPath(path).name.lower().startswith("readme")
        return bool(self._hooks.apply(hook_names.EXCLUDE_PATHS, excluded, path))

    def excluded_by_extension(self, extension: str) -> bool:
        return bool(self._hooks.apply(hook_names.EXCLUDE_FILE_EXTENSIONS, False, extension))

    def excluded_by_mimetype(self, mimetype: str) -> bool:
        return bool(self._hooks.apply(hook_names.EXCLUDE_MIME_TYPES, False, mimetype))

    def is_importable(self, blob: Blob) -> bool:
        importable = not (
            self.excluded_by_path(blob.path)
            or self.excluded_by_extension(blob.file_extension)
            or self.excluded_by_mimetype(blob.mimetype)
        )
        return bool(self._hooks.apply(hook_names.IMPORTABLE_BLOB, importable, blob))


__all__ = ["ContentClassifier"]
