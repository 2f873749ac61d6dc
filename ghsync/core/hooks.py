# ghsync/core/hooks.py
"""
Named extension points for the import pipeline.

Each extension point is an explicit ordered chain of filter functions.
A filter receives the current value followed by the context arguments and
returns the (possibly replaced) value:

    hooks = HookRegistry()
    hooks.add_filter(EXCLUDE_PATHS, lambda excluded, path: excluded or path.startswith("drafts/"))
    hooks.apply(EXCLUDE_PATHS, False, "drafts/a.md")  # -> True

When no filter is registered, apply() returns the default unchanged.
Actions are observers: their return value is ignored and a failing action
is logged without interrupting the caller.

Registries are owned by the importer that uses them. There is no
process-wide registry.
"""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Tuple

from ghsync.logging import tags
from ghsync.logging.logger import get_logger

if TYPE_CHECKING:
    from ghsync.config.schema import SyncConfig

logger = get_logger(__name__)

# Filters
SELECT_PROCESSOR = "select_processor"
EXCLUDE_PATHS = "exclude_paths"
EXCLUDE_MIME_TYPES = "exclude_mime_types"
EXCLUDE_FILE_EXTENSIONS = "exclude_file_extensions"
IMPORTABLE_BLOB = "importable_blob"
BLOB_CHANGED = "blob_changed"
BLOB_TO_POST_META = "blob_to_post_meta"
BLOB_TO_POST_ARGS = "blob_to_post_args"

# Actions
NEW_CONTENT_IMPORTED = "new_content_imported"

DEFAULT_PRIORITY = 10

Filter = Callable[..., Any]
Action = Callable[..., None]


@dataclass
class HookRegistry:
    """Ordered filter and action chains keyed by extension point name."""

    _filters: Dict[str, List[Tuple[int, int, Filter]]] = field(default_factory=dict, repr=False)
    _actions: Dict[str, List[Tuple[int, int, Action]]] = field(default_factory=dict, repr=False)
    _counter: int = field(default=0, repr=False)

    def add_filter(self, name: str, fn: Filter, priority: int = DEFAULT_PRIORITY) -> None:
        """Append a filter; lower priority runs first, ties keep insertion order."""
        self._filters.setdefault(name, []).append((priority, self._next(), fn))
        self._filters[name].sort(key=lambda entry: (entry[0], entry[1]))
        logger.debug(f"{tags.HOOKS} Added filter {name!r}: {_describe(fn)}")

    def add_action(self, name: str, fn: Action, priority: int = DEFAULT_PRIORITY) -> None:
        self._actions.setdefault(name, []).append((priority, self._next(), fn))
        self._actions[name].sort(key=lambda entry: (entry[0], entry[1]))
        logger.debug(f"{tags.HOOKS} Added action {name!r}: {_describe(fn)}")

    def remove_filter(self, name: str, fn: Filter) -> bool:
        """Remove a filter. Returns False if it was not registered."""
        chain = self._filters.get(name, [])
        for entry in chain:
            if entry[2] is fn:
                chain.remove(entry)
                return True
        return False

    def has_filters(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply(self, name: str, value: Any, *context: Any) -> Any:
        """Thread value through the filter chain registered under name."""
        for _, _, fn in self._filters.get(name, ()):
            value = fn(value, *context)
        return value

    def do_action(self, name: str, *args: Any) -> None:
        """Notify every action registered under name."""
        for _, _, fn in self._actions.get(name, ()):
            try:
                fn(*args)
            except Exception as e:
                logger.warning(f"{tags.HOOKS} Action {name!r} ({_describe(fn)}) failed: {e}")

    def _next(self) -> int:
        self._counter += 1
        return self._counter


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def register_config_filters(hooks: HookRegistry, config: "SyncConfig") -> None:
    """
    Install the exclusion filters declared in configuration.

    exclude_paths are fnmatch patterns matched against the repository path.
    exclude_extensions are compared case-insensitively without the dot.
    """
    patterns = list(config.exclude_paths)
    extensions = {ext.lower().lstrip(".") for ext in config.exclude_extensions}

    if patterns:

        def exclude_configured_paths(excluded: bool, path: str) -> bool:
            return excluded or any(fnmatch.fnmatch(path, pattern) for pattern in patterns)

        hooks.add_filter(EXCLUDE_PATHS, exclude_configured_paths)

    if extensions:

        def exclude_configured_extensions(excluded: bool, extension: str) -> bool:
            return excluded or extension.lower() in extensions

        hooks.add_filter(EXCLUDE_FILE_EXTENSIONS, exclude_configured_extensions)


__all__ = [
    "HookRegistry",
    "register_config_filters",
    "SELECT_PROCESSOR",
    "EXCLUDE_PATHS",
    "EXCLUDE_MIME_TYPES",
    "EXCLUDE_FILE_EXTENSIONS",
    "IMPORTABLE_BLOB",
    "BLOB_CHANGED",
    "BLOB_TO_POST_META",
    "BLOB_TO_POST_ARGS",
    "NEW_CONTENT_IMPORTED",
]
