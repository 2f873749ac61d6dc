# ghsync/importer/processors.py
"""
Blob processors: transformations from a Blob to a Post.

A Processor is a tag, not a function:
- Processor.document()       -> the built-in front-matter document processor
- Processor.custom("gallery") -> a function registered under "gallery"

The registry picks a default tag for each blob, lets the
`select_processor` extension point replace it, and resolves the tag to a
function. A tag that does not resolve is reported as "not callable",
distinct from a blob with no processor at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from ghsync.core import hooks as hook_names
from ghsync.core.hooks import HookRegistry
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.blob import TEXT_PLAIN, Blob
from ghsync.models.post import META_PATH, META_SHA, STATUS_DRAFT, STATUS_PUBLISH, Post

logger = get_logger(__name__)

ProcessorFunc = Callable[[Blob], Optional[Post]]

DEFAULT_MARKDOWN_EXTENSIONS = ("md", "markdown")


class ProcessorKind(str, Enum):
    DOCUMENT = "document"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Processor:
    """Which transformation to run for a blob."""

    kind: ProcessorKind
    processor_id: Optional[str] = None

    @classmethod
    def document(cls) -> "Processor":
        return cls(ProcessorKind.DOCUMENT)

    @classmethod
    def custom(cls, processor_id: str) -> "Processor":
        return cls(ProcessorKind.CUSTOM, processor_id)

    def __str__(self) -> str:
        if self.kind is ProcessorKind.CUSTOM:
            return f"custom:{self.processor_id}"
        return self.kind.value


class ProcessorRegistryError(Exception):
    """Base error for processor registration."""

    pass


class DuplicateProcessorError(ProcessorRegistryError):
    """Raised when two processors share an id."""

    pass


class DocumentProcessor:
    """
    Default processor for markdown documents with front-matter.

    Front-matter keys mapped onto the post and removed from its meta:
        layout     -> type
        published  -> status ("publish" only for boolean true, else "draft")
        post_title -> title
        ID         -> id (the post already exists)

    Every other key stays in meta, next to the blob sha and path.
    """

    def __init__(self, hooks: HookRegistry) -> None:
        self._hooks = hooks

    def blob_to_post(self, blob: Blob) -> Post:
        args: Dict[str, Any] = {"content": blob.content_import()}
        meta = blob.meta() or {}

        if "layout" in meta:
            args["type"] = meta.pop("layout")

        if "published" in meta:
            args["status"] = STATUS_PUBLISH if meta.pop("published") is True else STATUS_DRAFT

        if "post_title" in meta:
            args["title"] = meta.pop("post_title")

        if "ID" in meta:
            args["id"] = meta.pop("ID")

        meta[META_SHA] = blob.sha
        meta[META_PATH] = blob.path

        meta = self._hooks.apply(hook_names.BLOB_TO_POST_META, meta, blob)
        args = self._hooks.apply(hook_names.BLOB_TO_POST_ARGS, args, meta, blob)

        return Post.from_args(args, meta)


class ProcessorRegistry:
    """
    Maps blobs to processors.

    Usage:
        registry = ProcessorRegistry(hooks)
        registry.register("gallery", gallery_to_post)
        hooks.add_filter(SELECT_PROCESSOR, pick_gallery)

        processor = registry.select(blob)
        func = registry.resolve(processor) if processor else None
    """

    def __init__(
        self,
        hooks: HookRegistry,
        markdown_extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS,
    ) -> None:
        self._hooks = hooks
        self._markdown_extensions = frozenset(ext.lower().lstrip(".") for ext in markdown_extensions)
        self._document = DocumentProcessor(hooks)
        self._custom: Dict[str, ProcessorFunc] = {}

    @property
    def document_processor(self) -> DocumentProcessor:
        return self._document

    def register(self, processor_id: str, func: ProcessorFunc) -> Processor:
        """Register a custom processor and return its tag."""
        existing = self._custom.get(processor_id)
        if existing is not None and existing is not func:
            raise DuplicateProcessorError(f"Duplicate processor id: {processor_id!r}")
        self._custom[processor_id] = func
        logger.debug(f"{tags.IMPORT} Registered processor {processor_id!r}")
        return Processor.custom(processor_id)

    def available(self) -> List[str]:
        return sorted(self._custom)

    def default_for(self, blob: Blob) -> Optional[Processor]:
        """Document processor for plain-text markdown with front-matter, else None."""
        if (
            blob.has_frontmatter()
            and blob.mimetype == TEXT_PLAIN
            and blob.file_extension in self._markdown_extensions
        ):
            return Processor.document()
        return None

    def select(self, blob: Blob) -> Any:
        """
        Default processor tag passed through `select_processor`.

        The hook may return anything; resolve() decides whether it is usable.
        """
        return self._hooks.apply(hook_names.SELECT_PROCESSOR, self.default_for(blob), blob)

    def resolve(self, processor: Any) -> Optional[ProcessorFunc]:
        """Function for a processor tag, or None when the tag does not resolve."""
        if not isinstance(processor, Processor):
            return None
        if processor.kind is ProcessorKind.DOCUMENT:
            return self._document.blob_to_post
        return self._custom.get(processor.processor_id or "")


__all__ = [
    "Processor",
    "ProcessorKind",
    "ProcessorFunc",
    "ProcessorRegistry",
    "DocumentProcessor",
    "ProcessorRegistryError",
    "DuplicateProcessorError",
    "DEFAULT_MARKDOWN_EXTENSIONS",
]
