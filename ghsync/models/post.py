# ghsync/models/post.py
"""
Content records produced from blobs.

A Post is built by a processor and persisted by the content store. The
meta mapping always carries the originating blob sha and path so later
imports can tell whether the file changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Mapping, Optional

META_SHA = "_sha"
META_PATH = "_source_path"

DEFAULT_TYPE = "post"
DEFAULT_STATUS = "draft"
STATUS_PUBLISH = "publish"
STATUS_DRAFT = "draft"


@dataclass
class Post:
    """A content record ready to be saved."""

    content: str
    post_type: str = DEFAULT_TYPE
    status: str = DEFAULT_STATUS
    title: str = ""
    id: Optional[int] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    is_new: bool = field(init=False)

    def __post_init__(self) -> None:
        self.content = _text("content", self.content)
        self.post_type = _text("type", self.post_type)
        self.status = _text("status", self.status)
        self.title = _text("title", self.title)
        self.id = _identifier(self.id)
        self.meta = _meta(self.meta)
        # Fixed at creation; saving the post later does not change it.
        self.is_new = self.id is None

    @classmethod
    def from_args(cls, args: Mapping[str, Any], meta: Optional[Mapping[str, Any]] = None) -> "Post":
        """
        Build a post from a processor argument mapping.

        Recognized keys: content, type, status, title, id.

        Raises:
            ValueError: A field holds a list, mapping or other non-scalar.
        """
        return cls(
            content=args.get("content", ""),
            post_type=args.get("type") or DEFAULT_TYPE,
            status=args.get("status") or DEFAULT_STATUS,
            title=args.get("title") or "",
            id=args.get("id"),
            meta=dict(meta or {}),
        )

    @property
    def sha(self) -> Optional[str]:
        return self.meta.get(META_SHA)

    @property
    def source_path(self) -> Optional[str]:
        return self.meta.get(META_PATH)


_SCALARS = (str, int, float, bool, date)


def _text(name: str, value: Any) -> str:
    """Scalar front-matter value as text; YAML dates and numbers are stringified."""
    if not isinstance(value, _SCALARS):
        raise ValueError(f"{name} must be a scalar, got {type(value).__name__}")
    return value if isinstance(value, str) else str(value)


def _identifier(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"id must be an integer, got {type(value).__name__}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"id must be an integer, got {value!r}") from None


def _meta(value: Any) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"meta must be a mapping, got {type(value).__name__}")
    return {str(key): item for key, item in value.items()}


__all__ = [
    "Post",
    "META_SHA",
    "META_PATH",
    "DEFAULT_TYPE",
    "DEFAULT_STATUS",
    "STATUS_PUBLISH",
    "STATUS_DRAFT",
]
