# ghsync/models/blob.py
"""
A single file of a commit's tree.

Blobs are immutable snapshots. Front-matter (a leading YAML block delimited
by "---" lines) is parsed lazily and cached per instance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Dict, Optional

import yaml

from ghsync.logging.logger import get_logger

logger = get_logger(__name__)

TEXT_PLAIN = "text/plain"
OCTET_STREAM = "application/octet-stream"

FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n?^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def sniff_mimetype(data: bytes) -> str:
    """Classify raw content as plain text or binary."""
    if b"\x00" in data:
        return OCTET_STREAM
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return OCTET_STREAM
    return TEXT_PLAIN


@dataclass(frozen=True)
class Blob:
    """
    One file at one commit.

    Attributes:
        path: Repository-relative path (e.g., "_posts/hello.md")
        sha: Git blob sha of the content
        content: Raw text content (front-matter included)
        mimetype: Content type sniffed from the bytes
    """

    path: str
    sha: str
    content: str = ""
    mimetype: str = TEXT_PLAIN
    _cache: Dict[str, Any] = field(default_factory=dict, init=False, repr=False, compare=False)

    @classmethod
    def from_bytes(cls, path: str, sha: str, data: bytes, mimetype: Optional[str] = None) -> "Blob":
        """Build a blob from raw bytes, sniffing the mime type when not given."""
        if mimetype is None:
            mimetype = sniff_mimetype(data)
        content = data.decode("utf-8", errors="replace") if mimetype == TEXT_PLAIN else ""
        return cls(path=path, sha=sha, content=content, mimetype=mimetype)

    @property
    def file_extension(self) -> str:
        """Lowercase extension without the dot ("" when there is none)."""
        return PurePosixPath(self.path).suffix.lower().lstrip(".")

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    def has_frontmatter(self) -> bool:
        """True when the content starts with a parseable front-matter mapping."""
        return self.meta() is not None

    def meta(self) -> Optional[Dict[str, Any]]:
        """
        Parsed front-matter, or None.

        Returns a fresh copy on each call so callers may mutate it.
        """
        parsed = self._parse()["meta"]
        return dict(parsed) if parsed is not None else None

    def content_import(self) -> str:
        """Content with the front-matter block removed."""
        return self._parse()["body"]

    def _parse(self) -> Dict[str, Any]:
        if "parsed" not in self._cache:
            self._cache["parsed"] = _split_frontmatter(self.path, self.content)
        return self._cache["parsed"]


def _split_frontmatter(path: str, content: str) -> Dict[str, Any]:
    match = FRONTMATTER_RE.match(content)
    if not match:
        return {"meta": None, "body": content}

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.debug(f"Unparseable front-matter in {path}: {e}")
        return {"meta": None, "body": content}

    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.debug(f"Front-matter in {path} is not a mapping, ignoring")
        return {"meta": None, "body": content}

    return {"meta": data, "body": content[match.end():].lstrip("\r\n")}


__all__ = ["Blob", "sniff_mimetype", "TEXT_PLAIN", "OCTET_STREAM"]
