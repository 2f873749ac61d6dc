# ghsync/importer/__init__.py
"""
The commit import pipeline.

Key components:
- ContentClassifier: which blobs are content at all
- ChangeDetector: which blobs changed since they were last imported
- ProcessorRegistry: which transformation turns a blob into a post
- CommitImporter: runs the above over a commit and saves the batch
- PayloadImporter: push payloads, deletions and full resyncs
"""

from ghsync.importer.classifier import ContentClassifier
from ghsync.importer.commit import CommitImporter, ImportReport, ImportResult
from ghsync.importer.detector import ChangeDetector
from ghsync.importer.payload import PayloadImporter
from ghsync.importer.processors import (
    DocumentProcessor,
    Processor,
    ProcessorKind,
    ProcessorRegistry,
)

__all__ = [
    "ContentClassifier",
    "ChangeDetector",
    "Processor",
    "ProcessorKind",
    "ProcessorRegistry",
    "DocumentProcessor",
    "CommitImporter",
    "ImportResult",
    "ImportReport",
    "PayloadImporter",
]
