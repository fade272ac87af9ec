"""Utilities for removing cite markers from text documents."""

from .patterns import CITE_PATTERN, has_match, strip_markers
from .processing import process_collection, process_document, remove_from_document, remove_from_text
from .store import DocumentStore, FilesystemStore
from .types import ProcessedOutcome, RunSummary

__all__ = [
    "CITE_PATTERN",
    "has_match",
    "strip_markers",
    "process_collection",
    "process_document",
    "remove_from_document",
    "remove_from_text",
    "DocumentStore",
    "FilesystemStore",
    "ProcessedOutcome",
    "RunSummary",
]
