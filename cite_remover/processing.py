from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from cite_remover.errors import CiteRemoverError, CreateError
from cite_remover.patterns import count_markers, has_match, strip_markers
from cite_remover.store import DocumentStore, backup_path
from cite_remover.types import ProcessedOutcome, RunSummary

LOGGER = logging.getLogger(__name__)

CONFIRM_MESSAGE = (
    "Are you sure you want to remove cite tags from ALL files in the vault? "
    ".bak files will be created."
)
NO_TAGS_MESSAGE = "No cite tags found in this file."
TAGS_REMOVED_MESSAGE = "Cite tags removed from current file."

ConfirmFn = Callable[[str], bool]


def remove_from_text(text: str) -> tuple[str, bool]:
    """Strip markers from in-memory text, reporting whether anything changed."""

    if not has_match(text):
        return text, False
    return strip_markers(text), True


def create_backup(store: DocumentStore, document: Path, content: str) -> bool:
    """Write ``<document>.bak`` with the original content.

    A failed backup never stops the document from being cleaned, so the
    failure is reported through the return value rather than raised.
    """

    target = backup_path(document)
    try:
        store.create(target, content)
    except CreateError:
        LOGGER.warning("Backup skipped for %s: %s likely exists", document, target)
        return False
    return True


def process_document(store: DocumentStore, document: Path) -> ProcessedOutcome:
    """Read, back up and rewrite a single document if it contains markers.

    ``ReadError`` and ``WriteError`` propagate to the caller; backup failures
    are logged and ignored.
    """

    content = store.read(document)
    if not has_match(content):
        LOGGER.debug("No cite tags in %s", document)
        return ProcessedOutcome.SKIPPED

    new_content = strip_markers(content)
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("Removing %d cite tags from %s", count_markers(content), document)

    create_backup(store, document, content)
    store.overwrite(document, new_content)
    LOGGER.info("Removed cite tags from %s", document)
    return ProcessedOutcome.MODIFIED


def remove_from_document(store: DocumentStore, document: Path, *, backup: bool = False) -> str:
    """Single-document action returning the status shown to the user."""

    if backup:
        outcome = process_document(store, document)
        return TAGS_REMOVED_MESSAGE if outcome is ProcessedOutcome.MODIFIED else NO_TAGS_MESSAGE

    new_content, changed = remove_from_text(store.read(document))
    if not changed:
        return NO_TAGS_MESSAGE
    store.overwrite(document, new_content)
    return TAGS_REMOVED_MESSAGE


def process_collection(
    store: DocumentStore,
    documents: Sequence[Path] | None = None,
    *,
    confirm: ConfirmFn,
) -> RunSummary | None:
    """Remove markers from every document in the collection, one at a time.

    Nothing is read or written until ``confirm`` approves the run; a declined
    confirmation returns ``None``. Per-document failures are logged and
    counted without stopping the batch.
    """

    if not confirm(CONFIRM_MESSAGE):
        LOGGER.info("Bulk removal cancelled")
        return None

    targets = list(store.list_documents() if documents is None else documents)
    LOGGER.info("Processing %d files...", len(targets))

    summary = RunSummary()
    for document in targets:
        try:
            outcome = process_document(store, document)
        except CiteRemoverError:
            LOGGER.exception("Failed to process %s", document)
            summary.record_error(document)
            continue
        summary.record(outcome)

    LOGGER.info(
        "%s (modified: %d, skipped: %d)", summary.message(), summary.modified, summary.skipped
    )
    return summary
