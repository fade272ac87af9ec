from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ProcessedOutcome(str, Enum):
    """Result of running the remover over a single document."""

    SKIPPED = "skipped"
    MODIFIED = "modified"


@dataclass
class RunSummary:
    """Tally of one bulk run."""

    processed: int = 0
    modified: int = 0
    skipped: int = 0
    errors: int = 0
    failed: list[Path] = field(default_factory=list)

    def record(self, outcome: ProcessedOutcome) -> None:
        self.processed += 1
        if outcome is ProcessedOutcome.MODIFIED:
            self.modified += 1
        else:
            self.skipped += 1

    def record_error(self, document: Path) -> None:
        self.errors += 1
        self.failed.append(document)

    def message(self) -> str:
        return f"Complete! Processed: {self.processed}, Errors: {self.errors}"
