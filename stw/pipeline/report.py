# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Per-file outcomes and the run report that accumulates them.

One bad file must never kill a run. Instead of raising, every file ends up as
a FileResult that is changed, unchanged, or failed (with a reason), and the
RunReport collects them all. The report is an explicit object handed back by
the runner; there are no module-level counters anywhere.
"""

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Optional


class FileOutcome(str, enum.Enum):
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class FileResult(NamedTuple):
    """What happened to one file. `reason` is only set for failures."""

    path: Path
    outcome: FileOutcome
    reason: Optional[str] = None


@dataclass
class RunReport:
    """
    Everything that happened during one run, file by file.

    In dry-run mode, CHANGED means "would change": the file was not written.
    """

    dry_run: bool = False
    results: list[FileResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    def record(self, result: FileResult) -> None:
        self.results.append(result)

    def _count(self, outcome: FileOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def scanned(self) -> int:
        return len(self.results)

    @property
    def changed(self) -> int:
        return self._count(FileOutcome.CHANGED)

    @property
    def unchanged(self) -> int:
        return self._count(FileOutcome.UNCHANGED)

    @property
    def failed(self) -> int:
        return self._count(FileOutcome.FAILED)

    @property
    def changed_paths(self) -> list[Path]:
        return [r.path for r in self.results if r.outcome is FileOutcome.CHANGED]

    @property
    def failures(self) -> list[FileResult]:
        return [r for r in self.results if r.outcome is FileOutcome.FAILED]

    def summary(self) -> dict[str, object]:
        """Counts only, suitable for a log line."""
        return {
            "scanned": self.scanned,
            "changed": self.changed,
            "unchanged": self.unchanged,
            "failed": self.failed,
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds, 4),
        }

    def to_dict(self) -> dict[str, object]:
        """Full report, JSON-ready. File entries keep the order they were processed in."""
        entries = []
        for result in self.results:
            entry: dict[str, object] = {"path": str(result.path), "outcome": result.outcome.value}
            if result.reason is not None:
                entry["reason"] = result.reason
            entries.append(entry)
        return {**self.summary(), "files": entries}
