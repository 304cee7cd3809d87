# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Run orchestrator: selector -> read -> normalize -> write.

Files stream through one at a time. The selector yields a path, we read it,
the normalizer produces new bytes, and if those differ from what's on disk we
write them back atomically. Nothing about the whole repository is held in
memory except the growing list of per-file results.

Every failure is local to its file. A read error, a write error, or a
directory the walker couldn't enter becomes a FAILED result and the loop moves
on to the next path.
"""

import json
import time
from pathlib import Path
from typing import Optional

from stw.config.schema import NormalizationConfig, SelectionConfig
from stw.core.normalizer import normalize
from stw.core.selector import select
from stw.logging.logger import get_logger
from stw.pipeline.report import FileOutcome, FileResult, RunReport
from stw.utils.filesystem import atomic_write, atomic_write_bytes, read_bytes


def process_file(path: Path, config: NormalizationConfig, dry_run: bool = False) -> FileResult:
    """
    Normalize a single file in place and say what happened.

    Never raises for I/O problems; those come back as FAILED results.
    """
    try:
        original = read_bytes(path)
    except OSError as err:
        return FileResult(path, FileOutcome.FAILED, f"read failed: {err}")

    result = normalize(original, config)
    if not result.changed:
        return FileResult(path, FileOutcome.UNCHANGED)

    if not dry_run:
        try:
            atomic_write_bytes(path, result.content)
        except OSError as err:
            return FileResult(path, FileOutcome.FAILED, f"write failed: {err}")

    return FileResult(path, FileOutcome.CHANGED)


def run_normalizer(
    selection: SelectionConfig,
    normalization: NormalizationConfig,
    dry_run: bool = False,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> RunReport:
    """
    Normalize every selected file under selection.root.

    Returns a RunReport with one entry per visited file plus one entry per
    traversal error. In dry-run mode nothing is written, but files that would
    change are still reported as CHANGED.
    """
    logger = get_logger("stw.pipeline", log_level=log_level, log_file=log_file)
    report = RunReport(dry_run=dry_run)
    started = time.perf_counter()

    def _log(result: FileResult) -> None:
        if result.outcome is FileOutcome.CHANGED:
            msg = "File would change" if dry_run else "File normalized"
            logger.info(msg, extra={"path": str(result.path)})
        elif result.outcome is FileOutcome.UNCHANGED:
            logger.debug("File already clean", extra={"path": str(result.path)})
        else:
            logger.warning(
                "File not normalized",
                extra={"path": str(result.path), "reason": result.reason},
            )

    def _on_traversal_error(path: Path, error: OSError) -> None:
        result = FileResult(path, FileOutcome.FAILED, f"traversal failed: {error}")
        report.record(result)
        _log(result)

    logger.debug(
        "Run started",
        extra={
            "root": selection.root,
            "extensions": selection.extensions,
            "case_sensitive": selection.case_sensitive,
            "eof_newline_normalization": normalization.eof_newline_normalization,
            "dry_run": dry_run,
        },
    )

    for path in select(selection, on_error=_on_traversal_error):
        result = process_file(path, normalization, dry_run=dry_run)
        report.record(result)
        _log(result)

    report.duration_seconds = time.perf_counter() - started
    logger.info("Run complete", extra=report.summary())
    return report


def write_report(report: RunReport, report_path: Path, root: Optional[str] = None) -> None:
    """Persist the full run report as pretty-printed JSON."""
    payload = report.to_dict()
    if root is not None:
        payload = {"root": root, **payload}
    atomic_write(report_path, json.dumps(payload, indent=2, sort_keys=True) + "\n")
