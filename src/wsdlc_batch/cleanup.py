"""Stale artifact cleanup.

The compiler never deletes or overwrites existing artifacts, so leftovers
from an earlier failed run are removed in one pass before any input is
compiled.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from wsdlc_batch.models import CleanupFailure, CleanupReport, OutputMapping

logger = structlog.get_logger(__name__)


def clean_stale_artifacts(
    mappings: Iterable[OutputMapping],
    notify: Callable[[str], None] | None = None,
) -> CleanupReport:
    """Delete every existing artifact at the mapped output paths.

    Deletion failures are logged and reported but do not stop the run;
    a stale file that really blocks the compiler makes that compile fail.

    Args:
        mappings: Input/output pairs of the batch.
        notify: Optional callback receiving console messages.

    Returns:
        CleanupReport listing removed artifacts and failures.
    """
    removed = []
    failures = []

    for mapping in mappings:
        path = mapping.output_path
        if not path.exists():
            continue

        if notify is not None:
            notify(f"Deleting existing {path}")
        try:
            path.unlink()
        except OSError as e:
            logger.warning("stale_artifact_not_removed", path=str(path), error=str(e))
            failures.append(CleanupFailure(path=path, reason=e.strerror or str(e)))
            continue

        logger.debug("stale_artifact_removed", path=str(path))
        removed.append(path)

    return CleanupReport(removed=removed, failures=failures)
