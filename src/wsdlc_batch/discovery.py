"""Input file discovery.

Lists the compilable files directly inside the source directory. The
name filter is a plain predicate passed into discovery.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import structlog

from wsdlc_batch.errors import FilterInvariantViolation, NoInputFiles
from wsdlc_batch.models import InputFile

logger = structlog.get_logger(__name__)

INPUT_SUFFIX = ".wsdl"

NameFilter = Callable[[str], bool]


def suffix_filter(suffix: str) -> NameFilter:
    """Build a predicate accepting names that end with ``suffix``.

    Matching is literal and case-sensitive.

    Args:
        suffix: File name suffix, including the leading dot.

    Returns:
        Predicate taking a file name.

    Example:
        >>> accept = suffix_filter(".wsdl")
        >>> accept("Account.wsdl"), accept("Account.WSDL")
        (True, False)
    """

    def accept(name: str) -> bool:
        if not name:
            return False
        return name.endswith(suffix)

    return accept


has_input_suffix = suffix_filter(INPUT_SUFFIX)


def discover_inputs(
    source_dir: Path,
    accept: NameFilter = has_input_suffix,
    suffix: str = INPUT_SUFFIX,
) -> list[InputFile]:
    """List input files directly inside the source directory.

    Args:
        source_dir: Canonical source directory.
        accept: Name predicate selecting input files.
        suffix: Suffix every accepted name must end with.

    Returns:
        Input files sorted by name.

    Raises:
        FilterInvariantViolation: If ``accept`` selects a name that does not
            literally end with ``suffix``.
        NoInputFiles: If no file matches.
    """
    inputs: list[InputFile] = []

    for entry in sorted(source_dir.iterdir(), key=lambda p: p.name):
        if not accept(entry.name):
            continue
        if not entry.name.endswith(suffix):
            raise FilterInvariantViolation(source_dir, entry.name, suffix)
        if not entry.is_file():
            logger.debug("input_skipped", name=entry.name, reason="not a regular file")
            continue
        inputs.append(InputFile(name=entry.name, absolute_path=entry.resolve()))

    if not inputs:
        raise NoInputFiles(source_dir, suffix)

    logger.info("inputs_discovered", source_dir=str(source_dir), count=len(inputs))
    return inputs
