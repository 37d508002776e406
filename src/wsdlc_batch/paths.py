"""Working directory resolution.

Canonicalizes the source and output directories and checks that both
exist before anything touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from wsdlc_batch.errors import InvalidDirectory

logger = structlog.get_logger(__name__)

SOURCE_KEYWORD = "wsdldir"
OUTPUT_KEYWORD = "jardir"


def resolve_directory(raw: str, role: str) -> Path:
    """Return the canonical form of an existing directory.

    Args:
        raw: Directory path as given on the command line.
        role: Argument keyword the path belongs to, used in messages.

    Returns:
        Absolute, symlink-resolved directory path.

    Raises:
        InvalidDirectory: If the path does not exist or is not a directory.

    Example:
        >>> resolve_directory("build/../build/wsdl", "wsdldir")
        PosixPath('/work/build/wsdl')
    """
    if not raw.strip():
        raise InvalidDirectory(role, raw)

    canonical = Path(raw).expanduser().resolve()
    if not canonical.is_dir():
        raise InvalidDirectory(role, raw)

    logger.debug("directory_resolved", role=role, raw=raw, canonical=str(canonical))
    return canonical


def resolve_directories(input_dir: str, output_dir: str) -> tuple[Path, Path]:
    """Resolve the source and output directories, source first."""
    source = resolve_directory(input_dir, SOURCE_KEYWORD)
    output = resolve_directory(output_dir, OUTPUT_KEYWORD)
    return source, output
