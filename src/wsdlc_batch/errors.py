"""Custom exception hierarchy for wsdlc-batch.

This module defines the exception classes raised by the pipeline stages:
- WsdlcBatchError: Base exception for all batch errors
- InvalidDirectory: A working directory is missing or not a directory
- NoInputFiles: The source directory holds no matching inputs
- FilterInvariantViolation: The discovery filter accepted a foreign name
- DuplicateOutputError: Two inputs map to one output artifact
- ConfigurationError: Environment configuration cannot be used
- CompilationFailure: The external compiler raised for one input

Stages raise these errors; only the CLI entry point turns them into a
process exit status. User-facing messages are safe to print, technical
details are logged through structlog.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from wsdlc_batch.models import OutputMapping

logger = structlog.get_logger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1  # Runtime problem (directories, inputs, compilation)
EXIT_USAGE = 2  # Malformed invocation


class WsdlcBatchError(Exception):
    """Base exception for wsdlc-batch.

    Args:
        user_message: Message safe to display on the console.
        internal_details: Optional technical details, logged but not shown.

    Attributes:
        exit_code: Process exit status the CLI uses for this error.
        show_usage: Whether the CLI prints usage help after the message.
    """

    exit_code: int = EXIT_FAILURE
    show_usage: bool = False

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize WsdlcBatchError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "wsdlc_batch_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class InvalidDirectory(WsdlcBatchError):
    """Raised when a source or output path does not exist or is not a directory.

    Attributes:
        role: Argument keyword the path was given for (wsdldir, jardir).
        raw_path: The path as given on the command line.
    """

    show_usage = True

    def __init__(self, role: str, raw_path: str) -> None:
        super().__init__(f"Input {role} '{raw_path}' does not exist or is not a directory")
        self.role = role
        self.raw_path = raw_path


class NoInputFiles(WsdlcBatchError):
    """Raised when the source directory contains no files with the input suffix."""

    show_usage = True

    def __init__(self, source_dir: Path, suffix: str) -> None:
        super().__init__(f"Input wsdldir '{source_dir}' does not contain any {suffix} files.")
        self.source_dir = source_dir
        self.suffix = suffix


class FilterInvariantViolation(WsdlcBatchError):
    """Raised when the discovery filter selects a name without the input suffix.

    This is an internal consistency failure: a filter that matches
    case-insensitively or by pattern would otherwise hand the wrong
    file to the compiler.
    """

    show_usage = True

    def __init__(self, source_dir: Path, name: str, suffix: str) -> None:
        super().__init__(
            f"Software Error: Input wsdldir '{source_dir}' produced listing of "
            f"non-wsdl file '{name}'",
            internal_details=f"accepted name {name!r} does not end with {suffix!r}",
        )
        self.source_dir = source_dir
        self.name = name
        self.suffix = suffix


class DuplicateOutputError(WsdlcBatchError):
    """Raised when two inputs derive the same output artifact path."""

    def __init__(self, output_path: Path, first: str, second: str) -> None:
        super().__init__(
            f"Inputs '{first}' and '{second}' both map to output '{output_path}'"
        )
        self.output_path = output_path


class ConfigurationError(WsdlcBatchError):
    """Raised when environment configuration is missing or unusable.

    Example:
        >>> raise ConfigurationError(
        ...     "Cannot import compiler 'acme.wsdl:Compiler'",
        ...     internal_details="ModuleNotFoundError: No module named 'acme'",
        ... )
    """


class CompilationFailure(WsdlcBatchError):
    """Raised when the external compiler fails for one input.

    The batch stops at the first failure; the original exception is
    chained as ``__cause__``.

    Attributes:
        mapping: The input/output pair that failed.
        position: 1-based position of the failed input in discovery order.
        total: Number of inputs in the batch.
    """

    def __init__(self, mapping: OutputMapping, position: int, total: int) -> None:
        super().__init__(
            f"Compilation failed for {mapping.input.name} ({position} of {total})"
        )
        self.mapping = mapping
        self.position = position
        self.total = total
