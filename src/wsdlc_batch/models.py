"""Batch data models.

Immutable models for the values passed between pipeline stages.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class RunRequest(BaseModel):
    """Parameters of one batch run.

    Built once from the command line and the environment.

    Attributes:
        input_dir: Source directory as given on the command line.
        output_dir: Output directory as given on the command line.
        package_prefix: Package-name prefix passed to the compiler.
        standalone: Whether the compiler builds standalone artifacts.

    Example:
        >>> request = RunRequest(input_dir="build/wsdl", output_dir="build/jars")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    input_dir: str = Field(..., description="Source directory")
    output_dir: str = Field(..., description="Output directory")
    package_prefix: str | None = Field(default=None, description="Package-name prefix")
    standalone: bool = Field(default=False, description="Standalone mode")


class InputFile(BaseModel):
    """A discovered input file.

    Attributes:
        name: File name without directory component.
        absolute_path: Canonical path of the file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="File name")
    absolute_path: Path = Field(..., description="Canonical file path")


class OutputMapping(BaseModel):
    """An input file paired with the artifact path it compiles to."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    input: InputFile
    output_path: Path = Field(..., description="Canonical artifact path")

    @property
    def output_name(self) -> str:
        """Artifact file name."""
        return self.output_path.name


class CleanupFailure(BaseModel):
    """A stale artifact that could not be deleted.

    Cleanup failures are recorded and reported, never raised.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path
    reason: str = Field(default="", description="OS error message")


class CleanupReport(BaseModel):
    """Outcome of the stale artifact cleanup pass.

    Attributes:
        removed: Artifacts deleted before compilation.
        failures: Artifacts that could not be deleted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    removed: list[Path] = Field(default_factory=list)
    failures: list[CleanupFailure] = Field(default_factory=list)

    @property
    def clean(self) -> bool:
        """Check if every stale artifact was removed."""
        return not self.failures


class BatchResult(BaseModel):
    """Result of a batch run that compiled every discovered input.

    A failed run raises instead of returning a partial result.

    Attributes:
        mappings: Compiled input/output pairs, in invocation order.
        cleanup: Outcome of the cleanup pass.
        started_at: When the run started.
        finished_at: When the last compilation finished.
        total_duration_ms: Total duration in milliseconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mappings: list[OutputMapping] = Field(default_factory=list)
    cleanup: CleanupReport = Field(default_factory=CleanupReport)
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = Field(default=None)
    total_duration_ms: int = Field(default=0, ge=0)

    @property
    def compiled_count(self) -> int:
        """Number of compiled inputs."""
        return len(self.mappings)
