"""Batch runner.

Orchestrates one run: resolve directories, discover inputs, derive
outputs, remove stale artifacts, then compile every input in order.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path

import structlog

from wsdlc_batch.cleanup import clean_stale_artifacts
from wsdlc_batch.compiler import Compiler, template_location
from wsdlc_batch.discovery import INPUT_SUFFIX, discover_inputs, suffix_filter
from wsdlc_batch.errors import CompilationFailure, ConfigurationError
from wsdlc_batch.mapping import OUTPUT_SUFFIX, map_outputs
from wsdlc_batch.models import BatchResult, OutputMapping, RunRequest
from wsdlc_batch.paths import resolve_directories
from wsdlc_batch.templates import TEMPLATE_DELIMITER, TemplateSource

logger = structlog.get_logger(__name__)

Notify = Callable[[str], None]


def _ignore(message: str) -> None:
    pass


def invoke_compiler(
    mappings: Sequence[OutputMapping],
    compiler: Compiler,
    templates: TemplateSource,
    package_prefix: str | None = None,
    standalone: bool = False,
    notify: Notify = _ignore,
) -> None:
    """Compile every mapping sequentially, stopping at the first failure.

    Args:
        mappings: Input/output pairs in discovery order.
        compiler: External compiler.
        templates: Template source shared by all invocations.
        package_prefix: Package-name prefix, passed through unchanged.
        standalone: Standalone mode, passed through unchanged.
        notify: Callback receiving console messages.

    Raises:
        CompilationFailure: If the compiler raises for any input, including
            ``SystemExit``. Inputs after the failed one are not compiled.
    """
    total = len(mappings)
    for position, mapping in enumerate(mappings, start=1):
        notify(
            f"Running wsdlc on {mapping.input.absolute_path}\n"
            f"       to create {mapping.output_path}"
        )
        logger.debug(
            "compiler_invoked",
            input=str(mapping.input.absolute_path),
            output=str(mapping.output_path),
            position=position,
            total=total,
        )
        try:
            compiler.compile(
                mapping.input.absolute_path,
                mapping.output_path,
                package_prefix,
                standalone,
                templates,
                None,
                True,
            )
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            logger.error(
                "compilation_failed",
                input=mapping.input.name,
                position=position,
                total=total,
                error=repr(e),
            )
            raise CompilationFailure(mapping, position, total) from e


class BatchRunner:
    """Runs the full pipeline for one request.

    Attributes:
        request: Directories and compiler options of the run.
        compiler: External compiler.
        template_dir: Directory the shared template source loads from.

    Example:
        >>> request = RunRequest(input_dir="build/wsdl", output_dir="build/jars")
        >>> result = BatchRunner(request, compiler).run()
        >>> result.compiled_count
        2
    """

    def __init__(
        self,
        request: RunRequest,
        compiler: Compiler,
        template_dir: Path | str | None = None,
        *,
        input_suffix: str = INPUT_SUFFIX,
        output_suffix: str = OUTPUT_SUFFIX,
        notify: Notify = _ignore,
    ) -> None:
        self.request = request
        self.compiler = compiler
        self.template_dir = template_location(compiler, template_dir)
        self.input_suffix = input_suffix
        self.output_suffix = output_suffix
        self.notify = notify
        self._log = logger.bind(component="batch_runner")

    def plan(self) -> list[OutputMapping]:
        """Validate directories and derive the mappings, without side effects.

        Raises:
            InvalidDirectory: If a working directory is unusable.
            NoInputFiles: If the source directory has no inputs.
            FilterInvariantViolation: If discovery selects a foreign name.
            ConfigurationError: If the template directory does not exist.
        """
        source_dir, output_dir = resolve_directories(
            self.request.input_dir, self.request.output_dir
        )
        inputs = discover_inputs(
            source_dir,
            accept=suffix_filter(self.input_suffix),
            suffix=self.input_suffix,
        )
        mappings = map_outputs(inputs, output_dir, self.input_suffix, self.output_suffix)

        if not self.template_dir.is_dir():
            raise ConfigurationError(
                f"Template directory '{self.template_dir}' does not exist or is not a directory"
            )
        return mappings

    def run(self) -> BatchResult:
        """Run the batch.

        Returns:
            BatchResult for a run that compiled every input.

        Raises:
            WsdlcBatchError: On the first unrecoverable error.
        """
        start_time = time.monotonic()
        started_at = datetime.now(UTC)

        mappings = self.plan()
        self._log.info("batch_started", inputs=len(mappings))

        cleanup = clean_stale_artifacts(mappings, notify=self.notify)
        if not cleanup.clean:
            self._log.warning("stale_artifacts_remaining", count=len(cleanup.failures))

        templates = TemplateSource(self.template_dir, TEMPLATE_DELIMITER, TEMPLATE_DELIMITER)
        invoke_compiler(
            mappings,
            self.compiler,
            templates,
            package_prefix=self.request.package_prefix,
            standalone=self.request.standalone,
            notify=self.notify,
        )

        total_duration_ms = int((time.monotonic() - start_time) * 1000)
        self._log.info(
            "batch_completed",
            compiled=len(mappings),
            total_duration_ms=total_duration_ms,
        )
        return BatchResult(
            mappings=mappings,
            cleanup=cleanup,
            started_at=started_at,
            finished_at=datetime.now(UTC),
            total_duration_ms=total_duration_ms,
        )


def run_batch(
    request: RunRequest,
    compiler: Compiler,
    template_dir: Path | str | None = None,
    notify: Notify = _ignore,
) -> BatchResult:
    """Run one batch with the default suffixes."""
    return BatchRunner(request, compiler, template_dir, notify=notify).run()
