"""Shared test fixtures for wsdlc-batch tests.

Provides directory fixtures, a recording compiler, and a CliRunner
with structured logging left to the test configuration.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

import wsdlc_batch.cli.main as cli_main


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@dataclass
class CompileCall:
    """Arguments of one compiler invocation."""

    input_path: Path
    output_path: Path
    package_prefix: str | None
    standalone: bool
    templates: Any
    listener: Any
    suppress_prompt: bool
    output_existed: bool


@dataclass
class RecordingCompiler:
    """Compiler double that records calls and writes a small artifact.

    Attributes:
        fail_on: Input file name whose compilation raises.
        write_output: Whether a successful call writes the artifact.
        calls: Recorded invocations, in order.
    """

    fail_on: str | None = None
    write_output: bool = True
    calls: list[CompileCall] = field(default_factory=list)

    def compile(
        self,
        input_path: Path,
        output_path: Path,
        package_prefix: str | None,
        standalone: bool,
        templates: Any,
        listener: Any,
        suppress_prompt: bool,
    ) -> None:
        self.calls.append(
            CompileCall(
                input_path=input_path,
                output_path=output_path,
                package_prefix=package_prefix,
                standalone=standalone,
                templates=templates,
                listener=listener,
                suppress_prompt=suppress_prompt,
                output_existed=output_path.exists(),
            )
        )
        if input_path.name == self.fail_on:
            raise RuntimeError(f"cannot parse {input_path.name}")
        if self.write_output:
            output_path.write_bytes(b"PK\x05\x06" + b"\x00" * 18)

    @property
    def compiled_names(self) -> list[str]:
        return [call.input_path.name for call in self.calls]


@pytest.fixture
def compiler() -> RecordingCompiler:
    """Return a compiler double that succeeds for every input."""
    return RecordingCompiler()


@pytest.fixture
def wsdl_dir(tmp_path: Path) -> Path:
    """Return an empty source directory."""
    path = tmp_path / "wsdl"
    path.mkdir()
    return path


@pytest.fixture
def jar_dir(tmp_path: Path) -> Path:
    """Return an empty output directory."""
    path = tmp_path / "jars"
    path.mkdir()
    return path


@pytest.fixture
def make_files(wsdl_dir: Path) -> Callable[..., list[Path]]:
    """Factory fixture creating files in the source directory.

    Returns:
        Function taking file names and returning the created paths.
    """

    def _create(*names: str) -> list[Path]:
        paths = []
        for name in names:
            path = wsdl_dir / name
            path.write_text(f"<definitions name='{name}'/>")
            paths.append(path)
        return paths

    return _create


@pytest.fixture
def cli_runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Create a Click test runner.

    Logging configuration is skipped so handlers never hold on to the
    runner's temporary output streams.
    """
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    return CliRunner()
