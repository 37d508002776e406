"""CLI entry point for wsdlc-batch.

Usage:

    wsdlc-batch wsdldir <dir> jardir <dir>

Compiles every .wsdl file in the wsdl directory into a .apextest.jar in
the jar directory. Exit status is 0 on success, 1 for runtime problems
and 2 for a malformed invocation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NoReturn

import click
import rich_click as rclick

from wsdlc_batch import __version__
from wsdlc_batch.cli.output import (
    error,
    info,
    plain,
    print_exception,
    set_no_color,
    success,
    warning,
)
from wsdlc_batch.compiler import Compiler, load_compiler
from wsdlc_batch.config import COMPILER_ENV_VAR, BatchSettings
from wsdlc_batch.errors import EXIT_FAILURE, CompilationFailure, ConfigurationError, WsdlcBatchError
from wsdlc_batch.models import BatchResult, RunRequest
from wsdlc_batch.observability import configure_logging
from wsdlc_batch.paths import OUTPUT_KEYWORD, SOURCE_KEYWORD
from wsdlc_batch.runner import BatchRunner

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True

USAGE_TEXT = """\
Usage:  wsdlc-batch wsdldir <dir> jardir <dir>
        wsdldir = The directory holding the wsdl files to compile. Every .wsdl file \
therein is passed to wsdlc,
        jardir  = The directory to which the resulting jars will be written.
        Put -- before the arguments when a directory name starts with '-'."""


def show_usage() -> None:
    """Print the usage help shown after runtime argument errors."""
    plain(USAGE_TEXT)


def check_arguments(args: Sequence[str]) -> tuple[str, str]:
    """Validate the four-argument shape and return the two directories.

    Keywords are matched case-insensitively.

    Raises:
        click.UsageError: If the shape does not match.
    """
    if len(args) != 4:
        raise click.UsageError(
            f"Expected 4 arguments ({SOURCE_KEYWORD} <dir> {OUTPUT_KEYWORD} <dir>), got {len(args)}."
        )
    if args[0].lower() != SOURCE_KEYWORD or args[2].lower() != OUTPUT_KEYWORD:
        raise click.UsageError(
            f"Arguments must be '{SOURCE_KEYWORD} <dir> {OUTPUT_KEYWORD} <dir>'."
        )
    return args[1], args[3]


def _load_configured_compiler(settings: BatchSettings) -> Compiler:
    if settings.compiler is None:
        raise ConfigurationError(
            f"No compiler configured. Set {COMPILER_ENV_VAR} to 'module:attribute'."
        )
    return load_compiler(settings.compiler)


def _fail(err: WsdlcBatchError) -> NoReturn:
    error(err.user_message)
    if isinstance(err, CompilationFailure):
        print_exception(err)
    if err.show_usage:
        show_usage()
    raise SystemExit(err.exit_code)


def _report(result: BatchResult) -> None:
    for failure in result.cleanup.failures:
        warning(f"Could not delete stale {failure.path}: {failure.reason}")
    success(f"Compiled {result.compiled_count} wsdl file(s) in {result.total_duration_ms} ms")


@click.command(
    "wsdlc-batch",
    cls=rclick.RichCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="wsdlc-batch")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Write debug logs to stderr.",
)
@click.argument("args", nargs=-1, metavar="wsdldir <dir> jardir <dir>")
def main(args: tuple[str, ...], verbose: bool) -> None:
    """Run wsdlc on every wsdl file in a directory.

    Compiles each `Name.wsdl` in **wsdldir** to `Name.apextest.jar` in
    **jardir**. Existing jars with those names are deleted first. The run
    stops at the first compilation failure. Use `--` before the arguments
    when a directory name starts with `-`.

    Configuration is read from the environment: `WSDLC_COMPILER`,
    `WSDLC_PACKAGE_PREFIX`, `WSDLC_STANDALONE_JAR`, `WSDLC_TEMPLATE_DIR`,
    `WSDLC_LOG_LEVEL`.

    Examples:

        wsdlc-batch wsdldir build/wsdl jardir build/jars

        wsdlc-batch -- wsdldir build/wsdl jardir -jars
    """
    settings = BatchSettings.from_env()
    configure_logging(log_level="DEBUG" if verbose else settings.log_level)

    info("Beginning run of multiple calls to wsdlc")
    input_dir, output_dir = check_arguments(args)

    request = RunRequest(
        input_dir=input_dir,
        output_dir=output_dir,
        package_prefix=settings.package_prefix,
        standalone=settings.standalone,
    )

    try:
        compiler = _load_configured_compiler(settings)
        result = BatchRunner(request, compiler, settings.template_dir, notify=info).run()
    except WsdlcBatchError as e:
        _fail(e)
    except Exception as e:
        error(f"Unexpected failure: {e}")
        print_exception(e)
        raise SystemExit(EXIT_FAILURE) from None

    _report(result)


if __name__ == "__main__":
    main()
