"""wsdlc-batch: run an external WSDL compiler over a directory of WSDL files.

This package provides:
- BatchRunner / run_batch: the resolve, discover, map, clean, compile pipeline
- Compiler: protocol the external compiler implements
- TemplateSource: template handle shared by every compiler invocation
- Error types with CLI exit codes
"""

from __future__ import annotations

__version__ = "0.1.0"

from wsdlc_batch.cleanup import clean_stale_artifacts
from wsdlc_batch.compiler import CallableCompiler, CompileListener, Compiler, load_compiler
from wsdlc_batch.config import BatchSettings
from wsdlc_batch.discovery import INPUT_SUFFIX, discover_inputs, has_input_suffix, suffix_filter
from wsdlc_batch.errors import (
    CompilationFailure,
    ConfigurationError,
    DuplicateOutputError,
    FilterInvariantViolation,
    InvalidDirectory,
    NoInputFiles,
    WsdlcBatchError,
)
from wsdlc_batch.mapping import OUTPUT_SUFFIX, map_outputs, output_name
from wsdlc_batch.models import (
    BatchResult,
    CleanupFailure,
    CleanupReport,
    InputFile,
    OutputMapping,
    RunRequest,
)
from wsdlc_batch.paths import resolve_directories, resolve_directory
from wsdlc_batch.runner import BatchRunner, invoke_compiler, run_batch
from wsdlc_batch.templates import TemplateSource

__all__ = [
    "__version__",
    # Pipeline
    "BatchRunner",
    "run_batch",
    "resolve_directory",
    "resolve_directories",
    "discover_inputs",
    "suffix_filter",
    "has_input_suffix",
    "output_name",
    "map_outputs",
    "clean_stale_artifacts",
    "invoke_compiler",
    "INPUT_SUFFIX",
    "OUTPUT_SUFFIX",
    # Collaborators
    "Compiler",
    "CompileListener",
    "CallableCompiler",
    "load_compiler",
    "TemplateSource",
    "BatchSettings",
    # Models
    "RunRequest",
    "InputFile",
    "OutputMapping",
    "CleanupFailure",
    "CleanupReport",
    "BatchResult",
    # Errors
    "WsdlcBatchError",
    "InvalidDirectory",
    "NoInputFiles",
    "FilterInvariantViolation",
    "DuplicateOutputError",
    "ConfigurationError",
    "CompilationFailure",
]
