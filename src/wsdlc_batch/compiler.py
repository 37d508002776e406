"""External compiler interface.

The batch driver does not compile anything itself. It calls an object
implementing :class:`Compiler`, loaded from an import reference such as
``acme_wsdl.compiler:WsdlCompiler``.
"""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog

from wsdlc_batch.errors import ConfigurationError
from wsdlc_batch.templates import DEFAULT_TEMPLATE_DIR, TemplateSource

logger = structlog.get_logger(__name__)


class CompileListener(Protocol):
    """Receives progress messages from a compiler."""

    def on_message(self, message: str) -> None: ...


@runtime_checkable
class Compiler(Protocol):
    """Compiles one WSDL file into one artifact.

    Implementations raise on failure. They must not prompt for input when
    ``suppress_prompt`` is true, and they never delete an existing artifact.
    """

    def compile(
        self,
        input_path: Path,
        output_path: Path,
        package_prefix: str | None,
        standalone: bool,
        templates: TemplateSource,
        listener: CompileListener | None,
        suppress_prompt: bool,
    ) -> None: ...


class CallableCompiler:
    """Adapt a plain function with the ``compile`` signature to :class:`Compiler`."""

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func

    def compile(
        self,
        input_path: Path,
        output_path: Path,
        package_prefix: str | None,
        standalone: bool,
        templates: TemplateSource,
        listener: CompileListener | None,
        suppress_prompt: bool,
    ) -> None:
        self.func(
            input_path,
            output_path,
            package_prefix,
            standalone,
            templates,
            listener,
            suppress_prompt,
        )

    def __repr__(self) -> str:
        return f"CallableCompiler({getattr(self.func, '__qualname__', self.func)!r})"


def _import_reference(reference: str) -> Any:
    """Import ``module:attr`` or ``module.attr`` and return the attribute."""
    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    else:
        module_name, _, attr_path = reference.rpartition(".")

    if not module_name or not attr_path:
        raise ConfigurationError(
            f"Invalid compiler reference '{reference}'. Use 'module:attribute'."
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(
            f"Cannot import compiler module '{module_name}'",
            internal_details=repr(e),
        ) from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ConfigurationError(
                f"Compiler '{attr_path}' not found in module '{module_name}'",
            ) from e
    return obj


def load_compiler(reference: str) -> Compiler:
    """Load the external compiler from an import reference.

    A class is instantiated without arguments, an object with a ``compile``
    method is used as is, and any other callable is wrapped in
    :class:`CallableCompiler`.

    Args:
        reference: ``package.module:attribute`` or ``package.module.attribute``.

    Returns:
        Compiler instance.

    Raises:
        ConfigurationError: If the reference cannot be imported or does not
            name a usable compiler.
    """
    obj = _import_reference(reference)

    if inspect.isclass(obj):
        try:
            obj = obj()
        except Exception as e:
            raise ConfigurationError(
                f"Cannot instantiate compiler '{reference}'",
                internal_details=repr(e),
            ) from e

    if isinstance(obj, Compiler):
        compiler: Compiler = obj
    elif callable(obj):
        compiler = CallableCompiler(obj)
    else:
        raise ConfigurationError(f"'{reference}' is not a compiler")

    logger.debug("compiler_loaded", reference=reference, compiler=repr(compiler))
    return compiler


def template_location(compiler: Compiler, override: Path | str | None = None) -> Path:
    """Template directory for a run.

    An explicit ``override`` wins, then a ``template_dir`` attribute declared
    by the compiler, then the templates packaged with wsdlc-batch.

    Example:
        >>> template_location(compiler)
        PosixPath('.../wsdlc_batch/codegen')
    """
    if override is not None:
        return Path(override)
    declared = getattr(compiler, "template_dir", None)
    if declared is not None:
        return Path(declared)
    return DEFAULT_TEMPLATE_DIR
