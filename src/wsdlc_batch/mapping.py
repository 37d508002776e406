"""Output path derivation.

Each input ``Name.wsdl`` compiles to ``<output_dir>/Name.apextest.jar``.
The artifact suffix is distinct so build cleaning can bulk-delete
generated jars without touching anything else in the output directory.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from wsdlc_batch.discovery import INPUT_SUFFIX
from wsdlc_batch.errors import DuplicateOutputError
from wsdlc_batch.models import InputFile, OutputMapping

OUTPUT_SUFFIX = ".apextest.jar"


def output_name(
    input_name: str,
    input_suffix: str = INPUT_SUFFIX,
    output_suffix: str = OUTPUT_SUFFIX,
) -> str:
    """Replace the trailing input suffix of a file name with the output suffix.

    Only the trailing suffix is replaced; an earlier occurrence of the
    suffix inside the name is kept.

    Args:
        input_name: Input file name ending with ``input_suffix``.
        input_suffix: Suffix to strip.
        output_suffix: Suffix to append.

    Returns:
        Artifact file name.

    Raises:
        ValueError: If ``input_name`` does not end with ``input_suffix``.

    Example:
        >>> output_name("Account.wsdl")
        'Account.apextest.jar'
        >>> output_name("v1.wsdl.Account.wsdl")
        'v1.wsdl.Account.apextest.jar'
    """
    if not input_suffix or not input_name.endswith(input_suffix):
        raise ValueError(f"'{input_name}' does not end with '{input_suffix}'")
    return input_name[: -len(input_suffix)] + output_suffix


def map_outputs(
    inputs: Iterable[InputFile],
    output_dir: Path,
    input_suffix: str = INPUT_SUFFIX,
    output_suffix: str = OUTPUT_SUFFIX,
) -> list[OutputMapping]:
    """Pair every input file with its artifact path in the output directory.

    Args:
        inputs: Discovered input files.
        output_dir: Canonical output directory.
        input_suffix: Suffix of input names.
        output_suffix: Suffix of artifact names.

    Returns:
        One mapping per input, in input order.

    Raises:
        DuplicateOutputError: If two inputs derive the same artifact path.
    """
    mappings: list[OutputMapping] = []
    claimed: dict[Path, str] = {}

    for input_file in inputs:
        output_path = output_dir / output_name(input_file.name, input_suffix, output_suffix)
        if output_path in claimed:
            raise DuplicateOutputError(output_path, claimed[output_path], input_file.name)
        claimed[output_path] = input_file.name
        mappings.append(OutputMapping(input=input_file, output_path=output_path))

    return mappings
