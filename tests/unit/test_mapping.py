"""Unit tests for wsdlc_batch.mapping module."""

from __future__ import annotations

from pathlib import Path

import pytest

from wsdlc_batch.errors import DuplicateOutputError
from wsdlc_batch.mapping import OUTPUT_SUFFIX, map_outputs, output_name
from wsdlc_batch.models import InputFile


def _input(name: str, directory: Path = Path("/src")) -> InputFile:
    return InputFile(name=name, absolute_path=directory / name)


class TestOutputName:
    """Tests for output_name function."""

    def test_replaces_suffix(self) -> None:
        """Test the input suffix becomes the output suffix."""
        assert output_name("Account.wsdl") == "Account.apextest.jar"

    def test_only_suffix_differs(self) -> None:
        """Test the stem is kept unchanged."""
        name = output_name("My-Service_v2.wsdl")

        assert name.startswith("My-Service_v2")
        assert name.endswith(OUTPUT_SUFFIX)

    def test_mid_name_occurrence_is_kept(self) -> None:
        """Test only the trailing suffix is replaced."""
        assert output_name("legacy.wsdl.Account.wsdl") == "legacy.wsdl.Account.apextest.jar"

    def test_name_that_is_only_the_suffix(self) -> None:
        """Test a bare suffix maps to a bare output suffix."""
        assert output_name(".wsdl") == ".apextest.jar"

    def test_custom_suffixes(self) -> None:
        """Test another suffix pair."""
        assert output_name("A.def", ".def", ".out.pkg") == "A.out.pkg"

    def test_missing_suffix(self) -> None:
        """Test names without the suffix are rejected."""
        with pytest.raises(ValueError, match="does not end with"):
            output_name("notes.txt")


class TestMapOutputs:
    """Tests for map_outputs function."""

    def test_one_mapping_per_input(self) -> None:
        """Test mappings follow input order and join the output directory."""
        out = Path("/out")
        mappings = map_outputs([_input("B.wsdl"), _input("A.wsdl")], out)

        assert [m.input.name for m in mappings] == ["B.wsdl", "A.wsdl"]
        assert [m.output_path for m in mappings] == [
            out / "B.apextest.jar",
            out / "A.apextest.jar",
        ]

    def test_output_names_unique(self) -> None:
        """Test unique inputs give unique outputs, including mid-name suffixes."""
        names = ["a.wsdl", "a.wsdl.wsdl", "b.wsdl", "a.apextest.jar.wsdl"]
        mappings = map_outputs([_input(n) for n in names], Path("/out"))

        outputs = [m.output_path for m in mappings]
        assert len(set(outputs)) == len(names)

    def test_output_name_property(self) -> None:
        """Test mappings expose the artifact file name."""
        (mapping,) = map_outputs([_input("A.wsdl")], Path("/out"))

        assert mapping.output_name == "A.apextest.jar"

    def test_duplicate_output_rejected(self) -> None:
        """Test the same input twice cannot claim one artifact twice."""
        with pytest.raises(DuplicateOutputError):
            map_outputs([_input("A.wsdl"), _input("A.wsdl", Path("/other"))], Path("/out"))

    def test_empty(self) -> None:
        """Test no inputs give no mappings."""
        assert map_outputs([], Path("/out")) == []
