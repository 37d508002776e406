"""Unit tests for wsdlc_batch.cleanup module."""

from __future__ import annotations

from pathlib import Path

from structlog.testing import capture_logs

from wsdlc_batch.cleanup import clean_stale_artifacts
from wsdlc_batch.models import InputFile, OutputMapping


def _mapping(wsdl_dir: Path, jar_dir: Path, stem: str) -> OutputMapping:
    return OutputMapping(
        input=InputFile(name=f"{stem}.wsdl", absolute_path=wsdl_dir / f"{stem}.wsdl"),
        output_path=jar_dir / f"{stem}.apextest.jar",
    )


class TestCleanStaleArtifacts:
    """Tests for clean_stale_artifacts function."""

    def test_removes_existing_artifacts(self, wsdl_dir: Path, jar_dir: Path) -> None:
        """Test existing artifacts at mapped paths are deleted."""
        mappings = [_mapping(wsdl_dir, jar_dir, "A"), _mapping(wsdl_dir, jar_dir, "B")]
        mappings[0].output_path.write_text("stale")

        report = clean_stale_artifacts(mappings)

        assert not mappings[0].output_path.exists()
        assert report.removed == [mappings[0].output_path]
        assert report.clean

    def test_leaves_unrelated_files(self, wsdl_dir: Path, jar_dir: Path) -> None:
        """Test files not at a mapped path are untouched."""
        other = jar_dir / "Other.apextest.jar"
        other.write_text("keep")
        readme = jar_dir / "README.txt"
        readme.write_text("keep")

        clean_stale_artifacts([_mapping(wsdl_dir, jar_dir, "A")])

        assert other.exists()
        assert readme.exists()

    def test_nothing_to_remove(self, wsdl_dir: Path, jar_dir: Path) -> None:
        """Test an empty output directory gives an empty report."""
        report = clean_stale_artifacts([_mapping(wsdl_dir, jar_dir, "A")])

        assert report.removed == []
        assert report.failures == []

    def test_notifies_each_deletion(self, wsdl_dir: Path, jar_dir: Path) -> None:
        """Test the console callback receives one message per deletion."""
        mapping = _mapping(wsdl_dir, jar_dir, "A")
        mapping.output_path.write_text("stale")
        messages: list[str] = []

        clean_stale_artifacts([mapping], notify=messages.append)

        assert messages == [f"Deleting existing {mapping.output_path}"]

    def test_failure_is_not_fatal(self, wsdl_dir: Path, jar_dir: Path) -> None:
        """Test an undeletable artifact is reported and the pass continues."""
        blocked = _mapping(wsdl_dir, jar_dir, "A")
        blocked.output_path.mkdir()  # unlink() fails on a directory
        stale = _mapping(wsdl_dir, jar_dir, "B")
        stale.output_path.write_text("stale")

        with capture_logs() as logs:
            report = clean_stale_artifacts([blocked, stale])

        assert not report.clean
        assert [f.path for f in report.failures] == [blocked.output_path]
        assert report.removed == [stale.output_path]
        assert not stale.output_path.exists()
        assert any(
            log["event"] == "stale_artifact_not_removed" and log["log_level"] == "warning"
            for log in logs
        )
