"""Tests for the conversion pipeline."""

import pytest

from parse_gb_xml.config import RunConfig
from parse_gb_xml.errors import (
    DocumentReadError, MalformedDocumentError, OutputWriteError, RecordLookupError
)
from parse_gb_xml.output_writer import OutputWriter
from parse_gb_xml.pipeline import run


class TestRun:
    """Test cases for a full conversion run."""

    @pytest.fixture
    def run_config(self, tmp_path):
        """Create a run configuration inside a temporary directory."""
        return RunConfig(
            xml=tmp_path / "input.xml",
            genomes=tmp_path / "genomes.fa",
            peptides=tmp_path / "peptides.faa"
        )

    def test_end_to_end(self, run_config, minimal_xml):
        """Test the minimal document produces the expected files."""
        run_config.xml.write_text(minimal_xml, encoding="utf-8")

        result = run(run_config)

        assert run_config.genomes.read_text(encoding="utf-8") == ">X1.1 ~~ Foo_bar ~~ A__B\nATGC\n"
        assert run_config.peptides.read_text(encoding="utf-8") == ">P1.1 ~~ X1.1 ~~ Prot1\nMK\n"
        assert result.genome_count == 1
        assert result.peptide_count == 1

    def test_uses_given_writer(self, run_config, minimal_xml):
        """Test records are written through the supplied writer."""
        run_config.xml.write_text(minimal_xml, encoding="utf-8")
        writer = OutputWriter()

        run(run_config, writer=writer)

        stats = writer.get_statistics()
        assert stats['files_written'] == 2
        assert [f['path'] for f in stats['files']] == [
            str(run_config.genomes), str(run_config.peptides)
        ]

    def test_logs_configuration(self, run_config, minimal_xml, caplog):
        """Test the resolved configuration is logged before processing."""
        run_config.xml.write_text(minimal_xml, encoding="utf-8")

        with caplog.at_level("INFO", logger="parse_gb_xml"):
            run(run_config)

        assert f"xml={run_config.xml}" in caplog.text

    def test_missing_input(self, run_config):
        """Test a missing input file fails with a read error."""
        with pytest.raises(DocumentReadError):
            run(run_config)

        assert not run_config.genomes.exists()

    def test_malformed_input(self, run_config):
        """Test malformed XML fails before any output is written."""
        run_config.xml.write_text("<GBSet><GBSeq>", encoding="utf-8")

        with pytest.raises(MalformedDocumentError):
            run(run_config)

        assert not run_config.genomes.exists()
        assert not run_config.peptides.exists()

    def test_missing_qualifier_writes_nothing(self, run_config, gbset, gbseq, cds):
        """Test a missing qualifier fails the whole run with no output."""
        run_config.xml.write_text(
            gbset(gbseq(features=[cds()]), gbseq(accession="X2.1", features=[cds(protein_id=None)])),
            encoding="utf-8"
        )

        with pytest.raises(RecordLookupError, match="protein_id"):
            run(run_config)

        assert not run_config.genomes.exists()
        assert not run_config.peptides.exists()

    def test_unwritable_peptides_keeps_genomes(self, tmp_path, minimal_xml):
        """Test a peptide write failure leaves the genome file written."""
        run_config = RunConfig(
            xml=tmp_path / "input.xml",
            genomes=tmp_path / "genomes.fa",
            peptides=tmp_path / "missing" / "peptides.faa"
        )
        run_config.xml.write_text(minimal_xml, encoding="utf-8")

        with pytest.raises(OutputWriteError):
            run(run_config)

        assert run_config.genomes.read_text(encoding="utf-8") == ">X1.1 ~~ Foo_bar ~~ A__B\nATGC\n"
