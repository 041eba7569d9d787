"""The load, extract and write pipeline."""

import logging
from typing import Optional

from .config import RunConfig
from .document_loader import load_document
from .extractor import parse_xml
from .logging_config import LogTimer, log_performance
from .models import ConversionResult
from .output_writer import OutputWriter

logger = logging.getLogger(__name__)


def run(run_config: RunConfig, writer: Optional[OutputWriter] = None) -> ConversionResult:
    """Convert one GenBank XML file into genome and peptide FASTA files.

    Both outputs are extracted before anything is written, so a lookup
    failure leaves both output files untouched. A write failure on the
    peptide file leaves the genome file already written.

    Args:
        run_config: Input and output paths
        writer: Output writer (a new one is created if not given)

    Returns:
        The formatted genome and peptide blocks that were written

    Raises:
        ConversionError: On any I/O, parse or lookup failure
    """
    writer = writer or OutputWriter()
    logger.info(run_config.describe())

    with LogTimer("Load document"):
        text = load_document(run_config.xml)

    with LogTimer("Parse and extract records") as timer:
        result = parse_xml(text)
    log_performance("Extraction", timer.elapsed, result.genome_count + result.peptide_count)

    with LogTimer("Write output"):
        writer.write(result.genomes, run_config.genomes)
        writer.write(result.peptides, run_config.peptides)

    return result
