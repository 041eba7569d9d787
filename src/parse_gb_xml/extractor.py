"""Extraction of genome and peptide FASTA records from GenBank XML."""

import logging
import string
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Union

import regex

from .errors import RecordLookupError
from .gbxml import parse, read_record_set
from .models import ConversionResult, GBFeature, GBSeq, GBSet

logger = logging.getLogger(__name__)

NON_WORD = regex.compile(r'\W+')  # UTS#18 word characters: letters, marks, digits, connectors

TAXONOMY_SEPARATOR = '; '
TAXONOMY_JOINER = '__'
HEADER_SEPARATOR = ' ~~ '

REQUIRED_QUALIFIERS = ('product', 'protein_id', 'translation')

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def sanitize(text: str) -> str:
    """Replace every run of non-word characters with a single underscore."""
    return NON_WORD.sub('_', text)


def join_taxonomy(lineage: str) -> str:
    """Join a '; '-delimited lineage with double underscores.

    Only the literal '; ' separator is split; 'A;B' stays as one taxon.
    """
    return TAXONOMY_JOINER.join(lineage.split(TAXONOMY_SEPARATOR))


def ascii_upper(text: str) -> str:
    """Uppercase ASCII letters only, passing any other character through."""
    return text.translate(_ASCII_UPPER)


def format_record(header_fields: List[str], sequence: str) -> str:
    """Format a FASTA block as header line plus unwrapped sequence line."""
    return f">{HEADER_SEPARATOR.join(header_fields)}\n{sequence}"


def _require(value: Optional[str], target: str, accession: Optional[str] = None) -> str:
    if value is None:
        raise RecordLookupError(target, accession)
    return value


def _as_record_set(document: Union[ET.Element, GBSet]) -> GBSet:
    if isinstance(document, GBSet):
        return document
    return read_record_set(document)


def format_genome(seq: GBSeq) -> str:
    """Format one GBSeq as a genome FASTA block.

    Raises:
        RecordLookupError: If accession, organism, taxonomy or sequence is missing
    """
    accession = _require(seq.accession_version, "the 'GBSeq_accession-version' node")
    organism = _require(seq.organism, "the 'GBSeq_organism' node", accession)
    taxonomy = _require(seq.taxonomy, "the 'GBSeq_taxonomy' node", accession)
    sequence = _require(seq.sequence, "the 'GBSeq_sequence' node", accession)

    # Sanitized separately so runs never merge across the two fields
    return format_record(
        [accession, sanitize(organism), sanitize(join_taxonomy(taxonomy))],
        ascii_upper(sequence)
    )


def _qualifier_values(feature: GBFeature, accession: str) -> Dict[str, str]:
    if feature.qualifiers is None:
        raise RecordLookupError("the 'GBFeature_quals' node", accession)

    # Any nameless qualifier is fatal, even one after the required names
    for qualifier in feature.qualifiers:
        _require(qualifier.name, "the 'GBQualifier_name' node", accession)

    mapping = feature.qualifier_map()
    values = {}
    for name in REQUIRED_QUALIFIERS:
        if name not in mapping:
            raise RecordLookupError(f"the '{name}' qualifier", accession)
        values[name] = _require(
            mapping[name], f"the 'GBQualifier_value' node of the '{name}' qualifier", accession
        )
    return values


def format_peptides(seq: GBSeq) -> List[str]:
    """Format every CDS feature of one GBSeq as a peptide FASTA block.

    Raises:
        RecordLookupError: If the feature table, a feature key, or a required
            qualifier is missing
    """
    accession = _require(seq.accession_version, "the 'GBSeq_accession-version' node")
    if seq.feature_table is None:
        raise RecordLookupError("the 'GBSeq_feature-table' node", accession)

    for feature in seq.feature_table:
        _require(feature.key, "the 'GBFeature_key' node", accession)

    peptides = []
    for feature in seq.cds_features:
        values = _qualifier_values(feature, accession)
        peptides.append(format_record(
            [values['protein_id'], accession, sanitize(values['product'])],
            ascii_upper(values['translation'])
        ))

    return peptides


def extract_genomes(document: Union[ET.Element, GBSet]) -> List[str]:
    """Extract one genome FASTA block per GBSeq, in document order.

    Args:
        document: Parsed element tree or an already deserialized record set

    Returns:
        List of formatted genome blocks
    """
    record_set = _as_record_set(document)
    genomes = [format_genome(seq) for seq in record_set.seqs]
    logger.debug(f"Extracted {len(genomes)} genomes")
    return genomes


def extract_peptides(document: Union[ET.Element, GBSet]) -> List[str]:
    """Extract one peptide FASTA block per CDS feature.

    Blocks are ordered by genome, then by feature within each genome.

    Args:
        document: Parsed element tree or an already deserialized record set

    Returns:
        List of formatted peptide blocks
    """
    record_set = _as_record_set(document)
    peptides = []
    for seq in record_set.seqs:
        peptides.extend(format_peptides(seq))
    logger.debug(f"Extracted {len(peptides)} peptides")
    return peptides


def parse_xml(text: str) -> ConversionResult:
    """Parse GenBank XML text into genome and peptide FASTA blocks."""
    record_set = read_record_set(parse(text))

    return ConversionResult(
        genomes=extract_genomes(record_set),
        peptides=extract_peptides(record_set)
    )
