"""Shared test fixtures."""

import logging
from xml.sax.saxutils import escape

import pytest


def _qualifier_xml(name, value):
    parts = ["<GBQualifier>"]
    if name is not None:
        parts.append(f"<GBQualifier_name>{escape(name)}</GBQualifier_name>")
    if value is not None:
        parts.append(f"<GBQualifier_value>{escape(value)}</GBQualifier_value>")
    parts.append("</GBQualifier>")
    return "".join(parts)


def _feature_xml(key, qualifiers):
    parts = ["<GBFeature>"]
    if key is not None:
        parts.append(f"<GBFeature_key>{escape(key)}</GBFeature_key>")
    parts.append("<GBFeature_location>1..12</GBFeature_location>")
    if qualifiers is not None:
        parts.append("<GBFeature_quals>")
        parts.extend(_qualifier_xml(name, value) for name, value in qualifiers)
        parts.append("</GBFeature_quals>")
    parts.append("</GBFeature>")
    return "".join(parts)


def _seq_xml(accession="X1.1", organism="Foo bar", taxonomy="A; B",
             sequence="atgc", features=(), feature_table=True):
    fields = [
        ("GBSeq_accession-version", accession),
        ("GBSeq_organism", organism),
        ("GBSeq_taxonomy", taxonomy),
    ]
    parts = ["<GBSeq>", "<GBSeq_locus>LOCUS</GBSeq_locus>"]
    for tag, value in fields:
        if value is not None:
            parts.append(f"<{tag}>{escape(value)}</{tag}>")
    if feature_table:
        parts.append("<GBSeq_feature-table>")
        parts.extend(_feature_xml(key, quals) for key, quals in features)
        parts.append("</GBSeq_feature-table>")
    if sequence is not None:
        parts.append(f"<GBSeq_sequence>{escape(sequence)}</GBSeq_sequence>")
    parts.append("</GBSeq>")
    return "".join(parts)


def _set_xml(*seqs):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<!DOCTYPE GBSet PUBLIC "-//NCBI//NCBI GBSeq/EN" '
        '"https://www.ncbi.nlm.nih.gov/dtd/NCBI_GBSeq.dtd">\n'
        "<GBSet>" + "".join(seqs) + "</GBSet>\n"
    )


@pytest.fixture
def cds():
    """Build a (key, qualifiers) pair for a CDS feature."""
    def _cds(product="Prot1", protein_id="P1.1", translation="mk", key="CDS"):
        qualifiers = []
        if product is not None:
            qualifiers.append(("product", product))
        if protein_id is not None:
            qualifiers.append(("protein_id", protein_id))
        if translation is not None:
            qualifiers.append(("translation", translation))
        return (key, qualifiers)
    return _cds


@pytest.fixture
def gbseq():
    """Build the XML of one GBSeq element."""
    return _seq_xml


@pytest.fixture
def gbset():
    """Build a complete GBSet document from GBSeq snippets."""
    return _set_xml


@pytest.fixture
def minimal_xml(gbseq, gbset, cds):
    """One genome with one CDS feature."""
    return gbset(gbseq(features=[cds()]))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
