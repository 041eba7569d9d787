"""Parsing of GenBank XML documents into typed records."""

import logging
import xml.etree.ElementTree as ET
from typing import Iterator, List, Optional

from .errors import MalformedDocumentError, RecordLookupError
from .models import GBFeature, GBQualifier, GBSeq, GBSet

logger = logging.getLogger(__name__)


def parse(text: str) -> ET.Element:
    """Parse XML text into an element tree.

    Args:
        text: Complete XML document

    Returns:
        Root element of the document

    Raises:
        MalformedDocumentError: If the text is not well-formed XML
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedDocumentError(str(e), getattr(e, 'position', None)) from e


def _local_name(tag) -> str:
    # Comments and processing instructions carry a callable tag
    if not isinstance(tag, str):
        return ''
    return tag.rsplit('}', 1)[-1]


def iter_descendants(element: ET.Element, tag: str) -> Iterator[ET.Element]:
    """Yield elements named ``tag`` depth-first, starting with ``element`` itself."""
    for node in element.iter():
        if _local_name(node.tag) == tag:
            yield node


def find_descendant(element: ET.Element, tag: str) -> Optional[ET.Element]:
    """Find the first element named ``tag`` in depth-first order."""
    return next(iter_descendants(element, tag), None)


def find_descendant_text(element: ET.Element, tag: str) -> Optional[str]:
    """Text of the first element named ``tag``, or None if it or its text is absent."""
    node = find_descendant(element, tag)
    if node is None:
        return None
    return node.text


def _read_qualifier(element: ET.Element) -> GBQualifier:
    return GBQualifier(
        name=find_descendant_text(element, 'GBQualifier_name'),
        value=find_descendant_text(element, 'GBQualifier_value')
    )


def _read_feature(element: ET.Element) -> GBFeature:
    quals = find_descendant(element, 'GBFeature_quals')
    qualifiers = None
    if quals is not None:
        qualifiers = [_read_qualifier(q) for q in iter_descendants(quals, 'GBQualifier')]

    return GBFeature(
        key=find_descendant_text(element, 'GBFeature_key'),
        qualifiers=qualifiers
    )


def _read_seq(element: ET.Element) -> GBSeq:
    table = find_descendant(element, 'GBSeq_feature-table')
    features = None
    if table is not None:
        features = [_read_feature(f) for f in iter_descendants(table, 'GBFeature')]

    return GBSeq(
        accession_version=find_descendant_text(element, 'GBSeq_accession-version'),
        organism=find_descendant_text(element, 'GBSeq_organism'),
        taxonomy=find_descendant_text(element, 'GBSeq_taxonomy'),
        sequence=find_descendant_text(element, 'GBSeq_sequence'),
        feature_table=features
    )


def read_record_set(tree: ET.Element) -> GBSet:
    """Deserialize the record set of a parsed document.

    The first GBSet in depth-first order is used, wherever it sits in the
    tree. Any further GBSet elements are ignored.

    Args:
        tree: Root element returned by :func:`parse`

    Returns:
        Typed record set with every GBSeq below it, in document order

    Raises:
        RecordLookupError: If the document has no GBSet element
    """
    gbset = find_descendant(tree, 'GBSet')
    if gbset is None:
        raise RecordLookupError("the 'GBSet' node")

    seqs: List[GBSeq] = [_read_seq(node) for node in iter_descendants(gbset, 'GBSeq')]
    logger.debug(f"Read {len(seqs)} GBSeq records")

    return GBSet(seqs=seqs)
