"""Data models for the GenBank XML conversion tool."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class GBQualifier:
    """A name/value pair attached to a feature."""

    name: Optional[str] = None
    value: Optional[str] = None  # Valueless qualifiers (e.g. /pseudo) exist


@dataclass
class GBFeature:
    """An annotated region of a GenBank record."""

    key: Optional[str] = None
    qualifiers: Optional[List[GBQualifier]] = None  # None when GBFeature_quals is absent

    @property
    def is_cds(self) -> bool:
        """Check if this is a coding sequence feature."""
        return self.key == "CDS"

    def qualifier_map(self) -> Dict[str, Optional[str]]:
        """Build an ordered name -> value mapping of the qualifiers.

        The first occurrence of a name wins; later duplicates are ignored.
        """
        mapping: Dict[str, Optional[str]] = {}
        for qualifier in self.qualifiers or []:
            if qualifier.name is not None and qualifier.name not in mapping:
                mapping[qualifier.name] = qualifier.value
        return mapping


@dataclass
class GBSeq:
    """One sequence entry of a GenBank record set."""

    accession_version: Optional[str] = None
    organism: Optional[str] = None
    taxonomy: Optional[str] = None
    sequence: Optional[str] = None
    feature_table: Optional[List[GBFeature]] = None  # None when GBSeq_feature-table is absent

    @property
    def cds_features(self) -> List[GBFeature]:
        """CDS features in document order."""
        return [feature for feature in self.feature_table or [] if feature.is_cds]


@dataclass
class GBSet:
    """The record set container of a GenBank XML document."""

    seqs: List[GBSeq] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Formatted FASTA blocks produced from one document."""

    genomes: List[str]
    peptides: List[str]

    @property
    def genome_count(self) -> int:
        return len(self.genomes)

    @property
    def peptide_count(self) -> int:
        return len(self.peptides)
