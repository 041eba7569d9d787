"""GenBank XML to FASTA conversion tool.

Converts GenBank-format XML (GBSet/GBSeq) into a genome FASTA file and a
peptide FASTA file of translated CDS features.
"""

__version__ = "1.0.0"
__author__ = "Austin P. Morrissey"
