"""Exceptions raised by the conversion pipeline."""

from typing import Optional


class ConversionError(Exception):
    """Base class for fatal conversion errors."""


class DocumentReadError(ConversionError):
    """The input document could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"couldn't read XML file {path}: {reason}")


class OutputWriteError(ConversionError):
    """An output file could not be created or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"couldn't write to file {path}: {reason}")


class MalformedDocumentError(ConversionError):
    """The input text is not well-formed XML."""

    def __init__(self, reason: str, position: Optional[tuple] = None):
        self.reason = reason
        self.position = position  # (line, column) from the XML parser
        super().__init__(f"couldn't parse XML file: {reason}")


class RecordLookupError(ConversionError):
    """An expected node, field or qualifier is missing from the document."""

    def __init__(self, target: str, accession: Optional[str] = None):
        self.target = target
        self.accession = accession
        message = f"couldn't find {target}"
        if accession:
            message += f" (record: {accession})"
        super().__init__(message)


class FetchError(ConversionError):
    """GenBank XML could not be retrieved from NCBI."""


class ConfigError(ConversionError):
    """The configuration file or environment holds an unusable setting."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"invalid configuration {source}: {reason}")
