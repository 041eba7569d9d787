"""Loading of GenBank XML documents from disk."""

import logging
from pathlib import Path
from typing import Union

from .errors import DocumentReadError

logger = logging.getLogger(__name__)


def load_document(file_path: Union[str, Path]) -> str:
    """
    Read an entire XML document into memory.

    Args:
        file_path: Path to the GenBank XML file

    Returns:
        File contents as text

    Raises:
        DocumentReadError: If the file is missing, unreadable or not UTF-8
    """
    path = Path(file_path)

    try:
        # utf-8-sig drops a leading byte order mark if present
        with open(path, 'r', encoding='utf-8-sig') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(str(path), str(e)) from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text
