"""Output writing for FASTA records."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


class OutputWriter:
    """Writes formatted FASTA blocks to files."""

    def __init__(self, encoding: str = 'utf-8'):
        """
        Initialize the writer.

        Args:
            encoding: Text encoding of the output files
        """
        self.encoding = encoding
        self.written: List[Dict[str, Any]] = []

    def write(self, records: Sequence[str], output_path: Union[str, Path]) -> None:
        """
        Write records to a file, creating or truncating it.

        Records are separated by a single newline and the file ends with a
        trailing newline. A partially written file is left in place on error.

        Args:
            records: Formatted FASTA blocks
            output_path: Destination file

        Raises:
            OutputWriteError: If the file cannot be created or written
        """
        path = Path(output_path)

        try:
            with open(path, 'w', encoding=self.encoding, newline='') as f:
                f.write('\n'.join(records))
                f.write('\n')
        except OSError as e:
            raise OutputWriteError(str(path), str(e)) from e

        self.written.append({'path': str(path), 'records': len(records)})
        logger.info(f"Wrote {len(records)} records to {path}")

    def get_statistics(self) -> Dict[str, Any]:
        """Get counts of files and records written so far."""
        return {
            'files_written': len(self.written),
            'records_written': sum(entry['records'] for entry in self.written),
            'files': list(self.written)
        }
