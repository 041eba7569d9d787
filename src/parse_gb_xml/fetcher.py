"""Retrieval of GenBank XML records from NCBI."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from Bio import Entrez

from .errors import FetchError

logger = logging.getLogger(__name__)


class GenBankFetcher:
    """Fetches GenBank records as XML through NCBI Entrez efetch."""

    def __init__(self, email: Optional[str] = None, api_key: Optional[str] = None,
                 database: str = "nuccore"):
        """Initialize the fetcher.

        Args:
            email: Email for NCBI Entrez (required by NCBI guidelines)
            api_key: Optional NCBI API key for increased rate limits
            database: Entrez database to fetch from
        """
        self.email = email or "user@example.com"
        self.api_key = api_key
        self.database = database

        Entrez.email = self.email
        if api_key:
            Entrez.api_key = api_key

    def fetch(self, accessions: List[str]) -> str:
        """Fetch records for accessions as one GenBank XML document.

        All accessions go into a single request so the result holds a single
        GBSet, e.g. ``efetch.fcgi?db=nuccore&id=A,B,C&rettype=gb&retmode=xml``.

        Args:
            accessions: Accession numbers to fetch

        Returns:
            GenBank XML text

        Raises:
            FetchError: If no accessions are given or the request fails
        """
        if not accessions:
            raise FetchError("no accessions given")

        logger.info(f"Fetching {len(accessions)} records from {self.database}")

        try:
            handle = Entrez.efetch(
                db=self.database,
                id=",".join(accessions),
                rettype="gb",
                retmode="xml"
            )
            try:
                data = handle.read()
            finally:
                handle.close()
        except Exception as e:
            raise FetchError(f"Failed to fetch GenBank records {', '.join(accessions)}: {e}") from e

        # XML responses may come back as bytes
        if isinstance(data, bytes):
            data = data.decode('utf-8')

        logger.debug(f"Fetched {len(data)} characters of XML")
        return data

    def fetch_to_file(self, accessions: List[str], output_path: Union[str, Path]) -> Path:
        """Fetch records and save the XML to a file.

        Raises:
            FetchError: If the request fails or the file cannot be written
        """
        text = self.fetch(accessions)
        path = Path(output_path)

        try:
            path.write_text(text, encoding='utf-8')
        except OSError as e:
            raise FetchError(f"couldn't write to file {path}: {e}") from e

        logger.info(f"Saved GenBank XML to {path}")
        return path
