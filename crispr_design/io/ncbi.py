"""
Sequence download from NCBI E-utilities.
"""

import logging
import time
from typing import Optional

import requests

from ..exceptions import InvalidSequenceError, SequenceFetchError
from ..utils.sequence import FastaRecord, parse_fasta_text

logger = logging.getLogger(__name__)

EFETCH_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/efetch.fcgi"


def fetch_ncbi_sequence(
    accession: str,
    retries: int = 3,
    timeout: float = 30,
    session: Optional[requests.Session] = None,
    backoff: float = 1.0,
) -> FastaRecord:
    """
    Fetch a nucleotide sequence from NCBI by accession, with retries.

    Failed attempts are retried with exponential backoff
    (``backoff * 2 ** attempt`` seconds).

    Args:
        accession: NCBI nucleotide accession (e.g. 'NM_000546.6')
        retries: Total number of attempts
        timeout: Per-request timeout in seconds
        session: Optional requests session (reused connection, testing)
        backoff: Base delay in seconds between attempts

    Returns:
        FastaRecord named after the accession

    Raises:
        InvalidSequenceError: If the accession is empty
        SequenceFetchError: If every attempt fails
    """
    accession = (accession or '').strip()
    if not accession:
        raise InvalidSequenceError("Accession must not be empty")

    http = session or requests
    params = {
        'db': 'nucleotide',
        'id': accession,
        'rettype': 'fasta',
        'retmode': 'text',
    }
    attempts = max(1, retries)
    last_error = None

    for attempt in range(attempts):
        try:
            r = http.get(EFETCH_URL, params=params, timeout=timeout)
            r.raise_for_status()
            record = parse_fasta_text(r.text)
            logger.info(f"Fetched {accession} from NCBI ({len(record)} bp)")
            return FastaRecord(name=accession, header=record.header, sequence=record.sequence)
        except (requests.RequestException, InvalidSequenceError) as e:
            last_error = e
            if attempt < attempts - 1:
                delay = backoff * 2 ** attempt
                logger.warning(f"Attempt {attempt + 1} failed for {accession}: {e}; retrying in {delay:g}s")
                time.sleep(delay)

    raise SequenceFetchError(
        f"Failed to fetch sequence {accession} from NCBI after {attempts} attempts: {last_error}"
    )
