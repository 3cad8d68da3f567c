"""
Tabular output of design results.

CSV text uses '\\n' line endings and ends with a newline after the last
row; the web tool's export joined rows without a final newline.
"""

from pathlib import Path
from typing import Sequence
import logging

import pandas as pd

from ..core.models import Site
from .annotation import write_lwgv_annotation

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    'Position',
    'Strand',
    'PAM Site',
    'gRNA Sequence',
    'Score',
    'gRNA Start',
    'gRNA End',
]


def sites_to_dataframe(sites: Sequence[Site]) -> pd.DataFrame:
    """One row per site, in the given order."""
    rows = [
        {
            'Position': s.position,
            'Strand': s.strand,
            'PAM Site': s.pam_site,
            'gRNA Sequence': s.grna_sequence,
            'Score': s.score,
            'gRNA Start': s.grna_start,
            'gRNA End': s.grna_end,
        }
        for s in sites
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def format_sites_csv(sites: Sequence[Site]) -> str:
    """Render sites as comma-separated text with a header row."""
    return sites_to_dataframe(sites).to_csv(index=False, lineterminator='\n')


def write_sites_csv(sites: Sequence[Site], output_path: Path) -> Path:
    """
    Write sites to a CSV file.

    Args:
        sites: Sites in result order
        output_path: Path for output CSV

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    sites_to_dataframe(sites).to_csv(output_path, index=False, lineterminator='\n')

    logger.info(f"Wrote {len(sites)} sites to {output_path}")

    return output_path


def write_design_outputs(result, output_dir: Path, prefix: str = "") -> dict:
    """
    Write the CSV table and LWGV annotation for a DesignResult.

    Returns:
        Dict mapping file type ('csv', 'annotation') to path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = {}
    paths['csv'] = write_sites_csv(result.sites, output_dir / f"{prefix}crispr_sites.csv")
    paths['annotation'] = write_lwgv_annotation(
        result.sites,
        output_dir / f"{prefix}crispr_annotation.ann",
        sequence_name=result.sequence_name,
    )
    return paths
