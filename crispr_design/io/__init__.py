"""
I/O modules for crispr_design.
"""

from .annotation import (
    generate_lwgv_annotation,
    write_lwgv_annotation,
)
from .ncbi import (
    fetch_ncbi_sequence,
)
from .output import (
    CSV_COLUMNS,
    format_sites_csv,
    sites_to_dataframe,
    write_design_outputs,
    write_sites_csv,
)

__all__ = [
    'generate_lwgv_annotation',
    'write_lwgv_annotation',
    'CSV_COLUMNS',
    'sites_to_dataframe',
    'format_sites_csv',
    'write_sites_csv',
    'write_design_outputs',
    'fetch_ncbi_sequence',
]
