"""
Utility modules for crispr_design.
"""

from .messages import (
    BufferHandler,
    MessageBuffer,
)
from .sequence import (
    FastaRecord,
    complement,
    gc_content,
    parse_fasta_text,
    read_fasta,
    rev_comp,
    reverse_complement,
    sanitize_sequence,
)

__all__ = [
    'reverse_complement',
    'rev_comp',
    'complement',
    'gc_content',
    'sanitize_sequence',
    'FastaRecord',
    'parse_fasta_text',
    'read_fasta',
    # Debug message buffer
    'MessageBuffer',
    'BufferHandler',
]
