"""
Core site-finding and scoring modules for crispr_design.
"""

from .models import (
    Site,
)
from .motif import (
    IUPAC_CODES,
    PamMotif,
    translate_motif,
)
from .scanner import (
    find_pam_sites,
    scan_strand,
    spacer_window,
)
from .scoring import (
    ScoreBreakdown,
    count_homopolymer_runs,
    score_breakdown,
    score_spacer,
)

__all__ = [
    # Models
    'Site',
    # Motif
    'IUPAC_CODES',
    'PamMotif',
    'translate_motif',
    # Scanner
    'spacer_window',
    'scan_strand',
    'find_pam_sites',
    # Scoring
    'ScoreBreakdown',
    'score_breakdown',
    'score_spacer',
    'count_homopolymer_runs',
]
