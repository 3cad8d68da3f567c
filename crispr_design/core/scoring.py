"""
Spacer composition scoring.

Every spacer starts at 100 and loses points for:

- GC content outside 40-60%: -20
- a poly-T run (TTTT): -30
- each position starting a homopolymer triple (e.g. AAA): -10 per triple,
  overlapping triples counted separately

The score is floored at 0.
"""

from dataclasses import dataclass

from ..utils.sequence import gc_content

MAX_SCORE = 100

GC_MIN = 0.40
GC_MAX = 0.60
GC_PENALTY = 20

POLY_T = 'TTTT'
POLY_T_PENALTY = 30

HOMOPOLYMER_LENGTH = 3
HOMOPOLYMER_PENALTY = 10


@dataclass(frozen=True)
class ScoreBreakdown:
    """Individual penalties applied to one spacer."""
    gc_content: float
    gc_penalty: int = 0
    poly_t_penalty: int = 0
    homopolymer_runs: int = 0

    @property
    def homopolymer_penalty(self) -> int:
        return self.homopolymer_runs * HOMOPOLYMER_PENALTY

    @property
    def total_penalty(self) -> int:
        return self.gc_penalty + self.poly_t_penalty + self.homopolymer_penalty

    @property
    def score(self) -> int:
        return max(0, MAX_SCORE - self.total_penalty)


def count_homopolymer_runs(spacer: str, length: int = HOMOPOLYMER_LENGTH) -> int:
    """Count start positions of ``length`` identical consecutive bases.

    Overlapping runs count separately: AAAA contains two triples.
    """
    count = 0
    for i in range(len(spacer) - length + 1):
        window = spacer[i:i + length]
        if window.count(window[0]) == length:
            count += 1
    return count


def score_breakdown(spacer: str) -> ScoreBreakdown:
    """Compute the penalties for a spacer sequence."""
    spacer = spacer.upper()
    gc = gc_content(spacer)

    return ScoreBreakdown(
        gc_content=gc,
        gc_penalty=GC_PENALTY if (gc < GC_MIN or gc > GC_MAX) else 0,
        poly_t_penalty=POLY_T_PENALTY if POLY_T in spacer else 0,
        homopolymer_runs=count_homopolymer_runs(spacer),
    )


def score_spacer(spacer: str) -> int:
    """Score a spacer sequence, 0 (worst) to 100 (best)."""
    return score_breakdown(spacer).score
