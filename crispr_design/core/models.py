"""
Data models for crispr_design.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Site:
    """
    One candidate CRISPR target site.

    All coordinates are 1-based and inclusive on the forward strand,
    whichever strand the site was found on.

    For '-' sites both ``pam_site`` and ``grna_sequence`` read 5'->3' on
    the reverse strand, so a CCA on the forward strand is reported as the
    PAM TGG. The web tool's table instead showed the forward-strand bases.

    Attributes:
        position: Leftmost forward coordinate of the PAM
        pam_site: PAM bases, 5'->3' on the site's own strand
        strand: '+' or '-'
        grna_sequence: Spacer sequence, 5'->3' on the site's own strand
        grna_start: First forward coordinate of the spacer
        grna_end: Last forward coordinate of the spacer
        score: Composition score in [0, 100]
    """
    position: int
    pam_site: str
    strand: str
    grna_sequence: str
    grna_start: int
    grna_end: int
    score: int

    @property
    def pam_end(self) -> int:
        """Last forward coordinate of the PAM."""
        return self.position + len(self.pam_site) - 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape returned by the design endpoint."""
        return {
            'position': self.position,
            'pamSite': self.pam_site,
            'grnaSequence': self.grna_sequence,
            'grnaStart': self.grna_start,
            'grnaEnd': self.grna_end,
            'strand': self.strand,
            'score': self.score,
        }

    def __repr__(self) -> str:
        return f"Site({self.strand}{self.position}, pam={self.pam_site}, score={self.score})"
