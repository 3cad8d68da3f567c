"""
Guide RNA design entry point.

Takes a raw sequence and a PAM type, and returns every candidate site on
both strands ranked by spacer score.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .config import DEFAULT_SEQUENCE_NAME, NucleaseProfile, NucleaseType, get_nuclease_profile
from .core.models import Site
from .core.scanner import find_pam_sites
from .exceptions import InvalidSequenceError
from .io.annotation import generate_lwgv_annotation
from .utils.sequence import sanitize_sequence

logger = logging.getLogger(__name__)

# Score at or above which a site counts as high quality in summaries
HIGH_QUALITY_SCORE = 80


@dataclass
class DesignResult:
    """Ranked sites for one (sequence, nuclease profile) pair."""
    sequence_name: str
    pam_type: str
    sequence_length: int
    sites: List[Site] = field(default_factory=list)

    @property
    def high_quality_sites(self) -> List[Site]:
        return [s for s in self.sites if s.score >= HIGH_QUALITY_SCORE]

    def to_annotation(self) -> str:
        """Render the sites as an LWGV annotation document."""
        return generate_lwgv_annotation(self.sites, self.sequence_name)

    def to_dict(self, include_annotation: bool = False) -> Dict[str, Any]:
        """Convert to the JSON shape returned by the design endpoint."""
        data = {
            'sites': [s.to_dict() for s in self.sites],
            'sequenceLength': self.sequence_length,
            'pamType': self.pam_type,
        }
        if include_annotation:
            data['lwgvAnnotation'] = self.to_annotation()
        return data

    def print_summary(self, top: int = 10):
        """Print a human-readable summary of the design."""
        print("\n" + "=" * 60)
        print("=== CRISPR Design Summary ===")
        print("=" * 60)

        print(f"\nSequence: {self.sequence_name} ({self.sequence_length} bp)")
        print(f"PAM type: {self.pam_type}")
        print(f"Sites found: {len(self.sites)}")
        print(f"High quality sites (score >= {HIGH_QUALITY_SCORE}): {len(self.high_quality_sites)}")

        if self.sites:
            shown = self.sites[:top]
            print(f"\nTop {len(shown)} sites:")
            for site in shown:
                print(f"  {site.strand} {site.position:>7}  {site.pam_site:<5} "
                      f"{site.grna_sequence}  {site.grna_start}-{site.grna_end}  score={site.score}")
        else:
            print("\n  No CRISPR sites found")

        print()


def assemble_sites(forward_sites: List[Site], reverse_sites: List[Site]) -> List[Site]:
    """Merge both strands and rank by descending score.

    The sort is stable: equal scores keep forward-before-reverse, then
    scan order. Sites are not deduplicated.
    """
    return sorted(forward_sites + reverse_sites, key=lambda s: -s.score)


def design_guides(
    sequence: str,
    pam_type: Union[str, NucleaseType, NucleaseProfile],
    sequence_name: str = DEFAULT_SEQUENCE_NAME,
) -> DesignResult:
    """
    Find and rank candidate guide RNAs in a sequence.

    Args:
        sequence: Raw nucleotide sequence, any case; characters outside
            A/C/G/T/N are stripped first
        pam_type: Profile name (e.g. 'SpCas9'), NucleaseType or a custom
            NucleaseProfile
        sequence_name: Label used in the annotation output

    Returns:
        DesignResult with sites sorted by descending score

    Raises:
        UnknownProfileError: If pam_type is not a known profile
        InvalidSequenceError: If no valid nucleotides remain after
            sanitization
    """
    profile = get_nuclease_profile(pam_type)

    canonical = sanitize_sequence(sequence)
    if not canonical:
        raise InvalidSequenceError("Sequence contains no valid nucleotides (A, C, G, T, N)")

    if sequence and len(canonical) != len(sequence):
        logger.debug(f"Stripped {len(sequence) - len(canonical)} invalid characters from input")

    forward_sites, reverse_sites = find_pam_sites(canonical, profile)
    sites = assemble_sites(forward_sites, reverse_sites)

    logger.info(f"Found {len(sites)} {profile.name} sites in {sequence_name} ({len(canonical)} bp)")

    return DesignResult(
        sequence_name=sequence_name or DEFAULT_SEQUENCE_NAME,
        pam_type=profile.name,
        sequence_length=len(canonical),
        sites=sites,
    )
