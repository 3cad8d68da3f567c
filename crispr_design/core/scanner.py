"""
PAM site scanning on both strands.

The reverse strand is scanned by running the forward scan over the
reverse complement. Every coordinate is then reflected back onto the
forward strand, and the spacer is cut from the forward sequence before
being reverse complemented.
"""

import logging
from typing import Callable, List, Tuple

from .models import Site
from .motif import PamMotif, translate_motif
from .scoring import score_spacer
from ..utils.sequence import reverse_complement

logger = logging.getLogger(__name__)


def spacer_window(pam_index: int, motif_length: int, spacer_length: int,
                  pam_downstream: bool) -> Tuple[int, int]:
    """Half-open [start, end) spacer window for a PAM at ``pam_index``."""
    if pam_downstream:
        return pam_index - spacer_length, pam_index
    start = pam_index + motif_length
    return start, start + spacer_length


def scan_strand(
    sequence: str,
    motif: PamMotif,
    spacer_length: int,
    pam_downstream: bool,
) -> List[Tuple[int, int, int]]:
    """
    Find motif matches whose spacer window fits inside the sequence.

    Args:
        sequence: Uppercase sequence to scan (one orientation)
        motif: Compiled PAM motif
        spacer_length: Spacer length in nt
        pam_downstream: True if the spacer precedes the PAM

    Returns:
        List of (pam_index, spacer_start, spacer_end) tuples, 0-based with
        half-open spacer windows, in increasing pam_index order
    """
    hits = []
    seq_len = len(sequence)
    for pam_index in motif.find_all(sequence):
        start, end = spacer_window(pam_index, len(motif), spacer_length, pam_downstream)
        if start < 0 or end > seq_len:
            continue
        hits.append((pam_index, start, end))
    return hits


def find_pam_sites(
    sequence: str,
    profile,
    scorer: Callable[[str], int] = score_spacer,
) -> Tuple[List[Site], List[Site]]:
    """
    Scan both strands of a sequence for PAM sites and score their spacers.

    Args:
        sequence: Canonical (uppercase) sequence
        profile: NucleaseProfile supplying the PAM motif, spacer length
            and PAM side
        scorer: Spacer scoring function

    Returns:
        Tuple of (forward_sites, reverse_sites), each in scan order
    """
    motif = translate_motif(profile.pam_pattern)
    spacer_length = profile.spacer_length
    pam_downstream = profile.pam_downstream
    seq_len = len(sequence)
    motif_len = len(motif)

    forward_sites = []
    for pam_index, start, end in scan_strand(sequence, motif, spacer_length, pam_downstream):
        spacer = sequence[start:end]
        forward_sites.append(Site(
            position=pam_index + 1,
            pam_site=sequence[pam_index:pam_index + motif_len],
            strand='+',
            grna_sequence=spacer,
            grna_start=start + 1,
            grna_end=end,
            score=scorer(spacer),
        ))

    rc_sequence = reverse_complement(sequence)
    reverse_sites = []
    for rc_index, rc_start, rc_end in scan_strand(rc_sequence, motif, spacer_length, pam_downstream):
        # Index j on the reverse complement is base seq_len - j - 1 on the forward strand
        pam_left = seq_len - (rc_index + motif_len)
        start = seq_len - rc_end
        end = seq_len - rc_start
        spacer = reverse_complement(sequence[start:end])
        reverse_sites.append(Site(
            position=pam_left + 1,
            pam_site=rc_sequence[rc_index:rc_index + motif_len],
            strand='-',
            grna_sequence=spacer,
            grna_start=start + 1,
            grna_end=end,
            score=scorer(spacer),
        ))

    logger.debug(
        f"{profile.name}: {len(forward_sites)} forward and {len(reverse_sites)} "
        f"reverse sites in {seq_len} bp"
    )
    return forward_sites, reverse_sites
