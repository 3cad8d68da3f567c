"""
LWGV genome annotation output.

The text layout is read by the LWGV genome viewer, so the banner, track
and graph lines must not change.
"""

import logging
from pathlib import Path
from typing import Sequence

from ..core.models import Site

logger = logging.getLogger(__name__)

DEFAULT_ANNOTATION_NAME = "CRISPR_Target"
TRACK_INDENT = " " * 8

_RULE = "%" * 72
_BLANK = "%" + " " * 70 + "%"
BANNER = "\n".join([
    _RULE,
    _BLANK,
    "% CRISPR Design Tool - LWGV Annotation File" + " " * 27 + "%",
    _BLANK,
    _RULE,
])


def format_site_tracks(index: int, site: Site) -> str:
    """PAM and gRNA track lines for the site at 1-based ``index``."""
    return (
        f"{TRACK_INDENT}track PAM_{index}_{site.strand} addPairs({site.position}:{site.pam_end})\n"
        f"{TRACK_INDENT}track gRNA_{index}_{site.strand} addPairs({site.grna_start}:{site.grna_end})\n"
    )


def format_score_graph(sites: Sequence[Site], graph_name: str = "CRISPR") -> str:
    """Graph line plotting (position, score) for every site, or '' if none."""
    if not sites:
        return ""
    points = ", ".join(f"{site.position}:{site.score}" for site in sites)
    return f"{TRACK_INDENT}graph {graph_name}_Scores addPoints({points})\n"


def generate_lwgv_annotation(
    sites: Sequence[Site],
    sequence_name: str = DEFAULT_ANNOTATION_NAME,
    graph_name: str = "CRISPR",
) -> str:
    """
    Render sites as an LWGV annotation document.

    Args:
        sites: Sites in the order they should be numbered
        sequence_name: Genome label
        graph_name: Prefix of the score graph name

    Returns:
        Annotation text
    """
    parts = [BANNER, "\n\n", f"begin genome {sequence_name}\n"]

    for index, site in enumerate(sites, start=1):
        parts.append(format_site_tracks(index, site))

    parts.append(format_score_graph(sites, graph_name))
    parts.append(
        "end genome\n"
        "\n"
        "% create the webpage and image for the genome\n"
        f"showGenome({sequence_name})\n"
    )
    return "".join(parts)


def write_lwgv_annotation(
    sites: Sequence[Site],
    output_path: Path,
    sequence_name: str = DEFAULT_ANNOTATION_NAME,
) -> Path:
    """Write an LWGV annotation file. Returns the path written."""
    output_path = Path(output_path)
    with open(output_path, 'w') as f:
        f.write(generate_lwgv_annotation(sites, sequence_name))

    logger.info(f"Wrote LWGV annotation for {len(sites)} sites to {output_path}")

    return output_path
