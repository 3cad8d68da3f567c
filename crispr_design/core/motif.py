"""
IUPAC motif translation.

A PAM motif such as ``NGG`` or ``TTTV`` becomes a tuple of per-position
base sets. Matching is a literal membership test at each position, so
sequence characters outside A/C/G/T (e.g. 'N') never match.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Tuple

from ..exceptions import InvalidMotifError

IUPAC_CODES = {
    'A': frozenset('A'),
    'C': frozenset('C'),
    'G': frozenset('G'),
    'T': frozenset('T'),
    'N': frozenset('ACGT'),
    'V': frozenset('ACG'),   # not T
    'H': frozenset('ACT'),   # not G
    'D': frozenset('AGT'),   # not C
    'B': frozenset('CGT'),   # not A
    'K': frozenset('GT'),
    'M': frozenset('AC'),
    'R': frozenset('AG'),
    'S': frozenset('CG'),
    'W': frozenset('AT'),
    'Y': frozenset('CT'),
}


@dataclass(frozen=True)
class PamMotif:
    """Compiled PAM motif.

    Attributes:
        pattern: Uppercased IUPAC motif string
        positions: Allowed bases for each motif position
    """
    pattern: str
    positions: Tuple[FrozenSet[str], ...]

    def __len__(self) -> int:
        return len(self.positions)

    def matches_at(self, sequence: str, index: int) -> bool:
        """Check whether the motif matches ``sequence`` starting at ``index``."""
        if index < 0 or index + len(self.positions) > len(sequence):
            return False
        for offset, allowed in enumerate(self.positions):
            if sequence[index + offset] not in allowed:
                return False
        return True

    def find_all(self, sequence: str) -> Iterator[int]:
        """Yield every 0-based start index where the motif matches.

        Overlapping occurrences are all reported, in increasing order.
        """
        for index in range(len(sequence) - len(self.positions) + 1):
            if self.matches_at(sequence, index):
                yield index

    def expand(self) -> Iterator[str]:
        """Enumerate every literal sequence the motif accepts."""
        literals = ['']
        for allowed in self.positions:
            literals = [prefix + base for prefix in literals for base in sorted(allowed)]
        return iter(literals)


def translate_motif(pattern: str) -> PamMotif:
    """Translate an IUPAC motif string into a PamMotif.

    Raises:
        InvalidMotifError: If the motif is empty or contains a character
            outside the IUPAC nucleotide alphabet
    """
    if not pattern:
        raise InvalidMotifError("PAM motif must not be empty")

    pattern = pattern.upper()
    unknown = sorted({c for c in pattern if c not in IUPAC_CODES})
    if unknown:
        raise InvalidMotifError(
            f"Unrecognized IUPAC code(s) {', '.join(repr(c) for c in unknown)} in motif {pattern!r}"
        )

    return PamMotif(
        pattern=pattern,
        positions=tuple(IUPAC_CODES[c] for c in pattern),
    )
