"""
Sequence manipulation utilities.

Provides the strand operations and input clean-up used by the scanner.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..exceptions import InvalidSequenceError

# Bases the scanner accepts; anything else is stripped by sanitize_sequence
VALID_BASES = frozenset('ACGTN')

_COMPLEMENT = {
    'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G',
    'a': 't', 't': 'a', 'g': 'c', 'c': 'g',
}

_INVALID_PATTERN = re.compile(f"[^{''.join(sorted(VALID_BASES))}]")


def complement(base: str) -> str:
    """Complement a single base. Characters other than A/C/G/T pass through."""
    return _COMPLEMENT.get(base, base)


def reverse_complement(seq: str) -> str:
    """Return reverse complement of DNA sequence.

    Only A, C, G and T (either case) are complemented. Any other character,
    including 'N', keeps its mirrored position unchanged.
    """
    return ''.join(complement(base) for base in reversed(seq))


rev_comp = reverse_complement


def gc_content(seq: str) -> float:
    """Fraction of G/C bases over the full sequence length (0.0 to 1.0)."""
    if not seq:
        return 0.0
    seq = seq.upper()
    return sum(1 for base in seq if base in 'GC') / len(seq)


def sanitize_sequence(raw: str) -> str:
    """Uppercase a raw sequence and strip everything outside A/C/G/T/N.

    Whitespace, digits and FASTA line breaks are all removed.
    """
    if raw is None:
        return ''
    return _INVALID_PATTERN.sub('', raw.upper())


@dataclass(frozen=True)
class FastaRecord:
    """Single FASTA record: identifier, full header line and sequence."""
    name: str
    header: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)


def parse_fasta_text(text: str) -> FastaRecord:
    """Parse the first record of FASTA-formatted text.

    The record name is the first whitespace-delimited token of the header.
    Text without a header line is treated as a bare sequence.

    Raises:
        InvalidSequenceError: If the text contains no sequence lines
    """
    header = ''
    sequence = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith('>'):
            if header or sequence:
                break  # Only read first record
            header = line
            continue
        sequence.append(line)

    seq = re.sub(r'\s', '', ''.join(sequence)).upper()
    if not seq:
        raise InvalidSequenceError("FASTA input contains no sequence")

    name = header[1:].split()[0] if header[1:].strip() else ''
    return FastaRecord(name=name, header=header, sequence=seq)


def read_fasta(path: Union[str, Path]) -> FastaRecord:
    """Read the first record from a FASTA file."""
    path = Path(path)
    if not path.exists():
        raise InvalidSequenceError(f"File not found: {path}")
    with open(path) as f:
        return parse_fasta_text(f.read())
