"""
Nuclease profiles and run configuration for crispr_design.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union
import re
import yaml

from .core.motif import translate_motif
from .exceptions import ConfigurationError, InvalidSequenceError, UnknownProfileError
from .utils.sequence import FastaRecord, read_fasta, sanitize_sequence


DEFAULT_SEQUENCE_NAME = "Target_Sequence"
DEFAULT_PAM_TYPE = "SpCas9"

# Pasted sequence text: IUPAC letters, digits (GenBank-style numbering),
# whitespace, gaps and stops
DNA_PATTERN = re.compile(r'^[ACGTUNRYKMSWBDHVacgtunrykmswbdhv0-9\s*\-]+$')


def is_dna_sequence(s: str) -> bool:
    """Check if string looks like pasted sequence text (not a file path)."""
    return bool(s) and bool(DNA_PATTERN.match(s))


def load_sequence_input(value: str) -> FastaRecord:
    """
    Load sequence input - can be either a DNA string or a FASTA file path.

    An existing file is read as FASTA and yields its first record, named
    after the header's first token. Otherwise sequence text is sanitized
    (characters outside A/C/G/T/N dropped) into a record with an empty name.

    Raises:
        InvalidSequenceError: If the value is neither a readable file nor
            sequence text with at least one valid nucleotide
    """
    value = (value or '').strip()
    if not value:
        raise InvalidSequenceError("No sequence provided")

    path = Path(value)
    try:
        is_file = path.is_file()
    except OSError as e:
        # e.g. a pasted sequence longer than the filesystem's name limit
        if not is_dna_sequence(value):
            raise InvalidSequenceError(f"Cannot read sequence input: {e}") from e
        is_file = False

    if is_file:
        return read_fasta(path)

    if not is_dna_sequence(value):
        raise InvalidSequenceError(f"File not found: {value}")

    seq = sanitize_sequence(value)
    if not seq:
        raise InvalidSequenceError("Sequence contains no valid nucleotides (A, C, G, T, N)")

    return FastaRecord(name='', header='', sequence=seq)


def parse_sequence_input(value: str) -> str:
    """
    Parse sequence input - can be either a DNA string or a FASTA file path.

    Args:
        value: Either a DNA sequence string or path to a FASTA file

    Returns:
        The DNA sequence (uppercase)

    Examples:
        >>> parse_sequence_input("ATCGATCG")
        'ATCGATCG'
    """
    return load_sequence_input(value).sequence


class NucleaseType(Enum):
    """Supported CRISPR nucleases, keyed by their profile name."""
    SPCAS9 = "SpCas9"
    SPCAS9_VRQR = "SpCas9-VRQR"
    XCAS9 = "xCas9"
    CAS12A = "Cas12a"
    CAS12F = "Cas12f"


@dataclass(frozen=True)
class NucleaseProfile:
    """PAM requirements and spacer geometry for one nuclease."""
    name: str
    pam_pattern: str
    spacer_length: int
    pam_position: str  # '3prime' (PAM after spacer) or '5prime' (PAM before spacer)

    def __post_init__(self):
        if self.pam_position not in ('3prime', '5prime'):
            raise ConfigurationError(
                f"pam_position must be '3prime' or '5prime', got {self.pam_position!r}"
            )
        if self.spacer_length <= 0:
            raise ConfigurationError(f"spacer_length must be positive, got {self.spacer_length}")
        # Fail fast on a motif that would not translate
        translate_motif(self.pam_pattern)

    @property
    def pam_downstream(self) -> bool:
        """True when the PAM sits 3' of the spacer (Cas9 family)."""
        return self.pam_position == '3prime'

    @classmethod
    def cas9(cls, name: str = "SpCas9", pam_pattern: str = "NGG") -> 'NucleaseProfile':
        """Cas9-family profile: 20 nt spacer followed by the PAM."""
        return cls(name=name, pam_pattern=pam_pattern, spacer_length=20, pam_position="3prime")

    @classmethod
    def cas12(cls, name: str = "Cas12a", pam_pattern: str = "TTTV") -> 'NucleaseProfile':
        """Cas12-family profile: PAM followed by a 23 nt spacer."""
        return cls(name=name, pam_pattern=pam_pattern, spacer_length=23, pam_position="5prime")


NUCLEASE_PROFILES: Dict[NucleaseType, NucleaseProfile] = {
    NucleaseType.SPCAS9: NucleaseProfile.cas9("SpCas9", "NGG"),
    NucleaseType.SPCAS9_VRQR: NucleaseProfile.cas9("SpCas9-VRQR", "NGA"),
    NucleaseType.XCAS9: NucleaseProfile.cas9("xCas9", "NG"),
    NucleaseType.CAS12A: NucleaseProfile.cas12("Cas12a", "TTTV"),
    NucleaseType.CAS12F: NucleaseProfile.cas12("Cas12f", "TTTN"),
}


def profile_names():
    return [t.value for t in NUCLEASE_PROFILES]


def get_nuclease_profile(name: Union[str, NucleaseType, NucleaseProfile]) -> NucleaseProfile:
    """Look up a nuclease profile by name (case-insensitive) or enum member.

    A NucleaseProfile instance is returned unchanged so callers can supply
    custom profiles.

    Raises:
        UnknownProfileError: If the name is not in the profile table
    """
    if isinstance(name, NucleaseProfile):
        return name
    if isinstance(name, NucleaseType):
        return NUCLEASE_PROFILES[name]

    key = (name or '').strip().lower()
    for nuclease_type, profile in NUCLEASE_PROFILES.items():
        if key in (nuclease_type.value.lower(), nuclease_type.name.lower()):
            return profile

    raise UnknownProfileError(name, known=profile_names())


CONFIG_TEMPLATE = '''# crispr-design configuration template
# Edit this file and run: crispr-design design --config <this file>

# Target sequence: DNA string or FASTA file path
sequence: target.fasta
# ...or fetch from NCBI instead
# accession: NM_000546.6

# Nuclease: SpCas9, SpCas9-VRQR, xCas9, Cas12a, Cas12f
pam_type: SpCas9

# Label used in the annotation file (default: FASTA header or accession)
# sequence_name: Target_Sequence

# Output directory for crispr_sites.csv and crispr_annotation.ann
output_dir: ./results

# NCBI download settings
ncbi_retries: 3
ncbi_timeout: 30

# Keep the last N log messages and print them after the run
debug: false
debug_capacity: 100
'''


@dataclass
class DesignConfig:
    """Settings for one design run."""
    sequence: Optional[str] = None
    accession: Optional[str] = None
    pam_type: str = DEFAULT_PAM_TYPE
    sequence_name: Optional[str] = None  # falls back to the FASTA record name
    output_dir: Path = Path('./results')

    # NCBI fetch options
    ncbi_retries: int = 3
    ncbi_timeout: float = 30

    # Debug message buffer
    debug: bool = False
    debug_capacity: int = 100

    @property
    def profile(self) -> NucleaseProfile:
        return get_nuclease_profile(self.pam_type)

    @classmethod
    def from_dict(cls, data: Dict) -> 'DesignConfig':
        """Create from dictionary, validating the PAM type."""
        config = cls(
            sequence=data.get('sequence'),
            accession=data.get('accession'),
            pam_type=data.get('pam_type', DEFAULT_PAM_TYPE),
            sequence_name=data.get('sequence_name'),
            output_dir=Path(data.get('output_dir', './results')),
            ncbi_retries=int(data.get('ncbi_retries', 3)),
            ncbi_timeout=float(data.get('ncbi_timeout', 30)),
            debug=bool(data.get('debug', False)),
            debug_capacity=int(data.get('debug_capacity', 100)),
        )
        # Unknown PAM types are rejected at load time
        config.pam_type = config.profile.name
        return config

    @classmethod
    def from_yaml(cls, path: Path) -> 'DesignConfig':
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")
        return cls.from_dict(data)
