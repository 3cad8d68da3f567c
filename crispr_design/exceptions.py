"""
Exception types raised by crispr_design.

Every error also derives from ValueError.
"""


class CrisprDesignError(ValueError):
    """Base class for all crispr_design errors."""


class ConfigurationError(CrisprDesignError):
    """Invalid nuclease profile, motif or configuration file."""


class UnknownProfileError(ConfigurationError):
    """Requested nuclease profile name is not in the profile table."""

    def __init__(self, name: str, known=None):
        self.name = name
        self.known = list(known or [])
        message = f"Unknown PAM type: {name!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class InvalidMotifError(ConfigurationError):
    """Motif contains a character outside the IUPAC nucleotide alphabet."""


class InvalidSequenceError(CrisprDesignError):
    """Sequence is empty or has no valid nucleotides after sanitization."""


class SequenceFetchError(CrisprDesignError):
    """Remote sequence download failed after all retry attempts."""
