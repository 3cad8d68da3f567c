"""
crispr_design - PAM site finding and guide RNA design for CRISPR nucleases.
"""

__version__ = "0.1.0"

from .config import (
    DesignConfig,
    NucleaseProfile,
    NucleaseType,
    get_nuclease_profile,
)
from .core.models import Site
from .designer import DesignResult, design_guides
from .exceptions import (
    ConfigurationError,
    CrisprDesignError,
    InvalidSequenceError,
    UnknownProfileError,
)

__all__ = [
    "DesignConfig",
    "NucleaseProfile",
    "NucleaseType",
    "get_nuclease_profile",
    "Site",
    "DesignResult",
    "design_guides",
    "CrisprDesignError",
    "ConfigurationError",
    "UnknownProfileError",
    "InvalidSequenceError",
    "__version__",
]
