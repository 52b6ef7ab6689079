"""
Core exports for dnsalter.
"""

from .contracts import (
    ALL_TECHNIQUES,
    DEFAULT_TECHNIQUES,
    ExpansionResult,
    Technique,
)
from .errors import (
    DnsAlterError,
    InvalidConfigError,
    InvalidInputError,
    WordlistError,
)

__all__ = [
    "Technique",
    "ALL_TECHNIQUES",
    "DEFAULT_TECHNIQUES",
    "ExpansionResult",
    "DnsAlterError",
    "InvalidInputError",
    "InvalidConfigError",
    "WordlistError",
]
