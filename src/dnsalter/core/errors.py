from __future__ import annotations

from typing import Optional


class DnsAlterError(Exception):
    """Base class for every error raised by dnsalter."""


class InvalidInputError(DnsAlterError, ValueError):
    """
    A name could not be split into `label.tail`.
    Raised before any cache is touched, so the caller can skip the name.
    """

    def __init__(self, name: str, reason: Optional[str] = None) -> None:
        self.name = name
        self.reason = reason or "expected '<label>.<tail>'"
        super().__init__(f"Invalid name {name!r}: {self.reason}")


class InvalidConfigError(DnsAlterError, ValueError):
    pass


class WordlistError(DnsAlterError, OSError):
    pass
