"""
Primitive edit operations for fuzzy label searches.

Each function maps a batch of labels to every single-edit neighbour over
the ldh alphabet. Strings are immutable, so every emitted candidate is an
independent object; nothing is shared between variants.
"""

from __future__ import annotations

import string
from typing import Iterable, List

LDH_CHARS = string.ascii_lowercase + string.digits + "-"


def additions(labels: Iterable[str], alphabet: str = LDH_CHARS) -> List[str]:
    """Insert every symbol at every position 0..len inclusive."""
    out: List[str] = []
    for s in labels:
        for i in range(len(s) + 1):
            head, tail = s[:i], s[i:]
            out.extend(head + ch + tail for ch in alphabet)
    return out


def deletions(labels: Iterable[str]) -> List[str]:
    """Drop one character at every position; empty results are discarded."""
    out: List[str] = []
    for s in labels:
        for i in range(len(s)):
            d = s[:i] + s[i + 1 :]
            if d:
                out.append(d)
    return out


def substitutions(labels: Iterable[str], alphabet: str = LDH_CHARS) -> List[str]:
    """
    Replace every position with every symbol, including the symbol already
    there (so the unchanged label is emitted once per position).
    """
    out: List[str] = []
    for s in labels:
        for i in range(len(s)):
            head, tail = s[:i], s[i + 1 :]
            out.extend(head + ch + tail for ch in alphabet)
    return out


def edit_rounds(label: str, rounds: int, alphabet: str = LDH_CHARS) -> List[str]:
    """
    Cumulative fuzzing: start from [label] and, `rounds` times, add the
    additions, deletions and substitutions of everything gathered so far.
    Earlier candidates are never dropped, so the result holds every string
    within `rounds` edits of `label` (the label itself included).
    """
    gathered = {label: None}
    for _ in range(rounds):
        current = list(gathered)
        batch = (
            additions(current, alphabet)
            + deletions(current)
            + substitutions(current, alphabet)
        )
        for cand in batch:
            gathered[cand] = None
    return list(gathered)
