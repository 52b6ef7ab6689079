from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Technique(str, Enum):
    FLIP_WORDS = "flip-words"
    FLIP_NUMBERS = "flip-numbers"
    APPEND_NUMBERS = "append-numbers"
    ADD_SUFFIX_WORD = "add-suffix-word"
    ADD_PREFIX_WORD = "add-prefix-word"
    FUZZY_LABEL = "fuzzy-label"


ALL_TECHNIQUES: Tuple[Technique, ...] = tuple(Technique)

# Fuzzing grows with alphabet * length per round; callers opt in explicitly.
DEFAULT_TECHNIQUES: Tuple[Technique, ...] = tuple(
    t for t in Technique if t is not Technique.FUZZY_LABEL
)


@dataclass(frozen=True)
class ExpansionResult:
    """
    Candidates generated for one input name, keyed by technique.
    `error` is set (and `candidates` left empty) when the name was malformed.
    """

    name: str
    candidates: Dict[Technique, List[str]] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def all_candidates(self) -> List[str]:
        seen: set[str] = set()
        out: List[str] = []
        for names in self.candidates.values():
            for n in names:
                if n not in seen:
                    seen.add(n)
                    out.append(n)
        return out
