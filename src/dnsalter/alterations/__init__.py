"""
alterations
===========
Domain-name mutation engine.

Given a name like `dev-api1.example.com`, produce plausible neighbours by:
  - swapping hyphen-delimited words for frequently seen prefixes/suffixes,
  - flipping, inserting or removing digits,
  - fuzzing the label within a bounded edit distance (ldh alphabet).

Only the first label is mutated; the tail is carried over verbatim.
No resolution or validation of the generated names happens here.
"""

from .cache import FrequencyCache
from .fuzz import LDH_CHARS, additions, deletions, edit_rounds, substitutions
from .names import join_name, split_name
from .runner import expand_name, expand_names, unique_candidates
from .state import MutationState
from .stringset import StringSet
from .wordlist import DEFAULT_WORDS, load_wordlist, resolve_wordlist

__all__ = [
    "FrequencyCache",
    "MutationState",
    "StringSet",
    "LDH_CHARS",
    "additions",
    "deletions",
    "substitutions",
    "edit_rounds",
    "split_name",
    "join_name",
    "DEFAULT_WORDS",
    "load_wordlist",
    "resolve_wordlist",
    "expand_name",
    "expand_names",
    "unique_candidates",
]
