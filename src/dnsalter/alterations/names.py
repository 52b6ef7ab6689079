from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidInputError


def split_name(name: str) -> Tuple[str, str]:
    """
    'a-b.example.com' -> ('a-b', 'example.com').
    The label may be empty or all hyphens; only a missing '.' or an empty
    tail is rejected.
    """
    if not isinstance(name, str):
        raise InvalidInputError(repr(name), "name must be a string")
    label, sep, tail = name.partition(".")
    if not sep:
        raise InvalidInputError(name, "no '.' separating label from tail")
    if not tail:
        raise InvalidInputError(name, "empty tail after label")
    return label, tail


def join_name(label: str, tail: str) -> str:
    return f"{label}.{tail}"
