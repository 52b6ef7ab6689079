from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..config import Settings
from ..core.contracts import Technique
from ..core.errors import InvalidConfigError
from .cache import FrequencyCache
from .fuzz import edit_rounds
from .names import join_name, split_name
from .stringset import StringSet
from .wordlist import resolve_wordlist

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def _first_digit(label: str) -> int:
    for i, ch in enumerate(label):
        if ch in _DIGITS:
            return i
    return -1


def _last_digit(label: str) -> int:
    for i in range(len(label) - 1, -1, -1):
        if label[i] in _DIGITS:
            return i
    return -1


class MutationState:
    """
    Shared word-frequency state plus the six name generators.

    One instance is meant to be shared by every worker of a scan: the
    prefix/suffix caches accumulate how often each hyphen-delimited word
    is seen, and the word-based generators substitute the words that have
    been seen at least `min_for_word_flip` times. Independent scans should
    use independent instances.
    """

    def __init__(
        self,
        wordlist: Iterable[str] = (),
        *,
        min_for_word_flip: int = 0,
        edit_distance: int = 0,
    ) -> None:
        if min_for_word_flip < 0:
            raise InvalidConfigError(
                f"min_for_word_flip must be >= 0, got {min_for_word_flip}"
            )
        if edit_distance < 0:
            raise InvalidConfigError(
                f"edit_distance must be >= 0, got {edit_distance}"
            )
        words = list(wordlist)
        self._min_for_word_flip = int(min_for_word_flip)
        self._edit_distance = int(edit_distance)
        self.prefixes = FrequencyCache(words)
        self.suffixes = FrequencyCache(words)
        self._generators: Dict[Technique, Callable[[str], List[str]]] = {
            Technique.FLIP_WORDS: self.flip_words,
            Technique.FLIP_NUMBERS: self.flip_numbers,
            Technique.APPEND_NUMBERS: self.append_numbers,
            Technique.ADD_SUFFIX_WORD: self.add_suffix_word,
            Technique.ADD_PREFIX_WORD: self.add_prefix_word,
            Technique.FUZZY_LABEL: self.fuzzy_label_searches,
        }

    @classmethod
    def from_settings(
        cls, settings: Settings, wordlist: Optional[Iterable[str]] = None
    ) -> "MutationState":
        words = (
            list(wordlist)
            if wordlist is not None
            else resolve_wordlist(settings.wordlist)
        )
        return cls(
            words,
            min_for_word_flip=settings.min_for_word_flip,
            edit_distance=settings.edit_distance,
        )

    @property
    def min_for_word_flip(self) -> int:
        return self._min_for_word_flip

    @property
    def edit_distance(self) -> int:
        return self._edit_distance

    # ---------- dispatch ----------

    def generator(self, technique: Technique) -> Callable[[str], List[str]]:
        return self._generators[Technique(technique)]

    def generate(self, technique: Technique, name: str) -> List[str]:
        return self.generator(technique)(name)

    # ---------- word flips ----------

    def flip_words(self, name: str) -> List[str]:
        """
        Swap the first and last hyphen-delimited words of the label for
        cached prefixes/suffixes. Both words are counted first, so with a
        threshold <= 1 the input name is always part of the output.
        """
        label, tail = split_name(name)
        parts = label.split("-")
        if len(parts) < 2:
            return []

        names = StringSet()

        after_pre = "-".join(parts[1:])
        self.prefixes.update(parts[0])
        with self.prefixes.read_locked() as items:
            for word, count in items:
                if count >= self._min_for_word_flip:
                    names.insert(join_name(f"{word}-{after_pre}", tail))

        before_post = "-".join(parts[:-1])
        self.suffixes.update(parts[-1])
        with self.suffixes.read_locked() as items:
            for word, count in items:
                if count >= self._min_for_word_flip:
                    names.insert(join_name(f"{before_post}-{word}", tail))

        logger.debug("flip_words %s -> %d names", name, len(names))
        return names.export()

    # ---------- numbers ----------

    def flip_numbers(self, name: str) -> List[str]:
        """
        Flip the first digit of the label through 0-9 (and remove it), then
        flip/remove the last digit found after it. Labels left empty by a
        removal are skipped.
        """
        label, tail = split_name(name)
        first = _first_digit(label)
        if first < 0:
            return []

        names = StringSet()
        head, rest = label[:first], label[first + 1 :]
        for d in _DIGITS:
            names.insert_many(
                self._second_number_flip(head + d + rest, tail, first + 1)
            )

        # first digit removed: the second flip may land anywhere
        names.insert_many(self._second_number_flip(head + rest, tail, None))

        logger.debug("flip_numbers %s -> %d names", name, len(names))
        return names.export()

    @staticmethod
    def _second_number_flip(
        label: str, tail: str, min_index: Optional[int]
    ) -> List[str]:
        """
        Flip/remove the last digit of `label` if it sits at or after
        `min_index`; None means no restriction. Otherwise `label` is final.
        """
        last = _last_digit(label)
        if last < 0 or (min_index is not None and last < min_index):
            return [join_name(label, tail)] if label else []

        head, rest = label[:last], label[last + 1 :]
        out = [join_name(head + d + rest, tail) for d in _DIGITS]
        if head + rest:
            out.append(join_name(head + rest, tail))
        return out

    def append_numbers(self, name: str) -> List[str]:
        label, tail = split_name(name)
        label = label.strip("-")
        if not label:
            return []

        names = StringSet()
        for d in _DIGITS:
            names.insert_many(self._add_suffix(label, tail, d))
        return names.export()

    # ---------- word appends (read-only on the caches) ----------

    def add_suffix_word(self, name: str) -> List[str]:
        label, tail = split_name(name)
        label = label.rstrip("-")
        if not label:
            return []

        names = StringSet()
        for word in self.suffixes.words_at_least(self._min_for_word_flip):
            names.insert_many(self._add_suffix(label, tail, word))
        logger.debug("add_suffix_word %s -> %d names", name, len(names))
        return names.export()

    def add_prefix_word(self, name: str) -> List[str]:
        label, tail = split_name(name)
        label = label.lstrip("-")
        if not label:
            return []

        names = StringSet()
        for word in self.prefixes.words_at_least(self._min_for_word_flip):
            names.insert_many(self._add_prefix(label, tail, word))
        logger.debug("add_prefix_word %s -> %d names", name, len(names))
        return names.export()

    @staticmethod
    def _add_suffix(label: str, tail: str, suffix: str) -> List[str]:
        return [
            join_name(label + suffix, tail),
            join_name(f"{label}-{suffix}", tail),
        ]

    @staticmethod
    def _add_prefix(label: str, tail: str, prefix: str) -> List[str]:
        return [
            join_name(prefix + label, tail),
            join_name(f"{prefix}-{label}", tail),
        ]

    # ---------- fuzzing ----------

    def fuzzy_label_searches(self, name: str) -> List[str]:
        """
        Every label within `edit_distance` insertions, deletions or
        substitutions (ldh alphabet) of the input label, hyphen-trimmed.
        """
        label, tail = split_name(name)

        names = StringSet()
        for alt in edit_rounds(label, self._edit_distance):
            alt = alt.strip("-")
            if alt:
                names.insert(join_name(alt, tail))

        logger.debug(
            "fuzzy_label_searches %s (distance=%d) -> %d names",
            name,
            self._edit_distance,
            len(names),
        )
        return names.export()

    def __repr__(self) -> str:
        return (
            f"MutationState(min_for_word_flip={self._min_for_word_flip}, "
            f"edit_distance={self._edit_distance}, "
            f"prefixes={len(self.prefixes)}, suffixes={len(self.suffixes)})"
        )
