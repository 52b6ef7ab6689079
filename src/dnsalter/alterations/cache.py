from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, ItemsView, Iterable, Iterator, List

from .locks import RWLock

# Word -> number of times it was seen as a label prefix (or suffix) this run.
# Seed words start at 0 so they only qualify once observed, unless the
# threshold itself is 0.
#
# NOTE: one coarse lock per cache; sizes are bounded by vocabulary, not by
# the number of names processed.


class FrequencyCache:
    def __init__(self, seed: Iterable[str] = ()) -> None:
        self._lock = RWLock()
        self._counters: Dict[str, int] = {word: 0 for word in seed}

    def update(self, word: str) -> int:
        """Increment the counter for `word` (inserting it at 1) and return it."""
        with self._lock.write_locked():
            count = self._counters.get(word, 0) + 1
            self._counters[word] = count
        return count

    def words_at_least(self, threshold: int) -> List[str]:
        """Words whose count is >= threshold, filtered under the shared lock."""
        with self._lock.read_locked():
            return [w for w, c in self._counters.items() if c >= threshold]

    @contextmanager
    def read_locked(self) -> Iterator[ItemsView[str, int]]:
        """
        Hold the shared lock and expose the live (word, count) view.
        The lock is not reentrant: calling update(), count(), len() or `in`
        on this cache inside the block can deadlock once a writer is queued.
        """
        with self._lock.read_locked():
            yield self._counters.items()

    def count(self, word: str) -> int:
        with self._lock.read_locked():
            return self._counters.get(word, 0)

    def snapshot(self) -> Dict[str, int]:
        with self._lock.read_locked():
            return dict(self._counters)

    def __contains__(self, word: object) -> bool:
        with self._lock.read_locked():
            return word in self._counters

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._counters)

    def __repr__(self) -> str:
        return f"FrequencyCache(words={len(self)})"
