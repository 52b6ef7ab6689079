from __future__ import annotations

from typing import Dict, Iterable, Iterator, List


class StringSet:
    """
    Deduplicating collector for generated names.
    Insertion order is kept only so exports are reproducible; callers must
    not rely on it. Not thread-safe: use one per generator call.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: Dict[str, None] = {}
        self.insert_many(items)

    def insert(self, item: str) -> None:
        self._items[item] = None

    def insert_many(self, items: Iterable[str]) -> None:
        for item in items:
            self._items[item] = None

    def export(self) -> List[str]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
