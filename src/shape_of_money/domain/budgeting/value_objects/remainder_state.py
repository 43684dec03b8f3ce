"""Bookkeeping of which savings items had a remainder link last pass."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional


class RemainderStateTable:
    """
    Per-item flag: did a remainder link exist after the previous pass.

    A remainder link that existed last pass and is missing now was
    deleted by the user. Keyed by budget item id; entries of items that
    disappear are pruned.
    """

    def __init__(self, entries: Optional[Dict[str, bool]] = None):
        self._entries: Dict[str, bool] = {
            item_id: True for item_id, existed in (entries or {}).items() if existed
        }

    def existed(self, item_id: str) -> bool:
        return self._entries.get(item_id, False)

    def mark(self, item_id: str) -> None:
        self._entries[item_id] = True

    def clear(self, item_id: str) -> None:
        self._entries.pop(item_id, None)

    def prune(self, live_item_ids: Iterable[str]) -> None:
        live = set(live_item_ids)
        for item_id in [i for i in self._entries if i not in live]:
            del self._entries[item_id]

    def copy(self) -> RemainderStateTable:
        return RemainderStateTable(dict(self._entries))

    def replace_with(self, other: RemainderStateTable) -> None:
        self._entries = dict(other._entries)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
