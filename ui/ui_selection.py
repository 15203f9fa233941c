from __future__ import annotations

from typing import Callable

from ui_prefs_io import SelectionStore


class SelectionModel:
    """Ordered set of selected product ids.

    Each mutation saves the ids and then calls every listener, so the grid
    and the chip list are invalidated together.
    """

    def __init__(self, store: SelectionStore | None = None, ids=None) -> None:
        self._store = store
        self._ids: list[int] = []
        for i in ids or []:
            if i not in self._ids:
                self._ids.append(i)
        self._listeners: list[Callable[[], None]] = []

    @property
    def ids(self) -> list[int]:
        return list(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, product_id: int) -> bool:
        return product_id in self._ids

    def contains(self, product_id: int) -> bool:
        return product_id in self._ids

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def replace(self, ids) -> None:
        """Load ids without notifying (used once at startup)."""
        self._ids = []
        for i in ids:
            if i not in self._ids:
                self._ids.append(i)

    def toggle(self, product_id: int) -> bool:
        if product_id in self._ids:
            self._ids.remove(product_id)
            selected = False
        else:
            self._ids.append(product_id)
            selected = True
        self._changed()
        return selected

    def remove(self, product_id: int) -> None:
        self._ids = [i for i in self._ids if i != product_id]
        self._changed()

    def clear(self) -> None:
        self._ids = []
        self._changed()

    def persist(self) -> None:
        if self._store is not None:
            self._store.save(list(self._ids))

    def _changed(self) -> None:
        self.persist()
        for listener in list(self._listeners):
            listener()
