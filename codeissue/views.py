"""Read-only list view over a list owned by an issue record.

The view forwards reads to the backing list, so it always reflects the
owner's current content. Every mutator raises UnsupportedOperationError.
"""

from collections.abc import Sequence
from typing import Generic, Iterator, List, TypeVar

from codeissue.errors import UnsupportedOperationError

T = TypeVar("T")


class ReadOnlyList(Sequence, Generic[T]):
    """Sequence view that rejects in-place mutation."""

    __slots__ = ("_items",)

    def __init__(self, items: List[T]) -> None:
        self._items = items

    def __getitem__(self, index):
        # Slices are copies, never the backing list
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReadOnlyList({self._items!r})"

    def _reject(self, *args, **kwargs):
        raise UnsupportedOperationError(f"{type(self).__name__} is read-only")

    append = _reject
    insert = _reject
    extend = _reject
    remove = _reject
    pop = _reject
    clear = _reject
    sort = _reject
    reverse = _reject
    __setitem__ = _reject
    __delitem__ = _reject
    __iadd__ = _reject
