"""Open-list ordering disciplines.

The open list holds node indices in the order the driver will pop them.
``MERGE`` assumes the existing list is sorted by value and walks both
sequences once; a relaxed open node keeps its position until the next
merge walk passes over it.
"""

from collections import deque
from collections.abc import Callable, Iterator

from statesearch.config import MergeMethod

ValueOf = Callable[[int], float]


def sort_batch(batch: list[int], value_of: ValueOf) -> list[int]:
    """Sort a batch of new nodes by value, keeping generation order on ties."""
    return sorted(batch, key=value_of)


def merge_by_value(new: list[int], existing: list[int], value_of: ValueOf) -> list[int]:
    """Merge two value-ordered index lists into one ascending list.

    On equal values the entry from ``new`` comes first.

    Args:
        new: Newly discovered node indices.
        existing: Current open-list contents.
        value_of: Returns the current value of a node index.

    Returns:
        Merged list.
    """
    merged: list[int] = []
    i = j = 0
    while i < len(new) and j < len(existing):
        if value_of(existing[j]) < value_of(new[i]):
            merged.append(existing[j])
            j += 1
        else:
            merged.append(new[i])
            i += 1
    merged.extend(new[i:])
    merged.extend(existing[j:])
    return merged


class OpenList:
    """Frontier of open nodes for one search run.

    Attributes:
        method: Insertion discipline for new batches.
    """

    def __init__(self, method: MergeMethod, value_of: ValueOf) -> None:
        self.method = MergeMethod(method)
        self._value_of = value_of
        self._items: deque[int] = deque()

    def push_batch(self, batch: list[int]) -> None:
        """Insert a batch of new node indices according to ``method``."""
        if not batch:
            return
        if self.method is MergeMethod.PREPEND:
            self._items.extendleft(reversed(batch))
        elif self.method is MergeMethod.APPEND:
            self._items.extend(batch)
        else:
            self._items = deque(merge_by_value(batch, list(self._items), self._value_of))

    def pop(self) -> int:
        """Remove and return the first node index.

        Raises:
            IndexError: If the open list is empty.
        """
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)
