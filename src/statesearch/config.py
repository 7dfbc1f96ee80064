"""Search configuration: open-list discipline and run limits."""

from dataclasses import dataclass
from enum import Enum


class MergeMethod(str, Enum):
    """How a batch of newly discovered nodes enters the open list.

    Attributes:
        PREPEND: New nodes go before every existing entry (depth-first leaning).
        APPEND: New nodes go after every existing entry (breadth-first leaning).
        MERGE: New nodes are merged by value with the open list (best-first).
    """

    PREPEND = "prepend"
    APPEND = "append"
    MERGE = "merge"


@dataclass(frozen=True)
class SearchConfig:
    """Options recognized by the search driver.

    Attributes:
        sort_new_nodes: Sort each batch of new nodes by value before merging.
        merge_method: Open-list insertion discipline. Strings are coerced.
        max_expansions: Stop after this many expansions. ``None`` means no limit.
        show_progress: Display a tqdm progress bar over expansions.
    """

    sort_new_nodes: bool = False
    merge_method: MergeMethod = MergeMethod.PREPEND
    max_expansions: int | None = None
    show_progress: bool = False

    def __post_init__(self) -> None:
        """Normalize ``merge_method`` and validate the expansion limit.

        Raises:
            ValueError: If the merge method is unknown or the limit is negative.
        """
        try:
            method = MergeMethod(self.merge_method)
        except ValueError:
            valid = ", ".join(m.value for m in MergeMethod)
            raise ValueError(f"Unknown merge method {self.merge_method!r}, expected one of: {valid}") from None
        object.__setattr__(self, "merge_method", method)
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError(f"max_expansions must be non-negative, got {self.max_expansions}")
