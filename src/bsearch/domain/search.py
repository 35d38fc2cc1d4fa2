"""Binary search over sorted integer sequences.

Pure domain functions with no I/O or framework dependencies.

Contents:
    * :data:`ABSENT` - marker returned when a target is not present.
    * :func:`search` - closed-interval binary search.
    * :class:`SearchOutcome` / :func:`lookup` - search result record.
    * :func:`run_demo` - the fixed demonstration lookups.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

#: Returned by :func:`search` when the target does not occur. Never a valid index.
ABSENT: Final[int] = -1

#: Sequence searched by the demonstration.
DEMO_SEQUENCE: Final[tuple[int, ...]] = (1, 3, 5, 7, 9, 11, 13)

#: Targets looked up by the demonstration, in output order.
DEMO_TARGETS: Final[tuple[int, ...]] = (7, 4)


def search(sequence: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ``sequence`` or :data:`ABSENT`.

    ``sequence`` must be sorted in non-descending order. This is not checked:
    an unsorted sequence gives unreliable results but never raises. When
    ``target`` occurs more than once, the index of *some* occurrence is
    returned, not necessarily the first or the last.

    Runs in O(log n) comparisons and O(1) extra space. The sequence is only
    read, so concurrent calls on the same sequence are safe.

    Args:
        sequence: Integers sorted ascending.
        target: Value to locate.

    Returns:
        A 0-based index ``i`` with ``sequence[i] == target``, or ``-1``.

    Examples:
        >>> search([1, 3, 5, 7, 9, 11, 13], 7)
        3
        >>> search([1, 3, 5, 7, 9, 11, 13], 4)
        -1
        >>> search([], 4)
        -1
    """
    low = 0
    high = len(sequence) - 1

    while low <= high:
        # Overflow-safe form of (low + high) // 2.
        mid = low + (high - low) // 2
        value = sequence[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1

    return ABSENT


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """Result of a single lookup.

    Example:
        >>> SearchOutcome(target=4, index=-1).found
        False
    """

    target: int
    index: int

    @property
    def found(self) -> bool:
        return self.index != ABSENT

    def as_dict(self) -> dict[str, int | bool]:
        return {"target": self.target, "index": self.index, "found": self.found}


def lookup(sequence: Sequence[int], target: int) -> SearchOutcome:
    """Search ``sequence`` for ``target`` and wrap the result.

    Example:
        >>> lookup([1, 3, 5], 5)
        SearchOutcome(target=5, index=2)
    """
    return SearchOutcome(target=target, index=search(sequence, target))


def run_demo(
    sequence: Sequence[int] = DEMO_SEQUENCE,
    targets: Iterable[int] = DEMO_TARGETS,
) -> list[SearchOutcome]:
    """Look up each of ``targets`` in ``sequence``, preserving target order.

    Example:
        >>> [outcome.index for outcome in run_demo()]
        [3, -1]
    """
    return [lookup(sequence, target) for target in targets]


__all__ = [
    "ABSENT",
    "DEMO_SEQUENCE",
    "DEMO_TARGETS",
    "SearchOutcome",
    "lookup",
    "run_demo",
    "search",
]
