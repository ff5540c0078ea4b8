"""Small sequence helpers shared by the graph transforms."""

from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

T = TypeVar("T")


def drop_consecutive_duplicates(
    items: Sequence[T],
    key: Callable[[T], Hashable] = lambda item: item,  # type: ignore[assignment,return-value]
    cyclic: bool = False,
) -> list[T]:
    """Collapse runs of items that share the same key into their first item.

    Args:
        items: Items to filter
        key: Function giving the value items are compared by
        cyclic: If True, also treat the last and first items as neighbours

    Returns:
        New list without consecutive duplicates

    Examples:
        >>> drop_consecutive_duplicates([1, 1, 2, 2, 3, 1])
        [1, 2, 3, 1]
        >>> drop_consecutive_duplicates([1, 1, 2, 2, 3, 1], cyclic=True)
        [1, 2, 3]
    """
    result: list[T] = []
    for item in items:
        if result and key(result[-1]) == key(item):
            continue
        result.append(item)

    while cyclic and len(result) > 1 and key(result[0]) == key(result[-1]):
        result.pop()

    return result
