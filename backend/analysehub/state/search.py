from typing import List, Sequence, TypeVar

from analysehub.models import Metric

T = TypeVar("T")


def _searchable_text(item) -> List[str]:
    # Metrics are matched on their label and description, hierarchy items on their name
    if isinstance(item, Metric):
        return [item.label, item.description]
    return [item.name]


def filter_by_text(items: Sequence[T], query: str) -> List[T]:
    """
    Return the items whose searchable text contains ``query`` (case-insensitive).

    An empty query returns every item. Order is preserved.
    """
    needle = (query or "").lower()
    if not needle:
        return list(items)
    return [
        item for item in items
        if any(needle in text.lower() for text in _searchable_text(item))
    ]
