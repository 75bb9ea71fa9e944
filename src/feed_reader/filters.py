# ABOUTME: Post-parse item filters: item-count limit and recency cutoff.
# ABOUTME: Filters are stateless and compose by conjunction over document positions.

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from feed_reader.models import Item


def as_utc(moment: datetime) -> datetime:
    """Return an aware datetime, reading naive values as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


class Filter(ABC):
    """Restriction applied to the items of a parsed feed."""

    @abstractmethod
    def accepts(self, position: int, item: Item) -> bool:
        """Whether the item at this zero-based document position is kept."""


class Limit(Filter):
    """Keep at most ``count`` items, in document order."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"limit must be non-negative, got {count}")
        self.count = count

    def accepts(self, position: int, item: Item) -> bool:
        return position < self.count

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Limit) and other.count == self.count

    def __hash__(self) -> int:
        return hash((Limit, self.count))

    def __repr__(self) -> str:
        return f"Limit({self.count})"


class ModifiedSince(Filter):
    """Keep items updated strictly after ``since``.

    Items without a date are dropped.
    """

    def __init__(self, since: datetime) -> None:
        self.since = as_utc(since)

    def accepts(self, position: int, item: Item) -> bool:
        if item.updated is None:
            return False
        return as_utc(item.updated) > self.since

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ModifiedSince) and other.since == self.since

    def __hash__(self) -> int:
        return hash((ModifiedSince, self.since))

    def __repr__(self) -> str:
        return f"ModifiedSince({self.since.isoformat()})"


def apply_filters(items: Sequence[Item], filters: Iterable[Filter]) -> list[Item]:
    """Keep the items accepted by every filter, preserving document order."""
    filters = list(filters)
    return [
        item
        for position, item in enumerate(items)
        if all(f.accepts(position, item) for f in filters)
    ]
