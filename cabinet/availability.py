from typing import Iterable, Iterator

from cabinet.models import IngredientId


class AvailabilitySet:
    """The ingredients on hand. Immutable, `set` returns a new value."""

    def __init__(self, ids: Iterable[IngredientId] = ()) -> None:
        self._ids = frozenset(ids)

    @property
    def ids(self) -> frozenset[IngredientId]:
        return self._ids

    def has(self, id: IngredientId) -> bool:
        return id in self._ids

    def set(self, id: IngredientId, present: bool) -> "AvailabilitySet":
        if present:
            return AvailabilitySet(self._ids | {id})
        return AvailabilitySet(self._ids - {id})

    def sorted_ids(self, order: Iterable[IngredientId]) -> list[IngredientId]:
        """Ids in the given order, then any leftovers alphabetically."""
        order = list(order)
        known = [i for i in order if i in self._ids]
        extra = sorted(self._ids.difference(order))
        return known + extra

    def __contains__(self, id: object) -> bool:
        return id in self._ids

    def __iter__(self) -> Iterator[IngredientId]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvailabilitySet):
            return NotImplemented
        return self._ids == other._ids

    def __hash__(self) -> int:
        return hash(self._ids)

    def __repr__(self) -> str:
        return f"<AvailabilitySet({sorted(self._ids)})>"
