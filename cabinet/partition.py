from typing import Iterable

from cabinet.availability import AvailabilitySet
from cabinet.models import IngredientId, Recipe


class Partition:
    def __init__(
        self,
        makeable: Iterable[Recipe],
        not_makeable: Iterable[Recipe],
    ) -> None:
        self._makeable = tuple(makeable)
        self._not_makeable = tuple(not_makeable)

    @property
    def makeable(self) -> tuple[Recipe, ...]:
        return self._makeable

    @property
    def not_makeable(self) -> tuple[Recipe, ...]:
        return self._not_makeable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return (
            self.makeable == other.makeable
            and self.not_makeable == other.not_makeable
        )

    def __repr__(self) -> str:
        return (
            f"<Partition(makeable={[r.name for r in self.makeable]}, "
            f"not_makeable={[r.name for r in self.not_makeable]})>"
        )


def is_makeable(recipe: Recipe, availability: AvailabilitySet) -> bool:
    return recipe.required_ingredients <= availability.ids


def missing_ingredients(
    recipe: Recipe,
    availability: AvailabilitySet,
) -> tuple[IngredientId, ...]:
    return tuple(sorted(recipe.required_ingredients - availability.ids))


def partition(availability: AvailabilitySet, recipes: Iterable[Recipe]) -> Partition:
    """Split recipes into makeable and not, keeping catalog order in both."""
    makeable: list[Recipe] = []
    not_makeable: list[Recipe] = []
    for recipe in recipes:
        if is_makeable(recipe, availability):
            makeable.append(recipe)
        else:
            not_makeable.append(recipe)
    return Partition(makeable, not_makeable)
