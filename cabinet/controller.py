"""Owns the cabinet for a session and applies events to it."""

from dataclasses import dataclass
import logging
from typing import Iterable, TypeAlias

from cabinet.availability import AvailabilitySet
from cabinet.catalog import Catalog
from cabinet.models import IngredientId, Recipe
from cabinet.partition import Partition, partition


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleIngredient:
    ingredient_id: IngredientId
    present: bool


@dataclass(frozen=True)
class SelectRecipe:
    recipe_name: str


Event: TypeAlias = ToggleIngredient | SelectRecipe


class State:
    """Snapshot handed to the renderer. Never mutated."""

    def __init__(
        self,
        *,
        availability: AvailabilitySet,
        selected: str | None,
        partition: Partition,
        recipes: tuple[Recipe, ...],
    ) -> None:
        self._availability = availability
        self._selected = selected
        self._partition = partition
        self._recipes = recipes

    @property
    def availability(self) -> AvailabilitySet:
        return self._availability

    @property
    def selected(self) -> str | None:
        return self._selected

    @property
    def partition(self) -> Partition:
        return self._partition

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return self._recipes

    @property
    def makeable(self) -> tuple[Recipe, ...]:
        return self.partition.makeable

    @property
    def not_makeable(self) -> tuple[Recipe, ...]:
        return self.partition.not_makeable

    @property
    def selected_recipe(self) -> Recipe | None:
        for recipe in self._recipes:
            if recipe.name == self.selected:
                return recipe
        return None

    def __repr__(self) -> str:
        return (
            f"<State(available={sorted(self.availability.ids)}, "
            f"selected={self.selected}, partition={self.partition})>"
        )


def initial_state(recipes: Iterable[Recipe]) -> State:
    recipes = tuple(recipes)
    availability = AvailabilitySet()
    return State(
        availability=availability,
        selected=None,
        partition=partition(availability, recipes),
        recipes=recipes,
    )


def update(state: State, event: Event) -> State:
    recipes = state.recipes
    availability, selected = state.availability, state.selected

    match event:
        case ToggleIngredient(ingredient_id, present):
            availability = availability.set(ingredient_id, present)
        case SelectRecipe(recipe_name):
            selected = recipe_name
        case _:  # pyright: ignore[reportUnnecessaryComparison]
            raise TypeError(f"Unsupported event: {event!r}")

    # Always re-derive, whatever the event.
    return State(
        availability=availability,
        selected=selected,
        partition=partition(availability, recipes),
        recipes=recipes,
    )


class Controller:
    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = Catalog() if catalog is None else catalog
        self._state = initial_state(self.catalog.recipes)

    @property
    def state(self) -> State:
        return self._state

    def dispatch(self, event: Event) -> State:
        self._state = update(self._state, event)
        logger.debug("%r -> %r", event, self._state)
        return self._state

    def toggle(self, ingredient_id: IngredientId, present: bool) -> State:
        return self.dispatch(ToggleIngredient(ingredient_id, present))

    def select(self, recipe_name: str) -> State:
        return self.dispatch(SelectRecipe(recipe_name))
