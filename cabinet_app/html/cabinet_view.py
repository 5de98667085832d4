from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from cabinet.catalog import Catalog
from cabinet.controller import State
from cabinet.models import Recipe
from cabinet.partition import missing_ingredients


class RecipeRow:
    def __init__(self, recipe: Recipe, state: State) -> None:
        self.recipe = recipe
        self.missing = missing_ingredients(recipe, state.availability)
        self.selected = recipe.name == state.selected

    @property
    def name(self) -> str:
        return self.recipe.name

    @property
    def ingredients(self) -> list[tuple[str, bool]]:
        """(ingredient, is missing) pairs, alphabetical."""
        return [(i, i in self.missing) for i in sorted(self.recipe.required_ingredients)]

    @property
    def content(self) -> str:
        return Markup(self.recipe.html)


class CabinetView:
    """Renders a controller `State`. No logic beyond reading it."""

    def __init__(
        self,
        state: State,
        *,
        catalog: Catalog,
        environment: Environment,
        template_name: str = "cabinet.html",
    ) -> None:
        self.state = state
        self.catalog = catalog
        self.env = environment
        self.name = template_name

    @property
    def ingredients(self) -> list[tuple[str, bool]]:
        return [
            (id, self.state.availability.has(id)) for id in self.catalog.ingredient_ids
        ]

    @property
    def makeable(self) -> list[RecipeRow]:
        return [RecipeRow(r, self.state) for r in self.state.makeable]

    @property
    def not_makeable(self) -> list[RecipeRow]:
        return [RecipeRow(r, self.state) for r in self.state.not_makeable]

    @property
    def selected(self) -> RecipeRow | None:
        recipe = self.state.selected_recipe
        return None if recipe is None else RecipeRow(recipe, self.state)

    def render(self, **context: Any) -> str:
        return self.env.get_template(self.name).render(cabinet=self, **context)

    def to_dict(self) -> dict[str, Any]:
        return {
            "available": self.state.availability.sorted_ids(
                self.catalog.ingredient_ids
            ),
            "makeable": [r.name for r in self.state.makeable],
            "not_makeable": [r.name for r in self.state.not_makeable],
            "selected": self.state.selected,
        }
