import logging
from typing import Iterable

from cabinet.models import Ingredient, IngredientId, Recipe


logger = logging.getLogger(__name__)


INGREDIENTS: tuple[Ingredient, ...] = tuple(
    Ingredient(id)
    for id in (
        "Whiskey",
        "Gin",
        "Vodka",
        "Rum",
        "Tequila",
        "Sweet vermouth",
        "Dry vermouth",
        "Campari",
        "Triple sec",
        "Bitters",
        "Sugar",
        "Citrus rind",
        "Lime juice",
        "Olive",
        "Salt",
    )
)


RECIPES: tuple[Recipe, ...] = (
    Recipe(
        name="Old Fashioned",
        required_ingredients={"Whiskey", "Bitters", "Citrus rind", "Sugar"},
        description=(
            "Muddle the **sugar** with a few dashes of **bitters** and a splash "
            "of water. Add ice and the **whiskey**, stir, and finish with a "
            "twist of **citrus rind**."
        ),
    ),
    Recipe(
        name="Martini",
        required_ingredients={"Gin", "Dry vermouth", "Olive"},
        description=(
            "Stir the **gin** and **dry vermouth** over ice until very cold. "
            "Strain into a chilled glass and garnish with an **olive**."
        ),
    ),
    Recipe(
        name="Negroni",
        required_ingredients={"Gin", "Sweet vermouth", "Campari", "Citrus rind"},
        description=(
            "Equal parts **gin**, **sweet vermouth** and **Campari**, stirred "
            "over ice. Garnish with **citrus rind**."
        ),
    ),
    Recipe(
        name="Margarita",
        required_ingredients={"Tequila", "Triple sec", "Lime juice", "Salt"},
        description=(
            "Shake the **tequila**, **triple sec** and **lime juice** with ice. "
            "Strain into a glass with a **salt** rim."
        ),
    ),
)


class CatalogError(Exception):
    pass


class Catalog:
    """Read-only view over the ingredient and recipe catalogs."""

    def __init__(
        self,
        ingredients: Iterable[Ingredient] = INGREDIENTS,
        recipes: Iterable[Recipe] = RECIPES,
    ) -> None:
        self._ingredients = tuple(ingredients)
        self._recipes = tuple(recipes)

    @property
    def ingredients(self) -> tuple[Ingredient, ...]:
        return self._ingredients

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return self._recipes

    @property
    def ingredient_ids(self) -> tuple[IngredientId, ...]:
        return tuple(i.id for i in self._ingredients)

    def recipe(self, name: str) -> Recipe | None:
        for recipe in self._recipes:
            if recipe.name == name:
                return recipe
        return None

    def validate(self) -> None:
        """Raise `CatalogError` if the catalogs are inconsistent."""
        seen: set[IngredientId] = set()
        for ingredient in self._ingredients:
            if ingredient.id in seen:
                raise CatalogError(f"Duplicate ingredient: {ingredient.id}")
            seen.add(ingredient.id)

        names: set[str] = set()
        for recipe in self._recipes:
            if recipe.name in names:
                raise CatalogError(f"Duplicate recipe: {recipe.name}")
            names.add(recipe.name)

            unknown = recipe.required_ingredients - seen
            if unknown:
                raise CatalogError(
                    f"Recipe {recipe.name} uses unknown ingredients: "
                    f"{', '.join(sorted(unknown))}"
                )


def load_catalog() -> Catalog:
    catalog = Catalog()
    catalog.validate()
    logger.info(
        "Loaded %d ingredients and %d recipes.",
        len(catalog.ingredients),
        len(catalog.recipes),
    )
    return catalog
