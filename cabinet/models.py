from typing import TypeAlias
import markdown2  # pyright: ignore[reportMissingTypeStubs]


IngredientId: TypeAlias = str


class Ingredient:
    def __init__(self, id: IngredientId) -> None:
        self._id = id

    @property
    def id(self) -> IngredientId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<Ingredient(id={self.id})>"

    def __str__(self) -> str:
        return self.id


class Recipe:
    def __init__(
        self,
        *,
        name: str,
        required_ingredients: frozenset[IngredientId] | set[IngredientId],
        description: str,
    ) -> None:
        self._name = name
        self._required = frozenset(required_ingredients)
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def required_ingredients(self) -> frozenset[IngredientId]:
        return self._required

    @property
    def description(self) -> str:
        return self._description

    @property
    def html(self) -> str:
        return markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.description
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return (
            self.name == other.name
            and self.required_ingredients == other.required_ingredients
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((self.name, self.required_ingredients))

    def __repr__(self) -> str:
        return f"<Recipe(name={self.name})>"

