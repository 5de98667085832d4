import pytest

from cabinet.catalog import INGREDIENTS, Catalog
from cabinet.controller import (
    Controller,
    SelectRecipe,
    ToggleIngredient,
    initial_state,
    update,
)


OLD_FASHIONED = ("Whiskey", "Bitters", "Citrus rind", "Sugar")


def makeable(controller: Controller) -> list[str]:
    return [r.name for r in controller.state.makeable]


def not_makeable(controller: Controller) -> list[str]:
    return [r.name for r in controller.state.not_makeable]


@pytest.fixture
def controller() -> Controller:
    return Controller(Catalog())


def test_initial_state(controller: Controller) -> None:
    assert len(controller.state.availability) == 0
    assert controller.state.selected is None
    assert controller.state.selected_recipe is None
    assert makeable(controller) == []
    assert len(not_makeable(controller)) == 4


def test_toggle_makes_old_fashioned(controller: Controller) -> None:
    for id in OLD_FASHIONED:
        controller.toggle(id, True)
    assert makeable(controller) == ["Old Fashioned"]
    assert not_makeable(controller) == ["Martini", "Negroni", "Margarita"]


def test_toggle_sugar_off_again(controller: Controller) -> None:
    for id in OLD_FASHIONED:
        controller.toggle(id, True)
    controller.toggle("Sugar", False)
    assert makeable(controller) == []
    assert "Old Fashioned" in not_makeable(controller)


def test_everything_makeable(controller: Controller) -> None:
    for ingredient in INGREDIENTS:
        controller.dispatch(ToggleIngredient(ingredient.id, True))
    assert makeable(controller) == ["Old Fashioned", "Martini", "Negroni", "Margarita"]
    assert not_makeable(controller) == []


@pytest.mark.parametrize("name", ("Old Fashioned", "Negroni", "Not a recipe"))
def test_select_does_not_change_partition(controller: Controller, name: str) -> None:
    for id in OLD_FASHIONED:
        controller.toggle(id, True)
    before = controller.state

    after = controller.select(name)

    assert after.partition == before.partition
    assert after.availability == before.availability
    assert after.selected == name


def test_selected_recipe_lookup(controller: Controller) -> None:
    controller.select("Martini")
    recipe = controller.state.selected_recipe
    assert recipe is not None
    assert recipe.name == "Martini"

    controller.select("Not a recipe")
    assert controller.state.selected == "Not a recipe"
    assert controller.state.selected_recipe is None


def test_toggle_keeps_selection(controller: Controller) -> None:
    controller.select("Negroni")
    controller.toggle("Gin", True)
    assert controller.state.selected == "Negroni"


def test_unknown_ingredient_is_accepted(controller: Controller) -> None:
    state = controller.toggle("Unobtainium", True)
    assert state.availability.has("Unobtainium")
    assert makeable(controller) == []


def test_update_is_pure() -> None:
    recipes = Catalog().recipes
    state = initial_state(recipes)
    new = update(state, ToggleIngredient("Gin", True))
    assert not state.availability.has("Gin")
    assert new.availability.has("Gin")
    assert new is not state


def test_update_rejects_unknown_events() -> None:
    recipes = Catalog().recipes
    with pytest.raises(TypeError):
        update(initial_state(recipes), "toggle")  # pyright: ignore[reportArgumentType]


def test_select_event_dataclass() -> None:
    recipes = Catalog().recipes
    state = update(initial_state(recipes), SelectRecipe("Margarita"))
    assert state.selected == "Margarita"


def test_update_keeps_the_state_catalog() -> None:
    recipes = Catalog().recipes[:2]
    state = update(initial_state(recipes), SelectRecipe("Negroni"))
    assert state.recipes == recipes
    assert [r.name for r in state.not_makeable] == ["Old Fashioned", "Martini"]
    assert state.selected_recipe is None


@pytest.mark.parametrize(
    "attr", ("availability", "selected", "partition", "recipes")
)
def test_state_is_read_only(controller: Controller, attr: str) -> None:
    with pytest.raises(AttributeError):
        setattr(controller.state, attr, None)


@pytest.mark.parametrize("attr", ("makeable", "not_makeable"))
def test_partition_is_read_only(controller: Controller, attr: str) -> None:
    with pytest.raises(AttributeError):
        setattr(controller.state.partition, attr, ())
