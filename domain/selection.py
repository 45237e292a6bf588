from datetime import datetime
from typing import NamedTuple, Sequence

from domain.models import Recipe, RecipeId
from domain.view_filter import compute_visible
from domain.view_modes import ViewMode


class Selection(NamedTuple):
    recipe_id: RecipeId
    index: int


def reconcile(
    previous_selection: RecipeId | None,
    visible: Sequence[Recipe],
) -> Selection | None:
    """Where the previously selected recipe now sits in `visible`, if anywhere.

    Matches on id only. A `None` result does not mean the selection is
    forgotten, the caller keeps the id so it can be resolved again once the
    recipe is back in view.
    """
    if previous_selection is None:
        return None
    for index, recipe in enumerate(visible):
        if recipe.id == previous_selection:
            return Selection(previous_selection, index)
    return None


def apply_insertion(
    recipes: Sequence[Recipe],
    new_recipe: Recipe,
    mode: ViewMode,
    now: datetime | None = None,
) -> tuple[tuple[Recipe, ...], Selection | None]:
    """Visible recipes after appending `new_recipe`, with it selected if shown."""
    visible = compute_visible([*recipes, new_recipe], mode, now)
    return visible, reconcile(new_recipe.id, visible)
