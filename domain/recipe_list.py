"""The recipe list, as a viewer sees it.

Owns the active mode and the last recipe the user picked. Every snapshot from
the store and every mode change is recomputed from scratch and handed to the
renderer along with where, if anywhere, the selection now sits.
"""

from datetime import datetime, timezone
import logging
from typing import Callable, Sequence

from domain.models import Recipe, RecipeId
from domain.selection import Selection, apply_insertion, reconcile
from domain.store import RecipeStore
from domain.view_filter import compute_visible
from domain.view_modes import All, Collection, ViewMode


logger = logging.getLogger(__name__)


type Renderer = Callable[[tuple[Recipe, ...], Selection | None], None]
type Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def null_renderer(visible: tuple[Recipe, ...], selection: Selection | None) -> None:
    pass


class RecipeList:
    def __init__(
        self,
        store: RecipeStore,
        *,
        mode: ViewMode | None = None,
        renderer: Renderer | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.store = store
        self.mode: ViewMode = All() if mode is None else mode
        self.renderer = null_renderer if renderer is None else renderer
        self.clock = utc_now if clock is None else clock
        self.selected_recipe_id: RecipeId | None = None
        self.visible: tuple[Recipe, ...] = ()
        self.selection: Selection | None = None
        self.saving = False
        self.subscription = store.subscribe(self.apply)

    def close(self) -> None:
        self.subscription.cancel()

    def now(self) -> datetime:
        try:
            return self.clock()
        except Exception:
            logger.warning("Clock failed, using the current instant.", exc_info=True)
            return utc_now()

    def apply(self, recipes: Sequence[Recipe]) -> None:
        if self.saving:
            return
        visible = compute_visible(recipes, self.mode, self.now())
        self._show(visible, reconcile(self.selected_recipe_id, visible))

    def show_recipes(self, mode: ViewMode) -> None:
        self.mode = mode
        self.apply(self.store.all_recipes)

    def show_recipes_from(self, collection: str) -> None:
        self.show_recipes(Collection(name=collection))

    def select(self, recipe_id: RecipeId) -> bool:
        if recipe_id == self.selected_recipe_id:
            return False
        self.selected_recipe_id = recipe_id
        self._show(self.visible, reconcile(recipe_id, self.visible))
        return True

    def save_recipe(self, recipe: Recipe) -> Recipe:
        """Store `recipe` and select it, rendering once."""
        recipe = self.store.with_id(recipe)
        recipes = self.store.all_recipes
        self.selected_recipe_id = recipe.id
        self.saving = True
        try:
            stored = self.store.add(recipe)
        finally:
            self.saving = False
        if any(r.id == stored.id for r in recipes):
            self.apply(self.store.all_recipes)
        else:
            self._show(*apply_insertion(recipes, stored, self.mode, self.now()))
        return stored

    def _show(self, visible: tuple[Recipe, ...], selection: Selection | None) -> None:
        logger.debug(
            "Showing %d recipes for %s, selection %s", len(visible), self.mode, selection
        )
        self.visible = visible
        self.selection = selection
        self.renderer(visible, selection)
