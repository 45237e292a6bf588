from jinja2 import Environment

from domain.models import Recipe
from domain.selection import Selection
from domain.view_modes import Collection, ViewMode, view_mode_name


class RecipeListView:
    """Renders whatever the recipe list last handed over."""

    def __init__(
        self,
        *,
        environment: Environment,
        template_name: str = "recipe-list.html",
    ) -> None:
        self.env = environment
        self.name = template_name
        self.recipes: tuple[Recipe, ...] = ()
        self.selection: Selection | None = None

    def __call__(
        self,
        recipes: tuple[Recipe, ...],
        selection: Selection | None,
    ) -> None:
        self.recipes = recipes
        self.selection = selection

    @property
    def selected_index(self) -> int | None:
        return None if self.selection is None else self.selection.index

    def render(self, mode: ViewMode) -> str:
        collection = mode.name if isinstance(mode, Collection) else None
        return self.env.get_template(self.name).render(
            recipes=self.recipes,
            selected_index=self.selected_index,
            mode=view_mode_name(mode),
            collection=collection,
        )
