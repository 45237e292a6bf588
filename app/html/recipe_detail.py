from jinja2 import Environment
from markupsafe import Markup

from domain.models import Recipe


class RecipeDetail:
    def __init__(
        self,
        recipe: Recipe,
        *,
        environment: Environment,
        template_name: str = "recipe-detail.html",
    ) -> None:
        self.recipe = recipe
        self.env = environment
        self.name = template_name

    @property
    def id(self) -> str | None:
        return self.recipe.id

    @property
    def title(self) -> str:
        return self.recipe.title

    @property
    def content(self) -> str:
        return Markup(self.recipe.html)

    @property
    def collections(self) -> list[str]:
        return sorted(self.recipe.collections)

    def render(self) -> str:
        return self.env.get_template(self.name).render(recipe=self)
