from enum import Enum
from typing import Callable

from domain.models import Recipe
from domain.store import RecipeStore


class Action(Enum):
    delete = "Delete"
    cancel = "Cancel"


type Completion = Callable[[bool], None]


class DeleteConfirmation:
    """Asks before deleting a recipe. Reports whether it went."""

    actions = tuple(a.value for a in Action)

    def __init__(
        self,
        recipe: Recipe,
        *,
        store: RecipeStore,
        completion: Completion | None = None,
    ) -> None:
        self.recipe = recipe
        self.store = store
        self.completion = completion

    @property
    def title(self) -> str:
        return f"Are you sure you want to delete {self.recipe.title}?"

    def delete(self) -> bool:
        did_delete = self.store.delete(self.recipe)
        self._complete(did_delete)
        return did_delete

    def cancel(self) -> bool:
        self._complete(False)
        return False

    def choose(self, action: str | Action) -> bool:
        match Action(action):
            case Action.delete:
                return self.delete()
            case Action.cancel:
                return self.cancel()

    def _complete(self, did_delete: bool) -> None:
        if self.completion is not None:
            self.completion(did_delete)


def confirm_delete(
    recipe: Recipe,
    *,
    store: RecipeStore,
    completion: Completion | None = None,
) -> DeleteConfirmation:
    return DeleteConfirmation(recipe, store=store, completion=completion)
