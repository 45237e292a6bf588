from datetime import datetime, timezone
from typing import Iterable

from domain.models import Recipe
from domain.view_modes import All, Collection, Favorites, Recents, ViewMode


def compute_visible(
    recipes: Iterable[Recipe],
    mode: ViewMode,
    now: datetime | None = None,
) -> tuple[Recipe, ...]:
    """The recipes to display for `mode`, in their original order.

    Only ever removes recipes, never reorders them. Without `now` the current
    instant is used.
    """
    now = datetime.now(timezone.utc) if now is None else now

    match mode:
        case Favorites():
            return tuple(r for r in recipes if r.is_favorite)
        case Recents(window=window):
            cutoff = now - window
            return tuple(r for r in recipes if r.added_on > cutoff)
        case Collection(name=name) if name is not None:
            return tuple(r for r in recipes if name in r.collections)
        case All() | Collection():
            return tuple(recipes)
