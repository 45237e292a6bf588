"""Which recipes the list shows.

Exactly one mode is active at a time. Modes are plain values and carry their
own parameters, so nothing here knows about tabs or their positions.
"""

from dataclasses import dataclass
from datetime import timedelta


RECENTS_WINDOW = timedelta(days=30)


@dataclass(frozen=True)
class All:
    pass


@dataclass(frozen=True)
class Favorites:
    pass


@dataclass(frozen=True)
class Recents:
    window: timedelta = RECENTS_WINDOW


@dataclass(frozen=True)
class Collection:
    name: str | None = None


type ViewMode = All | Favorites | Recents | Collection


def parse_view_mode(
    mode: str,
    collection: str | None = None,
    *,
    recents_window: timedelta = RECENTS_WINDOW,
) -> ViewMode:
    match mode.strip().lower():
        case "all":
            return All()
        case "favorites":
            return Favorites()
        case "recents":
            return Recents(window=recents_window)
        case "collection":
            return Collection(name=collection or None)
        case _:
            raise ValueError(f"Unknown view mode: {mode}")


def view_mode_name(mode: ViewMode) -> str:
    match mode:
        case All():
            return "all"
        case Favorites():
            return "favorites"
        case Recents():
            return "recents"
        case Collection():
            return "collection"
