from datetime import datetime, timezone
from typing import Any, Iterable

import markdown2  # pyright: ignore[reportMissingTypeStubs]


type RecipeId = str


class Recipe:
    def __init__(
        self,
        *,
        title: str,
        id: RecipeId | None = None,
        content: str = "",
        is_favorite: bool = False,
        added_on: datetime | None = None,
        collections: Iterable[str] = (),
    ) -> None:
        self.id = id
        self.title = title
        self.content = content
        self.is_favorite = is_favorite
        added_on = datetime.now(timezone.utc) if added_on is None else added_on
        # Naive timestamps are taken as UTC.
        if added_on.tzinfo is None:
            added_on = added_on.replace(tzinfo=timezone.utc)
        self.added_on = added_on
        self.collections = frozenset(collections)

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, title={self.title})>"

    def __str__(self) -> str:
        return self.title

    @property
    def html(self) -> str:
        return markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.content, extras=["fences", "tables"]
        )

    def evolve(self, **changes: Any) -> "Recipe":
        """A copy of this recipe with `changes` applied."""
        fields = self.to_dict()
        fields.update(changes)
        return Recipe(**fields)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "is_favorite": self.is_favorite,
            "added_on": self.added_on,
            "collections": self.collections,
        }
