import logging
from typing import Callable
import uuid

from domain.models import Recipe, RecipeId


logger = logging.getLogger(__name__)


type Snapshot = tuple[Recipe, ...]
type Subscriber = Callable[[Snapshot], None]


class RecipeNotFound(Exception):
    pass


class Subscription:
    def __init__(self, store: "RecipeStore", callback: Subscriber) -> None:
        self.store = store
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self.store._unsubscribe(self)


class RecipeStore:
    """In memory recipes.

    Subscribers get the whole collection, never a delta: once when they
    subscribe and again after every mutation, in the order they subscribed.
    """

    def __init__(self, recipes: tuple[Recipe, ...] = ()) -> None:
        self._recipes: list[Recipe] = []
        self._subscriptions: list[Subscription] = []
        for recipe in recipes:
            self._recipes.append(self.with_id(recipe))

    @property
    def all_recipes(self) -> Snapshot:
        return tuple(self._recipes)

    def subscribe(self, callback: Subscriber) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        callback(self.all_recipes)
        return subscription

    def get(self, recipe_id: RecipeId) -> Recipe:
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        raise RecipeNotFound(f"{recipe_id}")

    def add(self, recipe: Recipe) -> Recipe:
        recipe = self.with_id(recipe)
        for i, stored in enumerate(self._recipes):
            if stored.id == recipe.id:
                logger.info("Replacing recipe %s", recipe.id)
                self._recipes[i] = recipe
                break
        else:
            logger.info("Adding recipe %s", recipe.id)
            self._recipes.append(recipe)
        self._publish()
        return recipe

    def delete(self, recipe: Recipe) -> bool:
        for i, stored in enumerate(self._recipes):
            if stored.id == recipe.id:
                del self._recipes[i]
                logger.info("Deleted recipe %s", recipe.id)
                self._publish()
                return True
        logger.info("Nothing to delete for %s", recipe.id)
        return False

    def with_id(self, recipe: Recipe) -> Recipe:
        """`recipe` as it will be stored, with an id generated if missing."""
        if recipe.id is not None:
            return recipe
        return recipe.evolve(id=uuid.uuid4().hex)

    def _unsubscribe(self, subscription: Subscription) -> None:
        self._subscriptions.remove(subscription)

    def _publish(self) -> None:
        snapshot = self.all_recipes
        # Copy, callbacks may cancel while we deliver.
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback(snapshot)
