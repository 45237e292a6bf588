import httpx
import pytest
from starlette.applications import Starlette

from app.app import create_app
from app.config import Config
from domain.models import Recipe
from domain.recipe_list import RecipeList
from domain.store import RecipeStore


@pytest.fixture
def store() -> RecipeStore:
    return RecipeStore(
        (
            Recipe(id="stew", title="Beef stew", content="# Method\n\nStir."),
            Recipe(
                id="brownies",
                title="Brownies",
                is_favorite=True,
                collections=["Desserts"],
            ),
        )
    )


@pytest.fixture
def app(store: RecipeStore) -> Starlette:
    return create_app(Config(), store=store)


def client(app: Starlette) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    )


@pytest.mark.asyncio
async def test_homepage_redirects(app: Starlette) -> None:
    async with client(app) as c:
        resp = await c.get("/")
    assert resp.status_code == 307
    assert resp.headers["location"] == "/recipes/"


@pytest.mark.asyncio
async def test_list(app: Starlette) -> None:
    async with client(app) as c:
        resp = await c.get("/recipes/")
    assert resp.status_code == 200
    assert "Beef stew" in resp.text
    assert "Brownies" in resp.text


@pytest.mark.parametrize(
    "params,shown,hidden",
    (
        ({"mode": "favorites"}, "Brownies", "Beef stew"),
        ({"mode": "collection", "collection": "Desserts"}, "Brownies", "Beef stew"),
        ({"mode": "recents"}, "Beef stew", "No recipes."),
    ),
)
@pytest.mark.asyncio
async def test_list_modes(
    app: Starlette,
    params: dict[str, str],
    shown: str,
    hidden: str,
) -> None:
    async with client(app) as c:
        resp = await c.get("/recipes/", params=params)
    assert resp.status_code == 200
    assert shown in resp.text
    assert hidden not in resp.text


@pytest.mark.asyncio
async def test_list_unknown_mode(app: Starlette) -> None:
    async with client(app) as c:
        resp = await c.get("/recipes/", params={"mode": "popular"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_detail_selects(app: Starlette) -> None:
    async with client(app) as c:
        resp = await c.get("/recipes/stew")
        assert resp.status_code == 200
        assert "<h1>Method</h1>" in resp.text

        resp = await c.get("/recipes/")
    assert resp.text.count('class="recipe selected"') == 1
    recipe_list: RecipeList = app.state.recipe_list
    assert recipe_list.selection is not None
    assert recipe_list.selection.recipe_id == "stew"


@pytest.mark.asyncio
async def test_detail_missing(app: Starlette) -> None:
    async with client(app) as c:
        resp = await c.get("/recipes/nope")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_create(app: Starlette, store: RecipeStore) -> None:
    async with client(app) as c:
        resp = await c.post(
            "/recipes/",
            data={
                "title": "Lemon tart",
                "content": "Zest.",
                "collections": "Desserts, Summer",
                "favorite": "on",
            },
        )
    assert resp.status_code == 303
    assert resp.headers["location"] == "/recipes/"

    tart = store.all_recipes[-1]
    assert tart.title == "Lemon tart"
    assert tart.is_favorite
    assert tart.collections == {"Desserts", "Summer"}
    recipe_list: RecipeList = app.state.recipe_list
    assert recipe_list.selection == (tart.id, 2)


@pytest.mark.asyncio
async def test_create_without_title(app: Starlette, store: RecipeStore) -> None:
    async with client(app) as c:
        resp = await c.post("/recipes/", data={"title": " "})
    assert resp.status_code == 400
    assert len(store.all_recipes) == 2


@pytest.mark.asyncio
async def test_confirm_delete_page(app: Starlette) -> None:
    async with client(app) as c:
        resp = await c.get("/recipes/stew/delete")
    assert resp.status_code == 200
    assert "Are you sure you want to delete Beef stew?" in resp.text


@pytest.mark.parametrize(
    "action,location,remaining",
    (
        ("Delete", "/recipes/", 1),
        ("Cancel", "/recipes/stew", 2),
    ),
)
@pytest.mark.asyncio
async def test_delete(
    app: Starlette,
    store: RecipeStore,
    action: str,
    location: str,
    remaining: int,
) -> None:
    async with client(app) as c:
        resp = await c.post("/recipes/stew/delete", data={"action": action})
    assert resp.status_code == 303
    assert resp.headers["location"] == location
    assert len(store.all_recipes) == remaining


@pytest.mark.asyncio
async def test_delete_unknown_action(app: Starlette, store: RecipeStore) -> None:
    async with client(app) as c:
        resp = await c.post("/recipes/stew/delete", data={"action": "Maybe"})
    assert resp.status_code == 400
    assert len(store.all_recipes) == 2
