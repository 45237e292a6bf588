from datetime import timedelta
import functools
import logging
from typing import Any, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app import config
from app.html.recipe_detail import RecipeDetail
from app.html.recipe_list import RecipeListView
from domain.alerts import confirm_delete
from domain.models import Recipe
from domain.recipe_list import RecipeList
from domain.store import RecipeNotFound, RecipeStore
from domain.view_modes import parse_view_mode


logger = logging.getLogger(__name__)


CONFIG = config.Config()


def configure_logging(cfg: config.Config) -> None:
    logging.basicConfig(
        level=cfg.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def recents_window(request: Request) -> timedelta:
    cfg: config.Config = request.app.state.config
    return timedelta(days=cfg.recents_days)


def recipe_from_form(form: Any) -> Recipe:
    collections = str(form.get("collections", "")).split(",")
    return Recipe(
        title=str(form.get("title", "")).strip(),
        content=str(form.get("content", "")),
        is_favorite="favorite" in form,
        collections=[c.strip() for c in collections if c.strip()],
    )


async def homepage(request: Request) -> RedirectResponse:
    return RedirectResponse("/recipes/")


async def recipes(request: Request) -> HTMLResponse | RedirectResponse:
    recipe_list: RecipeList = request.app.state.recipe_list
    view: RecipeListView = request.app.state.view
    match request.method.lower():
        case "get":
            mode = request.query_params.get("mode")
            if mode is not None:
                try:
                    recipe_list.show_recipes(
                        parse_view_mode(
                            mode,
                            request.query_params.get("collection"),
                            recents_window=recents_window(request),
                        )
                    )
                except ValueError as e:
                    return HTMLResponse(str(e), status_code=400)
            return HTMLResponse(view.render(recipe_list.mode))
        case "post":
            async with request.form() as form:
                recipe = recipe_from_form(form)
            if not recipe.title:
                return HTMLResponse("A recipe needs a title.", status_code=400)
            recipe_list.save_recipe(recipe)
            return RedirectResponse("/recipes/", status_code=303)
        case _:
            raise ValueError("Unsupported method.")


@aHTMLResponse
async def recipe_detail(request: Request) -> str | tuple[str, int]:
    id = request.path_params["id"]
    store: RecipeStore = request.app.state.store
    try:
        recipe = store.get(id)
    except RecipeNotFound:
        return f"No recipe {id}.", 404
    request.app.state.recipe_list.select(recipe.id)
    return RecipeDetail(recipe, environment=request.app.state.templates).render()


async def delete(request: Request) -> HTMLResponse | RedirectResponse:
    id = request.path_params["id"]
    store: RecipeStore = request.app.state.store
    try:
        recipe = store.get(id)
    except RecipeNotFound:
        return HTMLResponse(f"No recipe {id}.", status_code=404)

    def completion(did_delete: bool) -> None:
        logger.info("Delete %s: %s", recipe.id, did_delete)

    confirmation = confirm_delete(recipe, store=store, completion=completion)
    match request.method.lower():
        case "get":
            templates: Environment = request.app.state.templates
            return HTMLResponse(
                templates.get_template("confirm-delete.html").render(
                    confirmation=confirmation
                )
            )
        case "post":
            async with request.form() as form:
                action = str(form.get("action", ""))
            try:
                did_delete = confirmation.choose(action)
            except ValueError as e:
                return HTMLResponse(str(e), status_code=400)
            location = "/recipes/" if did_delete else f"/recipes/{id}"
            return RedirectResponse(location, status_code=303)
        case _:
            raise ValueError("Unsupported method.")


def create_app(
    cfg: config.Config | None = None,
    store: RecipeStore | None = None,
) -> Starlette:
    cfg = CONFIG if cfg is None else cfg
    store = RecipeStore() if store is None else store

    templates = Environment(
        loader=FileSystemLoader(cfg.html_dir),
        autoescape=select_autoescape(),
    )
    view = RecipeListView(environment=templates)
    mode = parse_view_mode(
        cfg.initial_mode,
        cfg.initial_collection,
        recents_window=timedelta(days=cfg.recents_days),
    )

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/recipes/", recipes, methods=["GET", "POST"]),
            Route("/recipes/{id}", recipe_detail),
            Route("/recipes/{id}/delete", delete, methods=["GET", "POST"]),
            Mount("/assets", StaticFiles(directory=cfg.assets_dir)),
        ],
    )

    app.state.config = cfg
    app.state.templates = templates
    app.state.store = store
    app.state.view = view
    app.state.recipe_list = RecipeList(store, mode=mode, renderer=view)
    return app


configure_logging(CONFIG)
app = create_app()
