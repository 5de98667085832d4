import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable
import uuid

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from cabinet.catalog import Catalog, CatalogError, load_catalog
from cabinet.controller import Controller, SelectRecipe, ToggleIngredient
from cabinet_app import config
from cabinet_app.html.cabinet_view import CabinetView
from cabinet_app.logs import configure_logging


CONFIG = config.Config()


configure_logging(CONFIG.log_level)
logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


TRUTHY = {"true", "on", "1", "yes"}


SESSION_KEY = "cabinet_id"


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


@contextlib.asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    try:
        catalog = load_catalog()
    except CatalogError as e:
        logger.error("Refusing to start, bad catalog: %s", e)
        raise
    app.state.catalog = catalog
    app.state.controllers = {}
    yield
    logger.info("Discarding %d cabinets.", len(app.state.controllers))
    app.state.controllers.clear()


def session_controller(request: Request) -> Controller:
    """The controller for this browser session, created on first use."""
    controllers: dict[str, Controller] = request.app.state.controllers
    session_id = request.session.get(SESSION_KEY)
    if session_id not in controllers:
        session_id = uuid.uuid4().hex
        request.session[SESSION_KEY] = session_id
        catalog: Catalog = request.app.state.catalog
        controllers[session_id] = Controller(catalog)
        logger.info("New cabinet %s.", session_id)
    return controllers[session_id]


def view(request: Request, template_name: str = "cabinet.html") -> CabinetView:
    controller = session_controller(request)
    return CabinetView(
        controller.state,
        catalog=controller.catalog,
        environment=TEMPLATES,
        template_name=template_name,
    )


async def favicon(request: Request) -> Response:
    return Response(status_code=204)


@aHTMLResponse
async def homepage(request: Request) -> str:
    return view(request, "index.html").render(title=CONFIG.title)


@aHTMLResponse
async def toggle_ingredient(request: Request) -> str:
    ingredient_id = request.path_params["ingredient_id"]
    async with request.form() as form:
        checked = str(form.get("checked", "")).lower() in TRUTHY
    session_controller(request).dispatch(ToggleIngredient(ingredient_id, checked))
    return view(request).render()


@aHTMLResponse
async def select_recipe(request: Request) -> str:
    recipe_name = request.path_params["recipe_name"]
    session_controller(request).dispatch(SelectRecipe(recipe_name))
    return view(request).render()


async def state(request: Request) -> JSONResponse:
    return JSONResponse(view(request).to_dict())


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/", homepage),
        Route("/ingredients/{ingredient_id}", toggle_ingredient, methods=["POST"]),
        Route("/recipes/{recipe_name}/select", select_recipe, methods=["POST"]),
        Route("/state", state),
        Route("/favicon.ico", favicon),
        Mount("/assets", StaticFiles(directory=CONFIG.assets_dir)),
    ],
    middleware=[
        Middleware(
            SessionMiddleware,
            secret_key=CONFIG.secret_key,
            session_cookie=CONFIG.session_cookie,
        ),
    ],
    lifespan=lifespan,
)
