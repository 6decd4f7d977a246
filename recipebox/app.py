import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import (
    HTMLResponse,
    JSONResponse,
    PlainTextResponse,
    RedirectResponse,
)
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from . import crud, schemas
from .catalog import CatalogClient
from .db import CONFIG, SessionLocal, init_db
from .method_override import MethodOverrideMiddleware
from .normalize import split_ingredients


logging.basicConfig(
    level=getattr(logging, CONFIG.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB and the shared catalog client once at startup
    init_db()
    logger.info("Database ready (%s)", CONFIG.env.value)
    app.state.catalog = CatalogClient.from_config(CONFIG)
    yield
    await app.state.catalog.aclose()


app = FastAPI(title="Recipe Box", lifespan=lifespan)
app.add_middleware(MethodOverrideMiddleware)

base_dir = Path(__file__).resolve().parents[1]
templates = Jinja2Templates(directory=str(base_dir / "templates"))
app.mount("/static", StaticFiles(directory=str(base_dir / "static")), name="static")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_catalog(request: Request) -> CatalogClient:
    return request.app.state.catalog


def _recipes(db: Session):
    return [crud.recipe_to_schema(r) for r in crud.get_recipes(db)]


def _to_my_recipes():
    return RedirectResponse("/myrecipes", status_code=303)


@app.get("/", response_class=HTMLResponse)
def home(request: Request, db: Session = Depends(get_db)):
    try:
        recipes = _recipes(db)
    except crud.StoreError:
        logger.exception("Could not list recipes")
        return PlainTextResponse("Error fetching recipes", status_code=500)
    return templates.TemplateResponse(request, "home.html", {"recipes": recipes})


@app.get("/recipes/new", response_class=HTMLResponse)
def new_recipe_form(request: Request):
    return templates.TemplateResponse(request, "add.html", {})


@app.post("/recipes")
def create_recipe(
    name: Optional[str] = Form(None),
    ingredients: str = Form(""),
    steps: Optional[str] = Form(None),
    image: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    recipe = schemas.RecipeCreate(
        name=name,
        ingredients=split_ingredients(ingredients),
        steps=steps,
        image=image,
    )
    try:
        crud.create_recipe(db, recipe)
    except crud.StoreError:
        logger.exception("Could not save recipe")
        return PlainTextResponse("Error saving recipe", status_code=500)
    return _to_my_recipes()


@app.get("/recipes/{recipe_id}/edit", response_class=HTMLResponse)
def edit_recipe_form(request: Request, recipe_id: str, db: Session = Depends(get_db)):
    try:
        r = crud.get_recipe(db, recipe_id)
    except crud.StoreError:
        logger.exception("Could not load recipe %s", recipe_id)
        return PlainTextResponse("Error loading recipe", status_code=500)
    recipe = crud.recipe_to_schema(r) if r else None
    return templates.TemplateResponse(request, "edit.html", {"recipe": recipe})


UPDATABLE_FIELDS = ("name", "ingredients", "steps", "image")


async def submitted_form(request: Request) -> dict:
    async with request.form() as form:
        return {k: str(form[k]) for k in UPDATABLE_FIELDS if k in form}


@app.put("/recipes/{recipe_id}")
def update_recipe(
    recipe_id: str,
    fields: dict = Depends(submitted_form),
    db: Session = Depends(get_db),
):
    # every submitted field is written, blank values included
    if "ingredients" in fields:
        fields["ingredients"] = split_ingredients(fields["ingredients"])
    update = schemas.RecipeUpdate(**fields)
    try:
        crud.update_recipe(db, recipe_id, update)
    except crud.StoreError:
        logger.exception("Could not update recipe %s", recipe_id)
        return PlainTextResponse("Error updating recipe", status_code=500)
    return _to_my_recipes()


@app.delete("/recipes/{recipe_id}")
def delete_recipe(recipe_id: str, db: Session = Depends(get_db)):
    try:
        crud.delete_recipe(db, recipe_id)
    except crud.StoreError:
        logger.exception("Could not delete recipe %s", recipe_id)
        return PlainTextResponse("Error deleting recipe", status_code=500)
    return _to_my_recipes()


@app.get("/myrecipes", response_class=HTMLResponse)
def my_recipes(request: Request, db: Session = Depends(get_db)):
    try:
        recipes = _recipes(db)
    except crud.StoreError:
        logger.exception("Could not list recipes")
        return PlainTextResponse("Error fetching recipes", status_code=500)
    return templates.TemplateResponse(request, "myRecipes.html", {"recipes": recipes})


@app.get("/search", response_class=HTMLResponse)
async def search(
    request: Request,
    q: Optional[str] = None,
    catalog: CatalogClient = Depends(get_catalog),
):
    if not q:
        return templates.TemplateResponse(request, "search.html", {"results": [], "query": ""})
    try:
        # meals always come before drinks, whichever finishes first
        meals, drinks = await asyncio.gather(
            catalog.search_meals(q), catalog.search_drinks(q)
        )
        results = [*meals, *drinks]
    except Exception:
        logger.exception("Catalog search for %r failed", q)
        results = []
    return templates.TemplateResponse(request, "search.html", {"results": results, "query": q})


@app.get("/recipe/{kind}/{item_id}", response_class=HTMLResponse)
async def catalog_recipe(
    request: Request,
    kind: str,
    item_id: str,
    catalog: CatalogClient = Depends(get_catalog),
):
    try:
        if kind == "meal":
            recipe = await catalog.lookup_meal(item_id)
            context = {"recipe": recipe, "type": "meal"}
        else:
            recipe = await catalog.lookup_drink(item_id)
            context = {"recipe": recipe, "type": "drink"}
    except Exception:
        logger.exception("Catalog lookup for %s/%s failed", kind, item_id)
        context = {"recipe": None, "type": kind}
    return templates.TemplateResponse(request, "recipe.html", context)


@app.get("/api/meal")
async def meal_category(
    q: Optional[str] = None,
    catalog: CatalogClient = Depends(get_catalog),
):
    try:
        results = await catalog.search_by_category(q)
    except Exception:
        logger.exception("Category search for %r failed", q)
        results = []
    return JSONResponse(content=results)
