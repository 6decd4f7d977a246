import json
import uuid

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from . import models, schemas


class StoreError(Exception):
    pass


class StoreUnavailable(StoreError):
    pass


class InvalidIdentifier(StoreError):
    pass


def _check_id(recipe_id: str) -> str:
    try:
        return uuid.UUID(hex=recipe_id).hex
    except (TypeError, ValueError) as e:
        raise InvalidIdentifier(f"{recipe_id!r} is not a recipe id") from e


def recipe_to_schema(db_recipe: models.Recipe) -> schemas.Recipe:
    return schemas.Recipe(
        id=db_recipe.id,
        name=db_recipe.name,
        ingredients=json.loads(db_recipe.ingredients or "[]"),
        steps=db_recipe.steps,
        image=db_recipe.image,
        video_link=db_recipe.video_link,
    )


def get_recipe(db: Session, recipe_id: str):
    recipe_id = _check_id(recipe_id)
    try:
        return db.get(models.Recipe, recipe_id)
    except OperationalError as e:
        raise StoreUnavailable(str(e)) from e


def get_recipes(db: Session):
    try:
        return db.query(models.Recipe).all()
    except OperationalError as e:
        raise StoreUnavailable(str(e)) from e


def create_recipe(db: Session, recipe: schemas.RecipeCreate):
    db_recipe = models.Recipe(
        id=uuid.uuid4().hex,
        name=recipe.name,
        ingredients=json.dumps(recipe.ingredients or []),
        steps=recipe.steps,
        image=recipe.image,
    )
    try:
        db.add(db_recipe)
        db.commit()
    except OperationalError as e:
        db.rollback()
        raise StoreUnavailable(str(e)) from e
    db.refresh(db_recipe)
    return db_recipe


def update_recipe(db: Session, recipe_id: str, recipe: schemas.RecipeUpdate):
    db_recipe = get_recipe(db, recipe_id)
    if not db_recipe:
        return None
    for field, value in recipe.model_dump(exclude_unset=True).items():
        if field == "ingredients":
            value = json.dumps(value or [])
        setattr(db_recipe, field, value)
    try:
        db.add(db_recipe)
        db.commit()
    except OperationalError as e:
        db.rollback()
        raise StoreUnavailable(str(e)) from e
    db.refresh(db_recipe)
    return db_recipe


def delete_recipe(db: Session, recipe_id: str):
    db_recipe = get_recipe(db, recipe_id)
    if not db_recipe:
        return False
    try:
        db.delete(db_recipe)
        db.commit()
    except OperationalError as e:
        db.rollback()
        raise StoreUnavailable(str(e)) from e
    return True
