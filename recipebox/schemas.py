from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeBase(BaseModel):
    name: Optional[str] = Field(
        default=None, json_schema_extra={"example": "Simple Pancakes"}
    )
    ingredients: List[str] = Field(
        default_factory=list,
        json_schema_extra={"example": ["flour", "milk", "egg"]},
    )
    steps: Optional[str] = Field(
        default=None,
        json_schema_extra={"example": "Mix, rest, cook until golden."},
    )
    image: Optional[str] = None


class RecipeCreate(RecipeBase):
    pass


class RecipeUpdate(BaseModel):
    """Partial update. Only fields that were explicitly set are written."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    ingredients: Optional[List[str]] = None
    steps: Optional[str] = None
    image: Optional[str] = None
    video_link: Optional[str] = None


class Recipe(RecipeBase):
    id: str
    video_link: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CatalogItem(BaseModel):
    id: str
    name: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
    type: Literal["meal", "drink"]
