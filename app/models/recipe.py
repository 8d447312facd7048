# app/models/recipe.py
from __future__ import annotations

from typing import Optional, Tuple
from pydantic import BaseModel, Field


class RecipeExtractRequest(BaseModel):
    url: str


class RecipeExtractHtmlRequest(BaseModel):
    html: str


class RecipeRecord(BaseModel):
    name: str
    ingredients: Tuple[str, ...] = Field(default_factory=tuple)
    instructions: Tuple[str, ...] = Field(default_factory=tuple)
    servings: Optional[str] = None
    prep_time: Optional[str] = Field(default=None, alias="prepTime")
    cook_time: Optional[str] = Field(default=None, alias="cookTime")
    total_time: Optional[str] = Field(default=None, alias="totalTime")
    image: Optional[str] = None

    model_config = {"populate_by_name": True, "frozen": True}


class RecipeExtractResponse(BaseModel):
    success: bool = True
    recipe: RecipeRecord
