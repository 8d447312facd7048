# app/routers/recipes_extract.py
from __future__ import annotations

from fastapi import APIRouter

from app.models.recipe import RecipeExtractHtmlRequest, RecipeExtractRequest, RecipeExtractResponse
from app.services.recipes_extract import extract_recipe_from_url, recipe_or_404

router = APIRouter(prefix="/recipe", tags=["recipe"])


@router.post("/extract", response_model=RecipeExtractResponse)
async def recipe_extract(req: RecipeExtractRequest) -> RecipeExtractResponse:
    recipe = await extract_recipe_from_url(req.url)
    return RecipeExtractResponse(recipe=recipe)


@router.post("/extract_html", response_model=RecipeExtractResponse)
def recipe_extract_html(req: RecipeExtractHtmlRequest) -> RecipeExtractResponse:
    return RecipeExtractResponse(recipe=recipe_or_404(req.html, source="inline"))
