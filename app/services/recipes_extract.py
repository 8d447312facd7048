# app/services/recipes_extract.py
from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import HTTPException

from app.core import config
from app.models.recipe import RecipeRecord
from app.services import common
from app.services.jsonld import iter_candidates, select_recipe
from app.services.recipe_fields import normalize_recipe

log = logging.getLogger("recipe_bridge.extract")


def extract_recipe(html: str) -> Optional[RecipeRecord]:
    """
    Finds the first schema.org Recipe in the page's JSON-LD blocks and
    normalizes it. Returns None when the page carries no Recipe.
    Never raises on malformed markup or JSON.
    """
    item = select_recipe(iter_candidates(html))
    if item is None:
        return None
    return normalize_recipe(item)


async def fetch_html(url: str) -> str:
    async with httpx.AsyncClient(timeout=config.FETCH_TIMEOUT_S, follow_redirects=True) as client:
        r = await client.get(
            url,
            headers={
                "User-Agent": config.FETCH_USER_AGENT,
                "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
            },
        )
        r.raise_for_status()
        return r.text


def recipe_or_404(html: str, *, source: str) -> RecipeRecord:
    recipe = extract_recipe(html)
    if recipe is None:
        log.info("recipe not found", extra={"source": source})
        raise HTTPException(status_code=404, detail="No recipe found")

    log.info(
        "recipe extracted",
        extra={
            "source": source,
            "recipe_name": recipe.name,
            "ingredients": len(recipe.ingredients),
            "instructions": len(recipe.instructions),
        },
    )
    return recipe


async def extract_recipe_from_url(url: str) -> RecipeRecord:
    url = (url or "").strip()
    if not common.is_url(url):
        raise HTTPException(status_code=400, detail="Invalid URL")

    # 1) Fetch HTML
    try:
        html = await fetch_html(url)
    except httpx.HTTPStatusError as e:
        code = e.response.status_code
        log.warning("upstream error", extra={"url": url, "upstream_status": code})
        raise HTTPException(status_code=400, detail=f"Failed to fetch URL: upstream returned {code}")
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        log.warning("fetch failed", extra={"url": url, "error": str(e)})
        raise HTTPException(status_code=400, detail="Failed to fetch URL")

    # 2) JSON-LD -> record
    return recipe_or_404(html, source=url)
