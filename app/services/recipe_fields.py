# app/services/recipe_fields.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from app.models.recipe import RecipeRecord

UNTITLED = "Untitled Recipe"


def _text_of(node: Any) -> Optional[str]:
    if isinstance(node, dict):
        text = node.get("text")
        if isinstance(text, str):
            return text
    return None


def _is_section(node: Any) -> bool:
    return isinstance(node, dict) and node.get("@type") == "HowToSection"


def normalize_name(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return UNTITLED


def normalize_ingredients(value: Any) -> List[str]:
    if isinstance(value, list):
        return [x for x in value if isinstance(x, str)]
    if isinstance(value, str):
        return [value]
    return []


def normalize_instructions(value: Any) -> List[str]:
    """
    recipeInstructions comes as a string, a HowToStep-like object, or a list
    mixing strings, steps and HowToSections. Sections are expanded one level.
    """
    steps: List[str] = []

    if isinstance(value, list):
        for node in value:
            if isinstance(node, str):
                steps.append(node)
                continue

            text = _text_of(node)
            if text is not None:
                steps.append(text)
                continue

            if _is_section(node) and isinstance(node.get("itemListElement"), list):
                for sub in node["itemListElement"]:
                    sub_text = _text_of(sub)
                    if sub_text is not None:
                        steps.append(sub_text)

    elif isinstance(value, str):
        steps.append(value)

    else:
        text = _text_of(value)
        if text is not None:
            steps.append(text)

    return [s for s in steps if s]


def _scalar_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def normalize_servings(value: Any) -> Optional[str]:
    # recipeYield: "4", 4, "4 servings", ["4", "4 servings"]
    if isinstance(value, list):
        for v in value:
            s = _scalar_text(v)
            if s:
                return s
        return None
    return _scalar_text(value)


def normalize_duration(value: Any) -> Optional[str]:
    # ISO-8601 strings are passed through untouched
    if isinstance(value, str):
        return value
    return None


def normalize_image(value: Any) -> Optional[str]:
    if isinstance(value, list):
        for v in value:
            url = normalize_image(v)
            if url:
                return url
        return None
    if isinstance(value, dict):
        url = value.get("url")
        return url if isinstance(url, str) else None
    if isinstance(value, str):
        return value
    return None


def normalize_recipe(item: Dict[str, Any]) -> RecipeRecord:
    return RecipeRecord(
        name=normalize_name(item.get("name")),
        ingredients=normalize_ingredients(item.get("recipeIngredient")),
        instructions=normalize_instructions(item.get("recipeInstructions")),
        servings=normalize_servings(item.get("recipeYield")),
        prep_time=normalize_duration(item.get("prepTime")),
        cook_time=normalize_duration(item.get("cookTime")),
        total_time=normalize_duration(item.get("totalTime")),
        image=normalize_image(item.get("image")),
    )
