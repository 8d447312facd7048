# app/services/jsonld.py
from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable, Iterator, List, Optional

log = logging.getLogger("recipe_bridge.jsonld")

JSONLD_TYPE = "application/ld+json"
RECIPE_TYPE = "Recipe"

# Script data ends at the first </script; a literal "<script" inside it is plain text.
_SCRIPT_RE = re.compile(
    r"<script\b(?P<attrs>[^>]*)>(?P<body>.*?)</script\s*>",
    flags=re.DOTALL | re.IGNORECASE,
)
_ATTR_RE = re.compile(
    r"""(?P<name>[^\s"'=/>]+)(?:\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"'>]+)))?""",
)


def _script_type(attrs: str) -> str:
    # Walk name=value pairs so text inside another attribute's value is never read as `type`.
    for m in _ATTR_RE.finditer(attrs or ""):
        if m.group("name").lower() == "type":
            value = m.group("dq") or m.group("sq") or m.group("bare") or ""
            return value.strip().lower()
    return ""


def iter_jsonld_payloads(html: str) -> Iterator[str]:
    """
    Yields the inner text of every <script type="application/ld+json"> block,
    in document order. Each call returns a fresh generator over the same html.
    """
    for m in _SCRIPT_RE.finditer(html or ""):
        if _script_type(m.group("attrs")) == JSONLD_TYPE:
            yield m.group("body")


def decode_payload(text: str) -> List[Any]:
    # [] on failure, [value] on success
    try:
        return [json.loads((text or "").strip())]
    except (ValueError, RecursionError) as e:
        log.debug("skipping undecodable json-ld block", extra={"error": str(e)})
        return []


def flatten_items(value: Any) -> List[Any]:
    """
    Top-level arrays are split into items; an item holding an `@graph` array
    is replaced by the members of that array.
    """
    top = value if isinstance(value, list) else [value]

    out: List[Any] = []
    for item in top:
        graph = item.get("@graph") if isinstance(item, dict) else None
        if isinstance(graph, list):
            out.extend(graph)
        else:
            out.append(item)
    return out


def iter_candidates(html: str) -> Iterator[Any]:
    for payload in iter_jsonld_payloads(html):
        for value in decode_payload(payload):
            yield from flatten_items(value)


def is_recipe(item: Any) -> bool:
    # Exact match only; ["Recipe", "Article"] is not a recipe here.
    return isinstance(item, dict) and item.get("@type") == RECIPE_TYPE


def select_recipe(candidates: Iterable[Any]) -> Optional[dict]:
    for item in candidates:
        if is_recipe(item):
            return item
    return None
