# app/core/request_context.py
from __future__ import annotations

import contextvars
from typing import Optional

_request_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("recipe_bridge_request_id", default=None)


def get_request_id() -> Optional[str]:
    return _request_id.get()


def bind_request_id(value: Optional[str]) -> contextvars.Token:
    return _request_id.set(value)


def reset_request_id(token: contextvars.Token) -> None:
    _request_id.reset(token)
