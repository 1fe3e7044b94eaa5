"""Request-scoped values the process-wide configuration reads through.

``SaleCycleConfig.session_resolver`` is set once at startup, yet the session id
belongs to the request being served. The HTTP middleware stores it in a
context variable and ``resolve_session_id`` (the resolver) reads it back.
"""
from __future__ import annotations

import contextvars
from typing import Final

__all__ = ["session_id_var", "resolve_session_id"]

session_id_var: Final[contextvars.ContextVar[str | None]] = contextvars.ContextVar(
    "salecycle_session_id",
    default=None,
)

def resolve_session_id() -> str | None:
    return session_id_var.get()
