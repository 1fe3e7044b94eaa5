from __future__ import annotations

from typing import Any, Protocol

from starlette.requests import Request

# Key the per-request page variables live under in every backend
STATE_KEY = "__salecycle__"

class StateStorage(Protocol):
    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

class InMemoryStateStorage:
    """Plain dict backend. One instance == one logical request."""

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._items.get(key)

    def set(self, key: str, value: Any) -> None:
        self._items[key] = value

class RequestStateStorage:
    """Backend over Starlette's ``request.state``; dropped with the request."""

    def __init__(self, request: Request) -> None:
        self.request = request

    def get(self, key: str) -> Any | None:
        return getattr(self.request.state, key, None)

    def set(self, key: str, value: Any) -> None:
        setattr(self.request.state, key, value)
