"""Per-request page variable store.

One ``PageVariables`` object exists per request. It is created lazily the
first time anything reads or writes a variable and is kept in the request's
state backend under ``STATE_KEY``, so every ``PageVariableStore`` built over
the same backend sees the same mapping.

Values are never logged: they carry customer names, emails and phone numbers.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from salecycle.core.errors import InvalidArgument
from salecycle.schemas.enums import RenderState
from salecycle.services.encoding import append_segment
from salecycle.services.state import STATE_KEY, StateStorage

logger = logging.getLogger(__name__)

@dataclass
class PageVariables:
    # insertion order is the order lines are rendered in
    values: dict[str, str] = field(default_factory=dict)
    state: RenderState = RenderState.NOT_RENDERED

class PageVariableStore:
    def __init__(self, storage: StateStorage) -> None:
        self.storage = storage

    @property
    def current(self) -> PageVariables:
        current = self.storage.get(STATE_KEY)
        if current is None:
            current = PageVariables()
            self.storage.set(STATE_KEY, current)
            logger.debug("page variables created for request")
        return current

    @property
    def variables(self) -> dict[str, str]:
        """Live mapping; callers' changes are rendered."""
        return self.current.values

    def add_variable(self, name: str, value: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("name")
        self.current.values[name] = value

    def append_variable(self, name: str, segment: str | None) -> None:
        """Append ``segment`` to a pipe-delimited accumulator; None is skipped."""
        if segment is None:
            return
        values = self.variables
        self.add_variable(name, append_segment(values.get(name), segment))

    def contains(self, name: str) -> bool:
        return name in self.variables
