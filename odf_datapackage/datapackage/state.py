"""Execution flags shown to the presentation layer.

A flat set of three fields, not a state machine. Anyone may assign them;
`reset_error()` is the only built-in transition. Subscribers are called
synchronously with (field, old, new) whenever a field actually changes;
`fail()` and `reset_error()` assign both fields before any subscriber runs.
"""

import logging
from typing import Any, Callable, Optional

from .schemas import ExecutionStatus

logger = logging.getLogger(__name__)

StateListener = Callable[[str, Any, Any], None]


class ExecutionState:
    """Observable execution_disabled / is_execution_error / error flags."""

    def __init__(self):
        self._execution_disabled = False
        self._is_execution_error = False
        self._error = ""
        self._listeners: list[StateListener] = []

    # ── Observation ──────────────────────────────────────

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _assign(self, field: str, value: Any) -> Optional[tuple[str, Any, Any]]:
        attr = f"_{field}"
        old = getattr(self, attr)
        if old == value:
            return None
        setattr(self, attr, value)
        logger.debug(f"Execution state: {field} {old!r} -> {value!r}")
        return field, old, value

    def _notify(self, *changes: Optional[tuple[str, Any, Any]]) -> None:
        # Listeners run only after every field of a transition is assigned
        for change in changes:
            if change is None:
                continue
            for listener in list(self._listeners):
                listener(*change)

    # ── Fields ───────────────────────────────────────────

    @property
    def execution_disabled(self) -> bool:
        return self._execution_disabled

    @execution_disabled.setter
    def execution_disabled(self, value: bool) -> None:
        self._notify(self._assign("execution_disabled", bool(value)))

    @property
    def is_execution_error(self) -> bool:
        return self._is_execution_error

    @is_execution_error.setter
    def is_execution_error(self, value: bool) -> None:
        self._notify(self._assign("is_execution_error", bool(value)))

    @property
    def error(self) -> str:
        return self._error

    @error.setter
    def error(self, value: str) -> None:
        self._notify(self._assign("error", str(value) if value else ""))

    # ── Transitions ──────────────────────────────────────

    def fail(self, message: str) -> None:
        """Record an execution error message and raise the error flag."""
        self._notify(
            self._assign("error", str(message) if message else ""),
            self._assign("is_execution_error", True),
        )

    def reset_error(self) -> None:
        """Clear the error message and the error flag."""
        self._notify(
            self._assign("error", ""),
            self._assign("is_execution_error", False),
        )

    def snapshot(self) -> ExecutionStatus:
        return ExecutionStatus(
            execution_disabled=self._execution_disabled,
            is_execution_error=self._is_execution_error,
            error=self._error,
        )
