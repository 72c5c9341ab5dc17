"""Form submit event and the default-action guard used by submit handlers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Callable, TypeVar

R = TypeVar("R")


@dataclass(slots=True)
class SubmitEvent:
    """A request to submit the form, raised by a button press or the Enter key."""

    source: str = "button"
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


def prevent_default(handler: Callable[..., R]) -> Callable[..., R]:
    """Suppress the event's default action before the wrapped handler runs."""

    @wraps(handler)
    def wrapper(self, event: SubmitEvent | None = None, *args, **kwargs) -> R:
        if event is None:
            event = SubmitEvent(source="programmatic")
        event.prevent_default()
        return handler(self, event, *args, **kwargs)

    return wrapper
