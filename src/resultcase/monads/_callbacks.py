"""Internal helpers for invoking caller-supplied side-effect actions."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def takes_argument(fn: Callable[..., Any]) -> bool:
    """Whether fn accepts a positional argument.

    Callables whose signature can't be introspected are assumed to take one.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    return any(p.kind in _POSITIONAL for p in sig.parameters.values())


def invoke(action: Callable[..., Any], value: object) -> Any:
    """Call action with value, or with nothing for the data-less form."""
    return action(value) if takes_argument(action) else action()
