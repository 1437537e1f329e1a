"""Applicative lifting of plain functions over validated arguments.

Builds a composite value from independently validated parts in one pass,
reporting the errors of every invalid part together.

Example:
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class User:
    ...     name: str
    ...     age: int
    >>> apply(User, Valid("ada"), Valid(36))
    Valid(User(name='ada', age=36))
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial, wraps
from typing import Any, TypeVar

from .validation import Valid, Validation

R = TypeVar("R")


def apply(func: Callable[..., R], *validations: Validation[Any]) -> Validation[R]:
    """Call func with the payloads of validations, or merge all their errors.

    Starts from Valid(func) and appends each argument in turn, partially
    applying one argument per step. func runs only once every argument is
    valid; otherwise the errors of all invalid arguments are merged in
    argument order.
    """
    acc: Validation[Callable[..., R]] = Valid(func)
    for v in validations:
        acc = acc.append(v, partial)
    return acc.select(lambda applied: applied())


def lift(func: Callable[..., R]) -> Callable[..., Validation[R]]:
    """Turn func into a function over Validation arguments.

    Example:
        >>> add = lift(lambda a, b: a + b)
        >>> add(Valid(1), Valid(2))
        Valid(3)
    """

    @wraps(func)
    def lifted(*validations: Validation[Any]) -> Validation[R]:
        return apply(func, *validations)

    return lifted
