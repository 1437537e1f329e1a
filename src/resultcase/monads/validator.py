"""Builder that turns independent named checks over one value into a Validation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from resultcase.errors import ValidationError

from .validation import Invalid, Valid, Validation

T = TypeVar("T")

logger = logging.getLogger("resultcase.validator")


@dataclass(frozen=True, slots=True)
class Expectation(Generic[T]):
    """One named check: the predicate must hold, else message is reported under key."""

    predicate: Callable[[T], bool]
    key: str
    message: str


class Validator(Generic[T]):
    """Collect expectations about a value, then evaluate them all at once.

    Single-use and confined to the call stack that builds it. Predicates
    that raise are defects, not validation failures: the exception
    propagates out of validate().

    Example:
        >>> (
        ...     Validator("")
        ...     .expect(lambda s: len(s) > 3, "Password", "too short")
        ...     .expect(lambda s: "!" in s, "Password", "needs a special character")
        ...     .validate()
        ...     .error.to_dict()
        ... )
        {'Password': ['too short', 'needs a special character']}
    """

    __slots__ = ("_data", "_expectations")

    def __init__(self, data: T) -> None:
        self._data = data
        self._expectations: list[Expectation[T]] = []

    def expect(self, predicate: Callable[[T], bool], key: str, message: str) -> Validator[T]:
        """Register an expectation without evaluating it."""
        self._expectations.append(Expectation(predicate, key, message))
        return self

    def validate(self) -> Validation[T]:
        """Evaluate every expectation in registration order.

        Failures are grouped by key in first-failure order, messages in
        registration order.
        """
        failures: dict[str, list[str]] = {}
        for exp in self._expectations:
            if not exp.predicate(self._data):
                failures.setdefault(exp.key, []).append(exp.message)

        logger.debug(
            "validated %d expectations: %d keys failed",
            len(self._expectations),
            len(failures),
        )
        if not failures:
            return Valid(self._data)
        return Invalid(ValidationError.from_mapping(failures))
