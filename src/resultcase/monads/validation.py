"""Validation applicative: data checked against constraints that may fail together.

Discriminated union of Valid(data) and Invalid(error: ValidationError).
Unlike Result.then, composing Validations with append never short-circuits:
every invalid contributor's errors are merged into the outcome.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Generic, TypeVar

from resultcase.errors import ValidationError

from .result import Result

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

_VALID = True
_INVALID = False


class Validation(Generic[T]):
    """Sum type representing a validation outcome: Valid or Invalid.

    Build with the Valid() and Invalid() constructor functions.

    Examples:
        >>> name = Invalid(ValidationError.create("Name", "required"))
        >>> age = Invalid(ValidationError.create("Age", "must be positive"))
        >>> name.append(age, lambda n, a: (n, a)).error.to_dict()
        {'Name': ['required'], 'Age': ['must be positive']}
    """

    __slots__ = ("_value", "_is_valid")
    __match_args__ = ("_value",)

    def __init__(self, value: T | ValidationError, is_valid: bool) -> None:
        self._value = value
        self._is_valid = is_valid

    # ─── Type Checking ───────────────────────────────────────────────

    def is_valid(self) -> bool:
        return self._is_valid

    def is_invalid(self) -> bool:
        return not self._is_valid

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def data(self) -> T | None:
        return self._value if self._is_valid else None  # type: ignore[return-value]

    @property
    def error(self) -> ValidationError | None:
        return None if self._is_valid else self._value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Extract Valid payload. Raises RuntimeError on Invalid."""
        if self._is_valid:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap() on Invalid: {self._value}")

    def unwrap_error(self) -> ValidationError:
        """Extract Invalid payload. Raises RuntimeError on Valid."""
        if not self._is_valid:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_error() on Valid: {self._value!r}")

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, on_valid: Callable[[T], U], on_invalid: Callable[[ValidationError], U]) -> U:
        if self._is_valid:
            return on_valid(self._value)  # type: ignore[arg-type]
        return on_invalid(self._value)  # type: ignore[arg-type]

    # ─── Functor ─────────────────────────────────────────────────────

    def select(self, f: Callable[[T], U]) -> Validation[U]:
        """Map the Valid payload; an Invalid passes through."""
        if self._is_valid:
            return Validation(f(self._value), _VALID)  # type: ignore[arg-type]
        return Validation(self._value, _INVALID)

    async def select_async(self, f: Callable[[T], Awaitable[U]]) -> Validation[U]:
        if self._is_valid:
            return Validation(await f(self._value), _VALID)  # type: ignore[arg-type]
        return Validation(self._value, _INVALID)

    # ─── Applicative ─────────────────────────────────────────────────

    def append(self, other: Validation[U], combine: Callable[[T, U], V]) -> Validation[V]:
        """Combine two independent validations, accumulating errors.

        Valid + Valid -> Valid(combine(a, b)); a single Invalid side is
        kept unchanged; Invalid + Invalid -> Invalid(self.error + other.error).
        combine is only called when both sides are valid.
        """
        if self._is_valid and other._is_valid:
            return Validation(combine(self._value, other._value), _VALID)  # type: ignore[arg-type]
        if self._is_valid:
            return Validation(other._value, _INVALID)
        if other._is_valid:
            return Validation(self._value, _INVALID)
        return Validation(self._value.add(other._value), _INVALID)  # type: ignore[union-attr, arg-type]

    def apply(self: Validation[Callable[[U], V]], argument: Validation[U]) -> Validation[V]:
        """Apply a validated unary function to a validated argument."""
        return self.append(argument, lambda f, x: f(x))

    # ─── Key Paths ───────────────────────────────────────────────────

    def nest(self, key: str, index: int | None = None) -> Validation[T]:
        """Nest an Invalid's error keys under key (and index); Valid is unchanged."""
        if self._is_valid:
            return self
        return Validation(self._value.nest(key, index), _INVALID)  # type: ignore[union-attr]

    # ─── Conversion ──────────────────────────────────────────────────

    def to_result(self) -> Result[T]:
        """Narrow to an operation outcome: Valid -> Success, Invalid -> Failure."""
        return Result(self._value, self._is_valid)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_valid

    def __repr__(self) -> str:
        return f"{'Valid' if self._is_valid else 'Invalid'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validation):
            return NotImplemented
        return self._is_valid == other._is_valid and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_valid, self._value))


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Valid(data: T) -> Validation[T]:  # noqa: N802
    """Construct the Valid variant."""
    return Validation(data, _VALID)


def Invalid(error: ValidationError) -> Validation[Any]:  # noqa: N802
    """Construct the Invalid variant."""
    return Validation(error, _INVALID)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def validate_all(validations: Iterable[Validation[T]], key: str = "") -> Validation[list[T]]:
    """Fold validations into one, keying each element's errors by position.

    Element i's errors are nested under "key[i]", so every invalid element
    reports its own indexed key path.

    Example:
        >>> bars = [Invalid(ValidationError.create("Age", "too young"))] * 2
        >>> validate_all(bars, "Bars").error.keys()
        ['Bars[0].Age', 'Bars[1].Age']
    """
    acc: Validation[list[T]] = Validation([], _VALID)
    for i, v in enumerate(validations):
        acc = acc.append(v.nest(key, i), lambda xs, x: [*xs, x])
    return acc
