"""Error values carried by failed results and invalid validations.

Provides the operational Error and the field-keyed ValidationError.
Both are frozen pydantic models: constructed once, compared structurally,
safe to share between threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Self, TypeVar, overload

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from resultcase.config import get_settings

V = TypeVar("V")


class Error(BaseModel):
    """Failure of an operation: a human-readable message and a classification code.

    An empty code means "unspecified".

    Example:
        >>> err = Error.create("user not found", "NOT_FOUND")
        >>> str(err)
        'user not found [NOT_FOUND]'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str
    code: str = ""

    @classmethod
    def create(cls, message: str, code: str = "") -> Self:
        """Factory method for positional construction."""
        return cls(message=message, code=code)

    @classmethod
    def from_exception(cls, exc: Exception, context: str = "") -> Error:
        """Build an Error from an exception, classified by its type name."""
        return Error(
            message=f"{context}: {exc}" if context else str(exc),
            code=type(exc).__name__,
        )

    def with_code(self, code: str) -> Self:
        """Return a copy carrying a different code."""
        return self.model_copy(update={"code": code})

    def render(self) -> str:
        return f"{self.message} [{self.code}]" if self.code else self.message

    def __str__(self) -> str:
        return self.render()


class ValidationError(Error):
    """Field-keyed validation failures: key -> ordered, non-empty message tuple.

    Behaves as a read-only mapping. Merging (add/append/+) and nesting return
    new instances and never touch their inputs. Repeated messages under one
    key are dropped, first occurrence wins, unless
    RESULTCASE_VALIDATION_DEDUPE_MESSAGES is false.

    Example:
        >>> age = ValidationError.create("Age", "must be positive")
        >>> err = age.nest("Bars", 0) + ValidationError.create("Name", "required")
        >>> err.to_dict()
        {'Bars[0].Age': ['must be positive'], 'Name': ['required']}
    """

    message: str = Field(default_factory=lambda: get_settings().validation.message)
    errors: Mapping[str, tuple[str, ...]] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("errors")
    @classmethod
    def _normalize_messages(cls, v: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        empty = [key for key, messages in v.items() if not messages]
        if empty:
            raise ValueError(f"keys without messages: {', '.join(map(repr, empty))}")
        if get_settings().validation.dedupe_messages:
            return MappingProxyType({key: tuple(dict.fromkeys(messages)) for key, messages in v.items()})
        # Read-only view over a private copy
        return MappingProxyType(dict(v))

    @field_serializer("errors")
    def _serialize_errors(self, v: Mapping[str, tuple[str, ...]]) -> dict[str, list[str]]:
        return {key: list(messages) for key, messages in v.items()}

    # ─── Construction ────────────────────────────────────────────────

    @classmethod
    def create(cls, key: str, messages: str | Sequence[str]) -> ValidationError:  # type: ignore[override]
        """Error for a single key with one or more messages."""
        return cls(errors={key: _as_messages(messages)})

    @classmethod
    def from_mapping(cls, errors: Mapping[str, Sequence[str]]) -> ValidationError:
        return cls(errors={key: _as_messages(messages) for key, messages in errors.items()})

    # ─── Mapping Protocol ────────────────────────────────────────────

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self.errors[key]

    def __contains__(self, key: object) -> bool:
        return key in self.errors

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        """Iterate over keys, like a mapping."""
        return iter(self.errors)

    def keys(self) -> list[str]:
        return list(self.errors)

    def values(self) -> list[tuple[str, ...]]:
        return list(self.errors.values())

    def items(self) -> list[tuple[str, tuple[str, ...]]]:
        return list(self.errors.items())

    def get(self, key: str, default: tuple[str, ...] | None = None) -> tuple[str, ...] | None:
        return self.errors.get(key, default)

    # ─── Semigroup ───────────────────────────────────────────────────

    def add(self, other: ValidationError) -> ValidationError:
        """Merge two errors.

        The key set is the union of both; shared keys get self's messages
        followed by other's. Key order is self's keys, then keys only in other.
        """
        merged = dict(self.errors)
        for key, messages in other.errors.items():
            merged[key] = merged.get(key, ()) + messages
        return ValidationError(message=self.message, code=self.code, errors=merged)

    append = add

    def __add__(self, other: object) -> ValidationError:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.add(other)

    # ─── Key Paths ───────────────────────────────────────────────────

    def nest(self, key: str, index: int | None = None) -> ValidationError:
        """Prefix every key with a parent path.

        `nest("X")` maps "Y" to "X.Y" and "" to "X". With an index the
        prefix becomes "X[index]", for elements of a sequence.
        """
        prefix = key if index is None else f"{key}[{index}]"
        nested = {(f"{prefix}.{k}" if k else prefix): messages for k, messages in self.errors.items()}
        return ValidationError(message=self.message, code=self.code, errors=nested)

    # ─── Conversion ──────────────────────────────────────────────────

    @overload
    def to_dict(self) -> dict[str, list[str]]: ...
    @overload
    def to_dict(self, selector: Callable[[tuple[str, ...]], V]) -> dict[str, V]: ...

    def to_dict(self, selector: Callable[[tuple[str, ...]], V] | None = None) -> dict[str, V] | dict[str, list[str]]:
        """Independent copy as a plain dict; selector maps each message tuple."""
        if selector is None:
            return {key: list(messages) for key, messages in self.errors.items()}
        return {key: selector(messages) for key, messages in self.errors.items()}

    def render(self) -> str:
        lines = [super().render()]
        lines.extend(f"  {key or '<root>'}: {message}" for key, messages in self.errors.items() for message in messages)
        return "\n".join(lines)

    def __hash__(self) -> int:
        # Order-insensitive, like equality
        return hash((self.message, self.code, frozenset(self.errors.items())))


def _as_messages(messages: str | Sequence[str]) -> tuple[str, ...]:
    """A bare string is one message, not a sequence of characters."""
    return (messages,) if isinstance(messages, str) else tuple(messages)
