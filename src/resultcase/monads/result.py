"""Result monad: the outcome of an operation that may fail.

Discriminated union of Success(data) and Failure(error: Error) with
fail-fast monadic composition:
- Functor: select, select_error
- Monad: then (bind), catch (recovery)
- Combination: combine
- Side effects: on_success, on_failure
- Async twins of every callback-taking combinator (*_async)

Result never raises for domain failures; errors only travel as Failure.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from resultcase.errors import Error

from ._callbacks import invoke

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

# Variant tags
_SUCCESS = True
_FAILURE = False


class Result(Generic[T]):
    """Sum type representing an operation outcome: Success or Failure.

    Build with the Success() and Failure() constructor functions; those are
    the only two variants.

    Examples:
        >>> Success(21).select(lambda x: x * 2).unwrap()
        42
        >>> Failure(Error.create("boom")).select(lambda x: x * 2).error.message
        'boom'

        Railway-oriented composition stops at the first failure:
        >>> def positive(x: int) -> Result[int]:
        ...     return Success(x) if x > 0 else Failure(Error.create("not positive"))
        >>> Success(-1).then(positive).then(lambda x: Success(x * 10))
        Failure(Error(message='not positive', code=''))
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | Error, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_ok

    def is_failure(self) -> bool:
        return not self._is_ok

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def data(self) -> T | None:
        """Success payload, or None on Failure."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    @property
    def error(self) -> Error | None:
        """Failure payload, or None on Success."""
        return None if self._is_ok else self._value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Extract Success payload. Raises RuntimeError on Failure."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap() on Failure: {self._value}")

    def unwrap_error(self) -> Error:
        """Extract Failure payload. Raises RuntimeError on Success."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_error() on Success: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_ok else default  # type: ignore[return-value]

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, on_success: Callable[[T], U], on_failure: Callable[[Error], U]) -> U:
        """Exhaustive case analysis; exactly one branch is invoked.

        Example:
            >>> Success(42).match(lambda x: f"got {x}", lambda e: f"failed: {e}")
            'got 42'
        """
        if self._is_ok:
            return on_success(self._value)  # type: ignore[arg-type]
        return on_failure(self._value)  # type: ignore[arg-type]

    # ─── Functor ─────────────────────────────────────────────────────

    def select(self, f: Callable[[T], U]) -> Result[U]:
        """Map the Success payload; a Failure passes through."""
        if self._is_ok:
            return Result(f(self._value), _SUCCESS)  # type: ignore[arg-type]
        return Result(self._value, _FAILURE)

    def select_error(self, f: Callable[[Error], Error]) -> Result[T]:
        """Map the Failure payload; a Success passes through."""
        if not self._is_ok:
            return Result(f(self._value), _FAILURE)  # type: ignore[arg-type]
        return Result(self._value, _SUCCESS)

    # ─── Monad ───────────────────────────────────────────────────────

    def then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Monadic bind: chain an operation that can fail.

        f runs only on Success. A Failure is propagated unchanged, so in
        `r.then(f1).then(f2)` f2 never runs once f1 has failed.
        """
        if self._is_ok:
            return f(self._value)  # type: ignore[arg-type]
        return Result(self._value, _FAILURE)

    def catch(self, f: Callable[[Error], Result[T]]) -> Result[T]:
        """Recover from a Failure. A Success passes through."""
        if not self._is_ok:
            return f(self._value)  # type: ignore[arg-type]
        return Result(self._value, _SUCCESS)

    def combine(
        self,
        other: Result[U],
        combine_data: Callable[[T, U], V],
        combine_errors: Callable[[Error, Error], Error],
    ) -> Result[V]:
        """Combine two independent results.

        Both Success: Success(combine_data(a, b)). One Failure: that
        Failure's error as is. Both Failure: combine_errors(self, other).
        """
        if self._is_ok and other._is_ok:
            return Result(combine_data(self._value, other._value), _SUCCESS)  # type: ignore[arg-type]
        if self._is_ok:
            return Result(other._value, _FAILURE)
        if other._is_ok:
            return Result(self._value, _FAILURE)
        return Result(combine_errors(self._value, other._value), _FAILURE)  # type: ignore[arg-type]

    # ─── Side Effects ────────────────────────────────────────────────

    def on_success(self, action: Callable[[T], Any] | Callable[[], Any]) -> Result[T]:
        """Run action on Success and return this same result.

        action may take the payload or no arguments at all.
        """
        if self._is_ok:
            invoke(action, self._value)
        return self

    def on_failure(self, action: Callable[[Error], Any] | Callable[[], Any]) -> Result[T]:
        """Run action on Failure and return this same result.

        action may take the error or no arguments at all.
        """
        if not self._is_ok:
            invoke(action, self._value)
        return self

    # ─── Async Twins ─────────────────────────────────────────────────

    async def select_async(self, f: Callable[[T], Awaitable[U]]) -> Result[U]:
        if self._is_ok:
            return Result(await f(self._value), _SUCCESS)  # type: ignore[arg-type]
        return Result(self._value, _FAILURE)

    async def select_error_async(self, f: Callable[[Error], Awaitable[Error]]) -> Result[T]:
        if not self._is_ok:
            return Result(await f(self._value), _FAILURE)  # type: ignore[arg-type]
        return Result(self._value, _SUCCESS)

    async def then_async(self, f: Callable[[T], Awaitable[Result[U]]]) -> Result[U]:
        """Async bind; f is awaited only on Success."""
        if self._is_ok:
            return await f(self._value)  # type: ignore[arg-type]
        return Result(self._value, _FAILURE)

    async def catch_async(self, f: Callable[[Error], Awaitable[Result[T]]]) -> Result[T]:
        if not self._is_ok:
            return await f(self._value)  # type: ignore[arg-type]
        return Result(self._value, _SUCCESS)

    async def on_success_async(
        self, action: Callable[[T], Awaitable[Any]] | Callable[[], Awaitable[Any]]
    ) -> Result[T]:
        """Await action on Success, then return this same result."""
        if self._is_ok:
            await invoke(action, self._value)
        return self

    async def on_failure_async(
        self, action: Callable[[Error], Awaitable[Any]] | Callable[[], Awaitable[Any]]
    ) -> Result[T]:
        """Await action on Failure, then return this same result."""
        if not self._is_ok:
            await invoke(action, self._value)
        return self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        return f"{'Success' if self._is_ok else 'Failure'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Success payload, or nothing."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Success(data: T = None) -> Result[T]:  # type: ignore[assignment]  # noqa: N802
    """Construct the Success variant. `Success()` is the outcome of a void operation."""
    return Result(data, _SUCCESS)


def Failure(error: Error) -> Result[Any]:  # noqa: N802
    """Construct the Failure variant."""
    return Result(error, _FAILURE)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T]]) -> Result[list[T]]:
    """Convert results into a result of list, failing fast on the first Failure.

    Example:
        >>> sequence([Success(1), Success(2)])
        Success([1, 2])
    """
    values: list[T] = []
    for r in results:
        if not r._is_ok:
            return Result(r._value, _FAILURE)
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _SUCCESS)


def traverse(items: Iterable[T], f: Callable[[T], Result[U]]) -> Result[list[U]]:
    """Map f over items and sequence; stops calling f after the first Failure."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if not r._is_ok:
            return Result(r._value, _FAILURE)
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _SUCCESS)


def attempt(operation: Callable[[], T], *, context: str = "") -> Result[T]:
    """Run operation, converting a raised Exception into a Failure."""
    try:
        return Result(operation(), _SUCCESS)
    except Exception as e:
        return Result(Error.from_exception(e, context), _FAILURE)


async def attempt_async(operation: Callable[[], Awaitable[T]], *, context: str = "") -> Result[T]:
    """Async version of attempt for coroutine functions."""
    try:
        return Result(await operation(), _SUCCESS)
    except Exception as e:
        return Result(Error.from_exception(e, context), _FAILURE)
