"""Tests for the Validator builder and the applicative apply chain."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import pytest

from resultcase import (
    Invalid,
    Valid,
    Validation,
    ValidationError,
    Validator,
    apply,
    lift,
    validate_all,
)

TOO_SHORT = "The password must have a length of at least 3."
NO_SPECIAL = "The password must contain at least 1 special character."
NO_LETTER = "The password must contain at least 1 letter."


def _password(data: str) -> Validation[str]:
    return (
        Validator(data)
        .expect(lambda s: len(s) > 3, "Test", TOO_SHORT)
        .expect(lambda s: re.search(r"[!\"£$%^&*()_+?#]", s) is not None, "Test", NO_SPECIAL)
        .expect(lambda s: re.search(r"[A-Za-z]", s) is not None, "Test", NO_LETTER)
        .validate()
    )


# ═════════════════════════════════════════════════════════════════════════════
# Validator
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ("", Invalid(ValidationError.create("Test", [TOO_SHORT, NO_SPECIAL, NO_LETTER]))),
        ("Test", Invalid(ValidationError.create("Test", NO_SPECIAL))),
        ("Test!", Valid("Test!")),
    ],
)
def test_validate_returns_the_correct_validation(data: str, expected: Validation[str]) -> None:
    assert _password(data) == expected


def test_failures_grouped_by_key_in_first_failure_order() -> None:
    result = (
        Validator(5)
        .expect(lambda n: n > 10, "B", "too small")
        .expect(lambda n: n % 2 == 0, "A", "must be even")
        .expect(lambda n: n > 100, "B", "way too small")
        .expect(lambda n: n > 0, "C", "must be positive")
        .validate()
    )

    assert result.unwrap_error().items() == [
        ("B", ("too small", "way too small")),
        ("A", ("must be even",)),
    ]


def test_expect_is_lazy_and_fluent() -> None:
    calls: list[int] = []
    validator = Validator(1)

    assert validator.expect(lambda n: calls.append(n) is None, "K", "m") is validator
    assert calls == []

    assert validator.validate() == Valid(1)
    assert calls == [1]


def test_no_expectations_is_valid() -> None:
    assert Validator("anything").validate() == Valid("anything")


def test_raising_predicate_propagates() -> None:
    validator = Validator(None).expect(lambda v: v.startswith("x"), "K", "m")  # type: ignore[union-attr]

    with pytest.raises(AttributeError):
        validator.validate()


def test_validate_logs_debug_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="resultcase.validator"):
        _password("")

    assert "validated 3 expectations: 1 keys failed" in caplog.messages


# ═════════════════════════════════════════════════════════════════════════════
# Applicative Apply Chain
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Bar:
    name: str
    age: int


@dataclass(frozen=True)
class Foo:
    title: str
    bars: list[Bar]


def _bar(name: str, age: int) -> Validation[Bar]:
    return apply(
        Bar,
        Validator(name).expect(bool, "Name", "A name is required.").validate(),
        Validator(age).expect(lambda a: a >= 18, "Age", "Must be an adult.").validate(),
    )


def test_apply_all_valid() -> None:
    assert apply(Bar, Valid("ada"), Valid(36)) == Valid(Bar("ada", 36))


def test_apply_accumulates_errors_from_every_argument() -> None:
    result = _bar("", 3)

    assert result.unwrap_error().to_dict() == {
        "Name": ["A name is required."],
        "Age": ["Must be an adult."],
    }


def test_apply_does_not_call_function_when_invalid() -> None:
    def explode(a: int, b: int) -> int:
        raise AssertionError("should not be called")

    assert apply(explode, Valid(1), Invalid(ValidationError.create("B", "bad"))).is_invalid()


def test_apply_zero_and_three_arguments() -> None:
    assert apply(lambda: "constant") == Valid("constant")
    assert apply(lambda a, b, c: a + b + c, Valid(1), Valid(2), Valid(3)) == Valid(6)


def test_lift() -> None:
    make_bar = lift(Bar)

    assert make_bar(Valid("ada"), Valid(36)) == Valid(Bar("ada", 36))
    assert make_bar(Invalid(ValidationError.create("Name", "x")), Valid(1)).is_invalid()


def test_composite_construction_reports_indexed_keys() -> None:
    result = apply(
        Foo,
        Valid("outer"),
        validate_all([_bar("a", 10), _bar("b", 12)], "Bars"),
    )

    assert result.unwrap_error().to_dict() == {
        "Bars[0].Age": ["Must be an adult."],
        "Bars[1].Age": ["Must be an adult."],
    }


def test_composite_construction_valid() -> None:
    result = apply(Foo, Valid("outer"), validate_all([_bar("a", 30), _bar("b", 40)], "Bars"))

    assert result == Valid(Foo("outer", [Bar("a", 30), Bar("b", 40)]))
