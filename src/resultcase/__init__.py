"""resultcase - Result and Validation containers for domain code.

Two complementary outcome types:
- Result: an operation that may fail. Composes fail-fast with then().
- Validation: data checked against constraints that may fail together.
  Composes with append(), merging the errors of every invalid part.

Quick Start:
    >>> from resultcase import Error, Failure, Success
    >>>
    >>> def parse_port(raw: str) -> Result[int]:
    ...     if not raw.isdigit():
    ...         return Failure(Error.create(f"not a number: {raw}", "PARSE"))
    ...     return Success(int(raw))
    >>>
    >>> parse_port("8080").select(lambda p: p + 1).unwrap()
    8081

Validating a composite value:
    >>> from resultcase import Validator, apply, validate_all
    >>>
    >>> def check_age(age: int) -> Validation[int]:
    ...     return Validator(age).expect(lambda a: a >= 0, "Age", "must not be negative").validate()
    >>>
    >>> apply(lambda name, ages: (name, ages), Valid("ada"), validate_all([check_age(-1)], "Ages"))
    Invalid(ValidationError(message='One or more validation errors occurred.', code='', errors=mappingproxy({'Ages[0].Age': ('must not be negative',)})))

Crossing into operation land:
    >>> check_age(3).to_result().then(lambda a: Success(a * 12)).unwrap()
    36
"""

from .config import ResultcaseSettings, clear_settings_cache, get_settings
from .errors import Error, ValidationError
from .monads import (
    Expectation,
    Failure,
    Invalid,
    Result,
    Success,
    Valid,
    Validation,
    Validator,
    apply,
    attempt,
    attempt_async,
    lift,
    sequence,
    traverse,
    validate_all,
)
from .observability import configure_logging, log_failure, log_invalid

__version__ = "0.1.0"

__all__ = [
    # Errors
    "Error",
    "ValidationError",
    # Result
    "Result",
    "Success",
    "Failure",
    "sequence",
    "traverse",
    "attempt",
    "attempt_async",
    # Validation
    "Validation",
    "Valid",
    "Invalid",
    "validate_all",
    "apply",
    "lift",
    "Validator",
    "Expectation",
    # Configuration
    "ResultcaseSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "log_failure",
    "log_invalid",
]
