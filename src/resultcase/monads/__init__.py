"""Result and Validation containers with their combinators.

- Result: fail-fast monadic composition of operations that can fail
- Validation: error-accumulating applicative composition of checks
- apply/lift: build composite values from validated parts
- Validator: aggregate independent predicate checks over one value

Example:
    >>> from resultcase.monads import Success, Validator
    >>>
    >>> name = Validator("ada").expect(str.isalpha, "Name", "letters only").validate()
    >>> name.to_result().then(lambda n: Success(n.title())).unwrap()
    'Ada'
"""

from .applicative import apply, lift
from .result import (
    Failure,
    Result,
    Success,
    attempt,
    attempt_async,
    sequence,
    traverse,
)
from .validation import Invalid, Valid, Validation, validate_all
from .validator import Expectation, Validator

__all__ = [
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
    # Applicative
    "apply",
    "lift",
    # Builder
    "Validator",
    "Expectation",
]
