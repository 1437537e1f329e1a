"""Error values for resultcase.

- Error: operational failure (message + classification code)
- ValidationError: field-keyed, mergeable, nestable validation failures
"""

from .errors import Error, ValidationError

__all__ = ["Error", "ValidationError"]
