"""Error types for SearchTreeLib.

Mutating operations report value-level failures by raising one of the two
concrete BSTError subclasses below. Neither is fatal: callers decide whether
to skip the value, log it, or surface it to a user.
"""

from typing import Any, Optional


class BSTError(Exception):
    """Base class for failures reported by tree mutators."""

    default_message = "binary search tree error"

    def __init__(self, value: Any, message: Optional[str] = None):
        """Create the error.

        Args:
            value: The value the failed operation was called with
            message: Optional override for the default message
        """
        self.value = value
        super().__init__(message or self.default_message)


class DuplicateValueError(BSTError):
    """Raised when insert finds a node already holding the value."""

    default_message = "Duplicate value: cannot insert the same value twice"


class ValueNotFoundError(BSTError):
    """Raised when delete runs off the tree before reaching the value."""

    default_message = "Value not found: cannot delete a non-existent value"
