"""Configuration system for SearchTreeLib.

This module defines how users tune a tree: which balance semantics
``is_balanced`` applies, which order ``traverse`` uses by default, and
how bulk insertion reacts to duplicate values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class TraversalOrder(Enum):
    """Order in which node values are materialized."""
    IN_ORDER = "in"         # Left, self, right (sorted)
    PRE_ORDER = "pre"       # Self, left, right
    POST_ORDER = "post"     # Left, right, self
    LEVEL_ORDER = "level"   # Breadth-first, root first


class BalanceCheck(Enum):
    """How much of the tree ``is_balanced`` inspects.

    SHALLOW compares only the heights of the root's two subtrees.
    STRICT requires every node to satisfy the height rule (AVL balance).
    """
    SHALLOW = "shallow"
    STRICT = "strict"


@dataclass
class TreeConfig:
    """Complete configuration for a BinarySearchTree."""

    # Balance semantics
    balance_check: BalanceCheck = BalanceCheck.SHALLOW

    # Order used by traverse() when none is given
    default_order: TraversalOrder = TraversalOrder.IN_ORDER

    # Bulk insertion
    skip_duplicates: bool = False
    on_error: Optional[Callable[[Any, Exception], None]] = None

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config whose balance check verifies every node.

        Returns:
            TreeConfig with STRICT balance checking
        """
        return cls(balance_check=BalanceCheck.STRICT)

    @classmethod
    def lenient(cls, on_error: Optional[Callable[[Any, Exception], None]] = None) -> 'TreeConfig':
        """Create config for bulk loads that tolerate duplicate values.

        Args:
            on_error: Optional callback receiving each rejected value and its error

        Returns:
            TreeConfig that skips duplicates during build_tree
        """
        return cls(skip_duplicates=True, on_error=on_error)

    @property
    def tolerates_duplicates(self) -> bool:
        """True if bulk insertion should skip values already present."""
        return self.skip_duplicates or self.on_error is not None

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.balance_check, BalanceCheck):
            errors.append(f"balance_check must be a BalanceCheck, got {self.balance_check!r}")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(f"default_order must be a TraversalOrder, got {self.default_order!r}")

        if self.on_error is not None and not callable(self.on_error):
            errors.append("on_error must be callable")

        return errors


def parse_balance_check(check: Union[BalanceCheck, str]) -> BalanceCheck:
    """Parse a balance check from a string or enum.

    Args:
        check: BalanceCheck or its name ("shallow", "strict")

    Returns:
        BalanceCheck enum value

    Raises:
        ValueError: If check is neither a BalanceCheck nor a known name
    """
    if isinstance(check, BalanceCheck):
        return check

    if isinstance(check, str):
        for member in BalanceCheck:
            if check.lower() in (member.value, member.name.lower()):
                return member

    raise ValueError(
        f"Unknown balance check: {check!r}. "
        f"Choose from: {', '.join(m.value for m in BalanceCheck)}"
    )
