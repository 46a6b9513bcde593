"""Testing utilities for SearchTreeLib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
