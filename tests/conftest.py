"""
Test Configuration and Utilities

Common base classes and helper functions for AutoWiring tests
"""

import unittest
from typing import Optional, Type

from autowiring import AutoWiring, AutoWiringCore


class AutoWiringTestCase(unittest.TestCase):
    """
    Base test case class for AutoWiring tests.

    Resets the global container before and after each test and
    provides a fresh isolated container as ``self.core``.
    """

    def setUp(self):
        """Reset global container before each test"""
        AutoWiring.stop()
        self.core = AutoWiringCore()

    def tearDown(self):
        """Reset global container after each test"""
        self.core.close()
        AutoWiring.stop()


def ref(cls: Type, tag: Optional[str] = None) -> str:
    """
    Build the string identifier of a class.

    Example:
        >>> ref(Database, "replica")
        'fixtures.Database#replica'
    """
    name = f"{cls.__module__}.{cls.__qualname__}"
    return f"{name}#{tag}" if tag else name
