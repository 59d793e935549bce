"""
ResolutionContext

This module provides the context management for dependency resolution.
The ResolutionContext tracks the identifiers currently under construction,
in order, so that re-entering one of them can be reported as a cycle.

The context is stored in a ContextVar. The top-level make() installs a
fresh context and resets it when done, so every thread (and every
top-level call) owns its own stack.
"""

from contextvars import ContextVar
from typing import List, Optional

from .exceptions import CircularDependencyError
from .identifier import ClassIdentifier


class ResolutionContext:
    """Ordered set of identifiers currently under construction.

    Attributes:
        resolving: Identifiers in the order their construction started

    Note:
        This class is used internally by AutoWiringContainer.
        Users should not need to interact with it directly.
    """

    def __init__(self):
        self.resolving: List[ClassIdentifier] = []

    def push(self, identifier: ClassIdentifier) -> None:
        """Mark ``identifier`` as under construction.

        Raises:
            CircularDependencyError: When ``identifier`` is already on the stack.
                The error carries the cycle from the repeated entry back to itself.
        """
        if identifier in self.resolving:
            cycle = self.resolving[self.resolving.index(identifier):] + [identifier]
            raise CircularDependencyError(
                "Circular dependency detected: " + " -> ".join(str(i) for i in cycle),
                cycle=cycle,
            )
        self.resolving.append(identifier)

    def pop(self, identifier: ClassIdentifier) -> None:
        if self.resolving and self.resolving[-1] == identifier:
            self.resolving.pop()
        elif identifier in self.resolving:
            self.resolving.remove(identifier)


_resolution_context: ContextVar[Optional[ResolutionContext]] = ContextVar(
    '_AUTOWIRING_RESOLUTION_CONTEXT',
    default=None
)
