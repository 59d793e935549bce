"""
Public API

This module provides the global API for the AutoWiring container.
It wraps a GlobalContext instance and exposes class methods for
managing the process-wide container.

Example::

    from autowiring import AutoWiring, AutoWiringModule

    module = AutoWiringModule()
    with module:
        module.set_mapping(IDatabase, PostgresDatabase)

    AutoWiring.start(modules=[module])
    repo = AutoWiring.make(UserRepository)

    # Stop when done
    AutoWiring.stop()
"""

from typing import Any, Dict, List, Optional

from .container import CallableRef
from .core import AutoWiringCore
from .global_context import GlobalContext
from .module import AutoWiringModule
from .registry import ClassRef


class AutoWiring:
    """AutoWiring - process-wide auto-wiring container

    Delegates to a GlobalContext instance internally. Configuration of the
    running container goes through get_core() or load_modules().
    """

    # Internal GlobalContext instance
    _context: GlobalContext = GlobalContext()

    @classmethod
    def start(cls, modules: Optional[List[AutoWiringModule]] = None) -> AutoWiringCore:
        """Start the global container.

        Raises:
            AlreadyStartedError: When AutoWiring is already started.
                Call stop() before starting again.
        """
        return cls._context.start(modules)

    @classmethod
    def stop(cls) -> None:
        """Stop the global container and drop its cached instances.

        This method is idempotent and safe to call even if AutoWiring
        was never started.
        """
        cls._context.stop()

    @classmethod
    def is_started(cls) -> bool:
        return cls._context.get_or_null() is not None

    @classmethod
    def get_core(cls) -> AutoWiringCore:
        """Return the running container for direct configuration.

        Raises:
            NotInitializedError: When AutoWiring.start() has not been called
        """
        return cls._context.get()

    @classmethod
    def load_modules(cls, modules: List[AutoWiringModule]) -> None:
        cls._context.load_modules(modules)

    @classmethod
    def make(cls, reference: ClassRef, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Build an object with the global container.

        Raises:
            NotInitializedError: When AutoWiring.start() has not been called
        """
        return cls._context.get().make(reference, overrides)

    @classmethod
    def invoke(cls, target: CallableRef, overrides: Optional[Dict[str, Any]] = None) -> Any:
        return cls._context.get().invoke(target, overrides)
