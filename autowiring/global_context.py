"""
GlobalContext

Process-wide container holder for AutoWiring.

This module provides:
    - GlobalContext: Singleton context holding the process-wide AutoWiringCore

Example::

    from autowiring.global_context import GlobalContext

    context = GlobalContext()  # Returns singleton instance
    context.start(modules=[my_module])
    core = context.get()
    context.stop()
"""

import logging
from typing import List, Optional

from .core import AutoWiringCore
from .exceptions import AlreadyStartedError, NotInitializedError
from .module import AutoWiringModule

logger = logging.getLogger(__name__)


class GlobalContext:
    """Process-wide holder of one AutoWiringCore.

    Singleton pattern that holds the global AutoWiringCore instance.
    Used by the AutoWiring class for global API access.

    Attributes:
        _core: The global AutoWiringCore instance (None if not started)
    """

    _instance: Optional['GlobalContext'] = None
    _core: Optional[AutoWiringCore]

    def __new__(cls) -> 'GlobalContext':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._core = None
        return cls._instance

    def __init__(self):
        # Avoid re-initialization on subsequent __init__ calls
        pass

    def get(self) -> AutoWiringCore:
        """Return the running core.

        Raises:
            NotInitializedError: If the context is not started
        """
        if self._core is None:
            raise NotInitializedError(
                "AutoWiring is not started. Call AutoWiring.start() first."
            )
        return self._core

    def get_or_null(self) -> Optional[AutoWiringCore]:
        return self._core

    def start(self, modules: Optional[List[AutoWiringModule]] = None) -> AutoWiringCore:
        if self._core is not None:
            raise AlreadyStartedError(
                "AutoWiring is already started. "
                "Call AutoWiring.stop() before starting again."
            )
        self._core = AutoWiringCore(modules=modules)
        logger.debug("Global container started with %d module(s)", len(modules or []))
        return self._core

    def stop(self) -> None:
        """Close the running core. Calling it when stopped has no effect."""
        if self._core is not None:
            self._core.close()
            self._core = None
            logger.debug("Global container stopped")

    def load_modules(self, modules: List[AutoWiringModule]) -> None:
        self.get().load_modules(modules)
