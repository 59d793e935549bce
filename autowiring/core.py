"""
AutoWiringCore

This module provides the isolated container instance. Each AutoWiringCore
owns its registry (blueprints, mappings, factories and cached instances),
completely separate from the global AutoWiring container.

Use Cases:
    - Library development (avoid polluting global container)
    - Multi-tenant applications (tenant-specific configuration)
    - Test isolation (fresh container per test)

Example::

    core = AutoWiringCore()
    core.set_mapping(IDatabase, PostgresDatabase)
    repo = core.make(UserRepository)

    # Use as context manager for automatic cleanup
    with AutoWiringCore(modules=[module]) as core:
        service = core.make(MyService)
    # close() is called automatically
"""

from typing import Any, Dict, List, Optional

from .configuration import ConfigurationMixin
from .container import AutoWiringContainer, CallableRef
from .exceptions import ContainerClosedError
from .module import AutoWiringModule
from .registry import BlueprintRegistry, ClassRef


class AutoWiringCore(ConfigurationMixin):
    """Isolated AutoWiring container instance.

    Combines the configuration surface with the resolution engine over a
    single registry.

    Attributes:
        _registry: Blueprints, mappings, factories and instances
        _container: Resolution engine
        _closed: Flag indicating if the container has been closed

    Note:
        The registry is not synchronized. Configure the container before
        sharing it between threads, or guard make() with a lock.
    """

    def __init__(self, modules: Optional[List[AutoWiringModule]] = None):
        """Initialize an isolated container instance.

        Args:
            modules: Staged configuration to load initially (optional)
        """
        self._registry = BlueprintRegistry()
        self._container = AutoWiringContainer(self._registry)
        self._closed = False

        if modules:
            self.load_modules(modules)

    def _ensure_not_closed(self) -> None:
        """Raises ContainerClosedError when the container has been closed."""
        if self._closed:
            raise ContainerClosedError("This container is already closed")

    def _configurable(self) -> BlueprintRegistry:
        self._ensure_not_closed()
        return self._registry

    @property
    def registry(self) -> BlueprintRegistry:
        return self._registry

    def load_modules(self, modules: List[AutoWiringModule]) -> None:
        """Fold staged configuration into this container.

        Mappings follow last-write-wins, factories keep module order,
        arguments are merged and scheduled calls appended.

        Raises:
            ContainerClosedError: When the container has been closed
        """
        self._ensure_not_closed()
        for module in modules:
            self._registry.merge(module.registry)

    def make(self, reference: ClassRef, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Build (or fetch the cached) object for ``reference``.

        See AutoWiringContainer.make().

        Example::

            db = core.make(Database)
            replica = core.make("app.db.Database#replica")
        """
        self._ensure_not_closed()
        return self._container.make(reference, overrides)

    def invoke(self, target: CallableRef, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Call ``target`` with auto-wired arguments. See AutoWiringContainer.invoke()."""
        self._ensure_not_closed()
        return self._container.invoke(target, overrides)

    def reset_instances(self) -> None:
        """Drop every cached singleton. Shared instances are kept."""
        self._ensure_not_closed()
        self._registry.clear_instances()

    def close(self) -> None:
        """Close the container and release cached instances.

        This method is idempotent - calling it multiple times has no effect.
        """
        if not self._closed:
            self._closed = True
            self._registry.clear_instances()

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __enter__(self) -> 'AutoWiringCore':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Close the container; exceptions are not suppressed."""
        self.close()
        return False
