"""
ConfigurationMixin

The fluent configuration surface shared by AutoWiringModule and
AutoWiringCore. Every method is pure data entry into a BlueprintRegistry.
"""

from typing import Any, Callable, Dict, Pattern, Type, Union

from .handles import ConstructorHandle, MethodHandle
from .lifecycle import AutoWiringLifeCycle
from .registry import BlueprintRegistry, ClassRef


class ConfigurationMixin:
    """Configuration methods writing into ``self._registry``.

    Subclasses provide ``_registry`` and may override ``_configurable()``
    to guard against use after close.
    """

    _registry: BlueprintRegistry

    def _configurable(self) -> BlueprintRegistry:
        return self._registry

    def set_mapping(self, abstract: Union[str, Type], concrete: Union[str, Type]):
        """Resolve ``abstract`` as ``concrete`` (last write wins).

        Example::

            core.set_mapping(IDatabase, PostgresDatabase)
        """
        self._configurable().set_mapping(abstract, concrete)
        return self

    def add_mappings(self, mappings: Dict[Union[str, Type], Union[str, Type]]):
        registry = self._configurable()
        for abstract, concrete in mappings.items():
            registry.set_mapping(abstract, concrete)
        return self

    def set_factory(self, pattern: Union[str, Pattern], factory: Callable):
        """Delegate construction of matching class names to ``factory``.

        Patterns are regular expressions searched in the class name only.
        Earlier registrations win. The factory's own parameters are
        auto-wired; a parameter named ``class_name`` receives the matched name.

        Example::

            core.set_factory(r"Repository$", lambda class_name, db: build(class_name, db))
        """
        self._configurable().add_factory(pattern, factory)
        return self

    def get_constructor(self, reference: ClassRef) -> ConstructorHandle:
        return ConstructorHandle(self._configurable().blueprint(reference))

    def get_method(self, reference: ClassRef, method_name: str) -> MethodHandle:
        return MethodHandle(self._configurable().blueprint(reference), method_name)

    def singleton(self, reference: ClassRef, enabled: bool = True):
        """Cache (default) or always rebuild instances for ``reference``.

        Only affects instances created after the call.
        """
        self._configurable().blueprint(reference).lifecycle = (
            AutoWiringLifeCycle.SINGLETON if enabled else AutoWiringLifeCycle.TRANSIENT
        )
        return self

    def share(self, instances: Dict[ClassRef, Any]):
        """Hand over already built objects, bypassing construction.

        Example::

            core.share({Database: db, "app.Database#replica": replica})
        """
        registry = self._configurable()
        for reference, instance in instances.items():
            registry.blueprint(reference).share(instance)
        return self
