"""
BlueprintRegistry

Holds every piece of mutable state a container owns:

- Blueprints, created lazily per ClassIdentifier
- The mapping table (abstract name -> concrete name)
- The factory table (ordered pattern / callable pairs)
- The instance store for singleton blueprints

The registry performs no resolution. Configuration calls write into it and
the resolution engine reads from it, writing only to the instance store.
"""

import re
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple, Type, Union

from .blueprint import Blueprint
from .identifier import ClassIdentifier
from .oracle import TypeOracle

# Class object, "Name", "Name#tag" or an identifier
ClassRef = Union[str, Type, ClassIdentifier]

# A dot between two name segments; leaves ".*", ".+", "\." alone
_NAME_SEPARATOR = re.compile(r'(?<!\\)\.(?=[A-Za-z_])')


class BlueprintRegistry:
    """Blueprints, mappings, factories and cached instances.

    Attributes:
        oracle: Converts class objects to names and back
        blueprints: Blueprint per identifier
        mappings: Abstract type name -> concrete type name
        factories: (pattern, factory) in match-priority order
        instances: Constructed singletons per identifier
    """

    def __init__(self, oracle: Optional[TypeOracle] = None):
        self.oracle = oracle or TypeOracle()
        self.blueprints: Dict[ClassIdentifier, Blueprint] = {}
        self.mappings: Dict[str, str] = {}
        self.factories: List[Tuple[Pattern, Callable]] = []
        self.instances: Dict[ClassIdentifier, Any] = {}

    def identify(self, reference: ClassRef) -> ClassIdentifier:
        """Normalize a class object, string or identifier."""
        if isinstance(reference, ClassIdentifier):
            return reference
        if isinstance(reference, str):
            return ClassIdentifier.parse(reference)
        return ClassIdentifier(self.type_name(reference))

    def type_name(self, reference: Union[str, Type]) -> str:
        if isinstance(reference, str):
            return reference
        return self.oracle.name_of(reference)

    def blueprint(self, reference: ClassRef) -> Blueprint:
        """Return the blueprint for ``reference``, creating it on first use."""
        identifier = self.identify(reference)
        blueprint = self.blueprints.get(identifier)
        if blueprint is None:
            blueprint = self.blueprints[identifier] = Blueprint()
        return blueprint

    def set_mapping(self, abstract: Union[str, Type], concrete: Union[str, Type]) -> None:
        self.mappings[self.type_name(abstract)] = self.type_name(concrete)

    def add_factory(self, pattern: Union[str, Pattern], factory: Callable) -> None:
        self.factories.append((self.compile_pattern(pattern), factory))

    @staticmethod
    def compile_pattern(pattern: Union[str, Pattern]) -> Pattern:
        """Compile a factory pattern, escaping dots between name segments.

        Example::

            >>> BlueprintRegistry.compile_pattern("app.repos.*Repository").pattern
            'app\\\\.repos.*Repository'
        """
        if isinstance(pattern, re.Pattern):
            return pattern
        return re.compile(_NAME_SEPARATOR.sub(r'\\.', pattern))

    def find_factory(self, class_name: str) -> Optional[Callable]:
        """First factory whose pattern matches ``class_name``."""
        for pattern, factory in self.factories:
            if pattern.search(class_name):
                return factory
        return None

    def merge(self, other: 'BlueprintRegistry') -> None:
        """Fold staged configuration from another registry into this one."""
        self.oracle.remember(other.oracle)
        self.mappings.update(other.mappings)
        self.factories.extend(other.factories)
        for identifier, blueprint in other.blueprints.items():
            self.blueprint(identifier).merge(blueprint)

    def clear_instances(self) -> None:
        self.instances.clear()
