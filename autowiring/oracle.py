"""
TypeOracle

Answers existence, instantiability and subtype questions about named types.

Type names are Python dotted paths (``package.module.QualName``). Classes
handed to the container as objects are remembered under that name, so
classes defined inside functions stay resolvable even though they cannot
be imported.
"""

import importlib
import inspect
import logging
from typing import Any, Dict, Type

from .exceptions import UnknownTypeError

logger = logging.getLogger(__name__)


class TypeOracle:
    """Name <-> class lookup for one container.

    Attributes:
        _known: Classes seen as objects, keyed by dotted name
    """

    def __init__(self):
        self._known: Dict[str, Type] = {}

    def name_of(self, cls: Type) -> str:
        """Return the dotted name of a class and remember the class."""
        name = f"{cls.__module__}.{cls.__qualname__}"
        self._known.setdefault(name, cls)
        return name

    def remember(self, other: 'TypeOracle') -> None:
        """Adopt classes known to another oracle."""
        for name, cls in other._known.items():
            self._known.setdefault(name, cls)

    def exists(self, name: str) -> bool:
        try:
            self.locate(name)
        except UnknownTypeError:
            return False
        return True

    def locate(self, name: str) -> Type:
        """Return the class named ``name``.

        Raises:
            UnknownTypeError: When nothing importable carries that name,
                or the name refers to something that is not a class
        """
        cls = self._known.get(name)
        if cls is not None:
            return cls

        found = self.locate_object(name)
        if not inspect.isclass(found):
            raise UnknownTypeError(
                f"'{name}' refers to {type(found).__name__}, not a class."
            )
        self._known[name] = found
        return found

    def locate_object(self, name: str) -> Any:
        """Import the module prefix of ``name`` and walk the remaining attributes.

        Raises:
            UnknownTypeError: When no module prefix imports or an attribute is missing
        """
        if name in self._known:
            return self._known[name]

        parts = name.split(".")
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                target = importlib.import_module(module_name)
            except ImportError:
                continue
            try:
                for attribute in parts[split:]:
                    target = getattr(target, attribute)
            except AttributeError:
                break
            return target

        raise UnknownTypeError(
            f"Type '{name}' does not exist.\n"
            f"Hint: use the fully qualified name (module.QualName) "
            f"or pass the class object itself."
        )

    @staticmethod
    def is_interface(cls: Type) -> bool:
        return inspect.isabstract(cls) or bool(getattr(cls, '_is_protocol', False))

    def is_instantiable(self, cls: Type) -> bool:
        return inspect.isclass(cls) and not self.is_interface(cls)

    @staticmethod
    def is_subtype(sub: Type, sup: Type) -> bool:
        try:
            return issubclass(sub, sup)
        except TypeError:
            # Non-runtime-checkable Protocol
            logger.debug("Cannot check %s against %s", sub, sup)
            return True
