"""
AutoWiringContainer

This module provides the resolution engine. It is the heart of the
AutoWiring package, responsible for:

- Turning a class identifier into a fully constructed object
- Resolving constructor and method arguments from overrides, configured
  values and type hints
- Applying interface mappings and delegating to factories
- Running scheduled post-construction calls
- Caching singletons and detecting circular dependencies

The container is typically not used directly. Instead, use AutoWiring
(global API) or AutoWiringCore (isolated container) classes.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from .argument import resolve_argument
from .blueprint import ArgumentSet, Blueprint, ScheduledCall
from .exceptions import TypeInferenceError, UnknownTypeError, UnmappedAbstractTypeError
from .identifier import ClassIdentifier
from .parameters import ParameterDescriptor, ParameterInspector
from .registry import BlueprintRegistry, ClassRef
from .resolution_context import ResolutionContext, _resolution_context

logger = logging.getLogger(__name__)

# Name of the synthesized factory argument carrying the matched class name
CLASS_NAME_ARGUMENT = "class_name"

# Callable, "module.function" or (object-or-class-reference, "method")
CallableRef = Union[Callable, str, Tuple[Any, str]]


class AutoWiringContainer:
    """Resolution engine over one BlueprintRegistry.

    Attributes:
        _registry: Configuration and instance store
        _inspector: Type metadata provider

    Note:
        This class is typically not instantiated directly. Use AutoWiring
        or AutoWiringCore instead.
    """

    def __init__(self, registry: BlueprintRegistry):
        self._registry = registry
        self._inspector = ParameterInspector(registry.oracle)

    def make(self, reference: ClassRef, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Build (or fetch) the object for a class identifier.

        Args:
            reference: Class object, ``"module.Name"``, ``"module.Name#tag"``
                or a ClassIdentifier
            overrides: Per-call arguments by parameter name, taking precedence
                over configured constructor arguments. Ignored when a cached
                singleton or shared instance is returned.

        Returns:
            The constructed object

        Raises:
            CircularDependencyError: When the identifier is already under construction
            UnknownTypeError: When the type does not exist
            UnmappedAbstractTypeError: When the effective type is abstract
            UnresolvableArgumentError: When a parameter cannot be resolved

        Example::

            mailer = container.make("app.mail.Mailer#remote", {"port": 2525})
        """
        identifier = self._registry.identify(reference)

        ctx = _resolution_context.get()
        if ctx is not None:
            return self._make(identifier, overrides or {}, ctx)

        # Top-level call owns a fresh resolution stack
        ctx = ResolutionContext()
        token = _resolution_context.set(ctx)
        try:
            return self._make(identifier, overrides or {}, ctx)
        finally:
            _resolution_context.reset(token)

    def _make(self, identifier: ClassIdentifier, overrides: ArgumentSet, ctx: ResolutionContext) -> Any:
        blueprint = self._registry.blueprint(identifier)

        if blueprint.has_shared_instance:
            return blueprint.shared_instance

        # Already instantiated singleton
        if blueprint.is_singleton and identifier in self._registry.instances:
            if overrides:
                logger.debug("Ignoring overrides for cached singleton %s", identifier)
            return self._registry.instances[identifier]

        ctx.push(identifier)
        try:
            instance = self._build(identifier, blueprint, overrides)
        finally:
            ctx.pop(identifier)

        if blueprint.is_singleton:
            self._registry.instances[identifier] = instance
        return instance

    def _build(self, identifier: ClassIdentifier, blueprint: Blueprint, overrides: ArgumentSet) -> Any:
        class_name, cls = self._effective_class(identifier.type_name)

        factory = self._registry.find_factory(class_name)
        if factory is not None:
            logger.debug("Delegating %s to factory %r", identifier, factory)
            return self._call(factory, self._inspector.parameters(factory),
                              overrides, {CLASS_NAME_ARGUMENT: class_name})

        logger.debug("Constructing %s as %s", identifier, class_name)
        instance = self._call(cls, self._inspector.parameters(cls),
                              overrides, blueprint.constructor_args)

        for call in blueprint.scheduled_calls:
            self._run_scheduled_call(instance, blueprint, call)
        return instance

    def _effective_class(self, type_name: str) -> Tuple[str, Type]:
        """Apply at most one mapping and check the result can be instantiated.

        Raises:
            UnknownTypeError: When the (mapped) type does not exist
            UnmappedAbstractTypeError: When the (mapped) type is abstract
        """
        oracle = self._registry.oracle
        class_name = self._registry.mappings.get(type_name, type_name)
        cls = oracle.locate(class_name)

        if class_name != type_name:
            logger.debug("Mapping %s -> %s", type_name, class_name)
            self._check_mapping_target(type_name, cls)

        if not oracle.is_instantiable(cls):
            if class_name != type_name:
                raise UnmappedAbstractTypeError(
                    f"{type_name} is mapped to {class_name}, which is abstract.\n"
                    f"Hint: map {type_name} directly to a concrete class."
                )
            raise UnmappedAbstractTypeError(
                f"{type_name} is abstract and has no mapping.\n"
                f"Hint: set_mapping({cls.__name__}, <concrete class>)"
            )
        return class_name, cls

    def _check_mapping_target(self, type_name: str, cls: Type) -> None:
        try:
            requested = self._registry.oracle.locate(type_name)
        except UnknownTypeError:
            # Mapped names need not exist as classes
            return
        if not self._registry.oracle.is_subtype(cls, requested):
            logger.warning(
                "Mapping target %s is not a subtype of %s", cls.__qualname__, type_name
            )

    def _run_scheduled_call(self, instance: Any, blueprint: Blueprint, call: ScheduledCall) -> None:
        logger.debug("Calling %s.%s()", type(instance).__name__, call.method_name)
        parameters = self._inspector.parameters(instance, call.method_name)
        method = getattr(instance, call.method_name)
        self._call(method, parameters, call.overrides,
                   blueprint.method_args.get(call.method_name, {}))

    def invoke(self, target: CallableRef, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Call a function or method with auto-wired arguments.

        Args:
            target: A callable, a dotted path to one, or a
                ``(object_or_class_reference, "method")`` tuple. Class
                references in the tuple are built with make() first.
            overrides: Arguments by parameter name

        Returns:
            Whatever the callable returns

        Example::

            report = container.invoke(build_report, {"title": "Weekly"})
            container.invoke((Mailer, "flush"))
        """
        function = self._callable(target)
        return self._call(function, self._inspector.parameters(function), overrides or {})

    def _callable(self, target: CallableRef) -> Callable:
        if isinstance(target, tuple):
            owner, method_name = target
            if isinstance(owner, (str, type, ClassIdentifier)):
                owner = self.make(owner)
            function = getattr(owner, method_name, None)
        elif isinstance(target, str):
            function = self._registry.oracle.locate_object(target)
        else:
            function = target

        if not callable(function):
            raise TypeInferenceError(f"{target!r} is not callable.")
        return function

    def _call(self, function: Callable, parameters: List[ParameterDescriptor], *tiers: ArgumentSet) -> Any:
        """Resolve ``parameters`` from ``tiers`` (highest precedence first) and call."""
        args = []
        kwargs = {}
        for parameter in parameters:
            value = self._resolve_parameter(parameter, tiers)
            if parameter.positional_only:
                args.append(value)
            else:
                kwargs[parameter.name] = value
        return function(*args, **kwargs)

    def _resolve_parameter(self, parameter: ParameterDescriptor, tiers: Tuple[ArgumentSet, ...]) -> Any:
        for arguments in tiers:
            if parameter.name in arguments:
                return resolve_argument(parameter, arguments[parameter.name], True, self.make)
        return resolve_argument(parameter, None, False, self.make)
