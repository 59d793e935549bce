"""
Parameter metadata

This module turns a class constructor, a method or a plain callable into an
ordered list of ParameterDescriptor objects. It is the only place that
performs signature introspection.

The descriptors record:

- Parameter name and whether it must be passed positionally
- The kind of declared type (none, class, interface or callable)
- The dotted name of a declared class or interface
- The default value, if any
"""

import collections.abc
import inspect
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from .exceptions import TypeInferenceError
from .oracle import TypeOracle


class TypeKind(Enum):
    """Kind of a parameter's declared type"""
    NONE = "NONE"
    CLASS = "CLASS"
    INTERFACE = "INTERFACE"
    CALLABLE = "CALLABLE"


@dataclass(frozen=True)
class ParameterDescriptor:
    """One parameter of a constructor, method or callable"""
    name: str
    kind: TypeKind = TypeKind.NONE
    type_name: Optional[str] = None
    annotation: Any = None
    has_default: bool = False
    default: Any = None
    positional_only: bool = False

    @property
    def is_class_typed(self) -> bool:
        return self.kind in (TypeKind.CLASS, TypeKind.INTERFACE)


class ParameterInspector:
    """Type metadata provider backed by ``inspect`` and ``typing``.

    Attributes:
        oracle: Used to name declared classes (and remember them)
    """

    def __init__(self, oracle: TypeOracle):
        self.oracle = oracle

    def parameters(self, target: Any, method_name: Optional[str] = None) -> List[ParameterDescriptor]:
        """Describe the parameters of ``target``.

        Args:
            target: A class or any callable
            method_name: Method of ``target`` to describe instead of its constructor

        Returns:
            Descriptors in declaration order, excluding ``self``, ``*args``
            and ``**kwargs``

        Raises:
            TypeInferenceError: When the signature cannot be inspected or
                a forward reference cannot be resolved
        """
        if method_name is not None:
            owner = target if inspect.isclass(target) else type(target)
            if not callable(getattr(owner, method_name, None)):
                raise TypeInferenceError(
                    f"{owner.__name__} has no method '{method_name}'.\n"
                    f"Hint: check the name passed to get_method()."
                )
            # Bound lookup on an instance drops self; on a class only
            # static and class methods come back without it
            hints_target = getattr(target, method_name)
            signature = self._signature(hints_target, f"{owner.__name__}.{method_name}")
            parameters = list(signature.parameters.values())
            if inspect.isclass(target) and not isinstance(
                inspect.getattr_static(owner, method_name), (staticmethod, classmethod)
            ):
                parameters = parameters[1:]
            context = owner
        elif inspect.isclass(target):
            signature = self._signature(target, target.__name__)
            parameters = list(signature.parameters.values())
            hints_target = target.__init__
            context = target
        else:
            signature = self._signature(target, getattr(target, '__qualname__', repr(target)))
            parameters = list(signature.parameters.values())
            hints_target = target
            context = None

        hints = self._resolve_type_hints(hints_target, context)

        descriptors = []
        for param in parameters:
            # Skip *args and **kwargs
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            annotation = hints.get(param.name, param.annotation)
            if isinstance(annotation, str):
                annotation = self._resolve_string_annotation(hints_target, context, param.name, annotation)

            kind, type_name = self._classify(annotation)
            has_default = param.default is not inspect.Parameter.empty
            descriptors.append(ParameterDescriptor(
                name=param.name,
                kind=kind,
                type_name=type_name,
                annotation=None if annotation is inspect.Parameter.empty else annotation,
                has_default=has_default,
                default=param.default if has_default else None,
                positional_only=param.kind == inspect.Parameter.POSITIONAL_ONLY,
            ))
        return descriptors

    @staticmethod
    def _signature(target: Any, label: str) -> inspect.Signature:
        try:
            return inspect.signature(target)
        except ValueError as e:
            raise TypeInferenceError(
                f"Cannot inspect {label}: {e}. "
                f"This may occur with built-in types or C extension classes."
            ) from e
        except TypeError as e:
            raise TypeInferenceError(
                f"Cannot get signature for {label}: {e}."
            ) from e

    @staticmethod
    def _resolve_type_hints(target: Any, context: Optional[Type]) -> Dict[str, Any]:
        """Resolve type hints, returning an empty dict when resolution fails.

        Failed hints fall back to the raw annotations, which are resolved
        one by one with _resolve_string_annotation.
        """
        localns = dict(vars(context)) if context is not None else None
        try:
            return typing.get_type_hints(target, localns=localns)
        except NameError:
            # Type not found in scope - common with local classes
            return {}
        except Exception:
            # Slot wrappers (object.__init__) and exotic annotations
            return {}

    @staticmethod
    def _resolve_string_annotation(target: Any, context: Optional[Type], param_name: str, annotation: str) -> Any:
        """Evaluate a forward reference in the defining module's namespace."""
        namespace: Dict[str, Any] = {}
        module = inspect.getmodule(context if context is not None else target)
        if module is not None:
            namespace.update(vars(module))
        if context is not None:
            namespace.update(vars(context))
        namespace.setdefault('Optional', Optional)
        namespace.setdefault('Union', Union)

        try:
            return eval(annotation, namespace)
        except NameError:
            raise TypeInferenceError(
                f"Cannot resolve forward reference '{annotation}' for parameter "
                f"'{param_name}'. The type '{annotation}' was not found in the "
                f"module's namespace.\n"
                f"Hint: Ensure '{annotation}' is defined and imported before "
                f"the dependency is resolved."
            )
        except Exception as e:
            raise TypeInferenceError(
                f"Failed to resolve forward reference '{annotation}' for parameter "
                f"'{param_name}': {e}."
            ) from e

    def _classify(self, annotation: Any) -> Tuple[TypeKind, Optional[str]]:
        if annotation is inspect.Parameter.empty:
            return TypeKind.NONE, None

        annotation = _unwrap_optional(annotation)

        if annotation is typing.Callable or annotation is collections.abc.Callable:
            return TypeKind.CALLABLE, None
        if typing.get_origin(annotation) is collections.abc.Callable:
            return TypeKind.CALLABLE, None

        if annotation is Any or getattr(annotation, "__module__", None) == "typing":
            # Any, Literal[...], Type[X] and other special forms
            return TypeKind.NONE, None
        if not inspect.isclass(annotation) or typing.get_origin(annotation) is not None:
            return TypeKind.NONE, None
        if annotation.__module__ == 'builtins':
            # Scalars and containers are never auto-wired
            return TypeKind.NONE, None

        kind = TypeKind.INTERFACE if TypeOracle.is_interface(annotation) else TypeKind.CLASS
        return kind, self.oracle.name_of(annotation)


def _unwrap_optional(annotation: Any) -> Any:
    """Optional[X] -> X; other unions are returned unchanged."""
    if typing.get_origin(annotation) is Union or _is_union_type(annotation):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _is_union_type(annotation: Any) -> bool:
    union_type = getattr(types, "UnionType", None)
    return union_type is not None and isinstance(annotation, union_type)

