"""
Argument values

A configured argument is one of three things:

- Literal: passed through unchanged
- Invokable: called with no arguments to produce the value, unless the
  parameter itself expects a callable
- ClassReference: a class object or a ``"Name"`` / ``"Name#tag"`` string,
  resolved through ``make`` when the parameter is class or interface typed
  and passed through unchanged otherwise

resolve_argument() applies these rules together with the type/default
fallback used when nothing was configured for a parameter.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

from .exceptions import (
    TypeInferenceError,
    UnknownTypeError,
    UnmappedAbstractTypeError,
    UnresolvableArgumentError,
)
from .identifier import ClassIdentifier, TAG_SEPARATOR
from .parameters import ParameterDescriptor, TypeKind

logger = logging.getLogger(__name__)

# make(reference) -> object
MakeFunction = Callable[[Union[str, type, ClassIdentifier]], Any]


@dataclass(frozen=True)
class Literal:
    value: Any


@dataclass(frozen=True)
class Invokable:
    function: Callable[[], Any]


@dataclass(frozen=True)
class ClassReference:
    reference: Union[str, type]


RawArgumentValue = Union[Literal, Invokable, ClassReference]


def wrap(value: Any) -> RawArgumentValue:
    """Classify a configured value.

    Class objects always become ClassReference, so on a parameter that is not
    class or interface typed they are passed through rather than called.
    Wrap them in Invokable to call them instead.
    """
    if isinstance(value, (Literal, Invokable, ClassReference)):
        return value
    if inspect.isclass(value) or isinstance(value, str):
        return ClassReference(value)
    if callable(value):
        return Invokable(value)
    return Literal(value)


def resolve_argument(
    parameter: ParameterDescriptor,
    configured: Any,
    is_configured: bool,
    make: MakeFunction,
) -> Any:
    """Produce the concrete value for one parameter.

    Args:
        parameter: Metadata of the target parameter
        configured: Raw configured value (override or blueprint entry)
        is_configured: False when nothing was configured for the parameter
        make: Recursive entry point of the resolution engine

    Returns:
        The value to pass

    Raises:
        UnresolvableArgumentError: When nothing was configured, the parameter
            is not class typed and has no default
    """
    if not is_configured:
        return _resolve_unconfigured(parameter, make)

    raw = wrap(configured)

    if isinstance(raw, Invokable):
        if parameter.kind == TypeKind.CALLABLE:
            return raw.function
        return raw.function()

    if isinstance(raw, ClassReference):
        if parameter.is_class_typed:
            return make(_qualify(raw.reference, parameter))
        return raw.reference

    return raw.value


def _resolve_unconfigured(parameter: ParameterDescriptor, make: MakeFunction) -> Any:
    if parameter.is_class_typed:
        try:
            return make(parameter.type_name)
        except (
            TypeInferenceError,
            UnknownTypeError,
            UnmappedAbstractTypeError,
            UnresolvableArgumentError,
        ) as e:
            if not parameter.has_default:
                raise
            logger.debug(
                "Falling back to default for '%s' (%s): %s",
                parameter.name, parameter.type_name, e,
            )
            return parameter.default

    if parameter.has_default:
        return parameter.default

    raise UnresolvableArgumentError(
        f"Cannot resolve parameter '{parameter.name}': no value configured, "
        f"no class type hint and no default value.\n"
        f"Hint: set_argument('{parameter.name}', ...) or pass it as an override."
    )


def _qualify(reference: Union[str, type], parameter: ParameterDescriptor) -> Union[str, type]:
    """``"#tag"`` names the parameter's own declared type."""
    if isinstance(reference, str) and reference.startswith(TAG_SEPARATOR):
        return ClassIdentifier(parameter.type_name, reference[1:])
    return reference
