# Public API
from .api import AutoWiring
from .argument import ClassReference, Invokable, Literal
from .blueprint import Blueprint, ScheduledCall
from .core import AutoWiringCore
from .exceptions import (
    AlreadyStartedError,
    AutoWiringError,
    CircularDependencyError,
    ConfigurationError,
    ContainerClosedError,
    NotInitializedError,
    TypeInferenceError,
    UnknownTypeError,
    UnmappedAbstractTypeError,
    UnresolvableArgumentError,
)
from .global_context import GlobalContext
from .identifier import ClassIdentifier, DEFAULT_TAG
from .lifecycle import AutoWiringLifeCycle
from .module import AutoWiringModule
from .parameters import ParameterDescriptor, ParameterInspector, TypeKind

__all__ = [
    "AutoWiring",
    "AutoWiringCore",
    "GlobalContext",
    "AutoWiringModule",
    "AutoWiringLifeCycle",
    "ClassIdentifier",
    "DEFAULT_TAG",
    "Blueprint",
    "ScheduledCall",
    # Argument values
    "Literal",
    "Invokable",
    "ClassReference",
    # Metadata
    "ParameterDescriptor",
    "ParameterInspector",
    "TypeKind",
    # Exceptions
    "AutoWiringError",
    "UnresolvableArgumentError",
    "UnmappedAbstractTypeError",
    "CircularDependencyError",
    "UnknownTypeError",
    "TypeInferenceError",
    "ConfigurationError",
    "ContainerClosedError",
    "NotInitializedError",
    "AlreadyStartedError",
]

# Version will be dynamically set by poetry-dynamic-versioning
try:
    from ._version import __version__
except ImportError:
    # Fallback for development
    __version__ = '0.0.0'
