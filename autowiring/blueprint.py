"""
Blueprint

Data classes representing the construction recipe of one ClassIdentifier
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .lifecycle import AutoWiringLifeCycle

# Parameter name -> raw configured value
ArgumentSet = Dict[str, Any]


@dataclass
class ScheduledCall:
    """Method invoked once right after construction"""
    method_name: str
    overrides: ArgumentSet = field(default_factory=dict)


@dataclass
class Blueprint:
    """Construction recipe"""
    constructor_args: ArgumentSet = field(default_factory=dict)
    method_args: Dict[str, ArgumentSet] = field(default_factory=dict)
    scheduled_calls: List[ScheduledCall] = field(default_factory=list)
    lifecycle: Optional[AutoWiringLifeCycle] = None  # None means not configured (singleton)
    shared_instance: Optional[Any] = None
    has_shared_instance: bool = False

    @property
    def is_singleton(self) -> bool:
        return self.lifecycle != AutoWiringLifeCycle.TRANSIENT

    def method_arguments(self, method_name: str) -> ArgumentSet:
        return self.method_args.setdefault(method_name, {})

    def share(self, instance: Any) -> None:
        self.shared_instance = instance
        self.has_shared_instance = True

    def merge(self, other: 'Blueprint') -> None:
        """Fold another blueprint's configuration into this one.

        Arguments are updated (last write wins), scheduled calls appended,
        lifecycle and shared instance overwritten only when set on ``other``.
        """
        self.constructor_args.update(other.constructor_args)
        for method_name, arguments in other.method_args.items():
            self.method_arguments(method_name).update(arguments)
        self.scheduled_calls.extend(
            ScheduledCall(call.method_name, dict(call.overrides))
            for call in other.scheduled_calls
        )
        if other.lifecycle is not None:
            self.lifecycle = other.lifecycle
        if other.has_shared_instance:
            self.share(other.shared_instance)
