"""
Argument handles

Fluent handles returned by get_constructor() and get_method().
They write straight into a Blueprint and never trigger resolution.
"""

from typing import Any, Dict, Optional

from .blueprint import ArgumentSet, Blueprint, ScheduledCall


class ArgumentHandle:
    """Base handle over one ArgumentSet"""

    def __init__(self, arguments: ArgumentSet):
        self._arguments = arguments

    def set_argument(self, name: str, value: Any) -> 'ArgumentHandle':
        """Configure one parameter (last write wins).

        ``value`` may be a literal, a zero-argument callable producing the
        value, or a class / ``"Name#tag"`` reference for class typed parameters.
        """
        self._arguments[name] = value
        return self

    def add_arguments(self, arguments: Dict[str, Any]) -> 'ArgumentHandle':
        self._arguments.update(arguments)
        return self

    @property
    def arguments(self) -> Dict[str, Any]:
        return dict(self._arguments)


class ConstructorHandle(ArgumentHandle):
    """Handle over a blueprint's constructor arguments"""

    def __init__(self, blueprint: Blueprint):
        super().__init__(blueprint.constructor_args)


class MethodHandle(ArgumentHandle):
    """Handle over a blueprint's arguments for one method"""

    def __init__(self, blueprint: Blueprint, method_name: str):
        super().__init__(blueprint.method_arguments(method_name))
        self._blueprint = blueprint
        self.method_name = method_name

    def add_call(self, overrides: Optional[Dict[str, Any]] = None) -> 'MethodHandle':
        """Schedule this method to run right after construction.

        Calls run in registration order. ``overrides`` take precedence over
        the method's configured arguments for this call only.

        Example::

            core.get_method(Mailer, "connect").set_argument("port", 25).add_call()
        """
        self._blueprint.scheduled_calls.append(
            ScheduledCall(self.method_name, dict(overrides or {}))
        )
        return self
