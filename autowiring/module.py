"""
AutoWiringModule

This module provides the staged configuration unit. An AutoWiringModule
records mappings, factories, arguments, scheduled calls, singleton flags
and shared instances without resolving anything; the records are folded
into a container with load_modules().

Example::

    module = AutoWiringModule()
    with module:
        module.set_mapping(IDatabase, PostgresDatabase)
        module.get_constructor(PostgresDatabase).set_argument("dsn", "postgres://db")
        module.get_method(Mailer, "connect").add_call()

    core = AutoWiringCore(modules=[module])

Rule sets kept as plain data (JSON, TOML...) are loaded with from_mapping().
"""

from typing import Any, Dict, List, Mapping, Optional

from .configuration import ConfigurationMixin
from .exceptions import ConfigurationError
from .registry import BlueprintRegistry

_RULE_KEYS = {"mappings", "singletons", "constructors", "methods"}
_METHOD_KEYS = {"arguments", "calls"}


class AutoWiringModule(ConfigurationMixin):
    """Staged configuration for an AutoWiring container.

    Attributes:
        registry: The staged registry merged by load_modules()
    """

    def __init__(self):
        self._registry = BlueprintRegistry()

    @property
    def registry(self) -> BlueprintRegistry:
        return self._registry

    def __enter__(self) -> 'AutoWiringModule':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        return False

    @classmethod
    def from_mapping(cls, rules: Mapping[str, Any]) -> 'AutoWiringModule':
        """Build a module from a plain rule set.

        Args:
            rules: Mapping with any of the keys ``mappings``
                (abstract name -> concrete name), ``singletons``
                (identifier -> bool), ``constructors`` (identifier ->
                {parameter: value}) and ``methods`` (identifier ->
                {method: {"arguments": {...}, "calls": [overrides, ...]}})

        Raises:
            ConfigurationError: When the rule set has unknown keys or
                values of the wrong shape

        Example::

            module = AutoWiringModule.from_mapping({
                "mappings": {"app.db.IDatabase": "app.db.PostgresDatabase"},
                "singletons": {"app.mail.Mailer": False},
                "constructors": {"app.db.PostgresDatabase": {"dsn": "postgres://db"}},
                "methods": {"app.mail.Mailer": {"connect": {"calls": [{}]}}},
            })
        """
        _check_keys("rules", rules, _RULE_KEYS)
        module = cls()

        module.add_mappings(_section(rules, "mappings"))

        for reference, enabled in _section(rules, "singletons").items():
            if not isinstance(enabled, bool):
                raise ConfigurationError(
                    f"singletons['{reference}'] must be a bool, got {type(enabled).__name__}"
                )
            module.singleton(reference, enabled)

        for reference, arguments in _section(rules, "constructors").items():
            module.get_constructor(reference).add_arguments(_as_dict(f"constructors['{reference}']", arguments))

        for reference, methods in _section(rules, "methods").items():
            for method_name, method_rules in _as_dict(f"methods['{reference}']", methods).items():
                label = f"methods['{reference}']['{method_name}']"
                _check_keys(label, method_rules, _METHOD_KEYS)
                handle = module.get_method(reference, method_name)
                handle.add_arguments(_as_dict(f"{label}['arguments']", method_rules.get("arguments", {})))
                for overrides in _as_list(f"{label}['calls']", method_rules.get("calls", [])):
                    handle.add_call(_as_dict(f"{label}['calls']", overrides))

        return module


def _section(rules: Mapping[str, Any], key: str) -> Dict[str, Any]:
    return _as_dict(key, rules.get(key, {}))


def _check_keys(label: str, value: Any, allowed: set) -> None:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} must be a mapping, got {type(value).__name__}")
    unknown = set(value) - allowed
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in {label}: {', '.join(sorted(map(str, unknown)))}. "
            f"Allowed keys: {', '.join(sorted(allowed))}"
        )


def _as_dict(label: str, value: Optional[Any]) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} must be a mapping, got {type(value).__name__}")
    return dict(value)


def _as_list(label: str, value: Any) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(f"{label} must be a list, got {type(value).__name__}")
    return list(value)
