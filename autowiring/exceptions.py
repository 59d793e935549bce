"""
AutoWiring Exceptions

Custom exception hierarchy for the AutoWiring resolver
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .identifier import ClassIdentifier


class AutoWiringError(Exception):
    """
    Base exception for all AutoWiring errors.

    All AutoWiring-specific exceptions inherit from this class.
    You can catch this to handle any resolution error generically.

    Example:
        >>> try:
        ...     service = core.make(MyService)
        ... except AutoWiringError as e:
        ...     print(f"DI error: {e}")
    """

    pass


class UnresolvableArgumentError(AutoWiringError):
    """
    Raised when a parameter value cannot be produced.

    The parameter has no configured value, no per-call override,
    no class or interface type hint to auto-wire from and no default.

    Common causes:
        - A scalar parameter (``str``, ``int``...) without a default
        - A parameter without any type hint
        - Forgetting to call ``set_argument()`` for the parameter

    Solution:
        Configure the value explicitly::

            core.get_constructor(Mailer).set_argument("host", "smtp.local")

        Or pass it for a single call::

            mailer = core.make(Mailer, {"host": "smtp.local"})
    """

    pass


class UnmappedAbstractTypeError(AutoWiringError):
    """
    Raised when the type to construct cannot be instantiated.

    This error occurs when an abstract class or Protocol is requested
    and no mapping to a concrete class exists, or when the mapping
    target is itself abstract. Mappings are applied one level only.

    Solution:
        Map the interface to an implementation::

            core.set_mapping(IDatabase, PostgresDatabase)
            db = core.make(IDatabase)  # PostgresDatabase instance
    """

    pass


class CircularDependencyError(AutoWiringError):
    """
    Raised when circular dependency is detected during resolution.

    This error occurs when type A depends on type B, and type B
    (directly or indirectly) depends on type A.

    Attributes:
        cycle: Ordered identifiers from the repeated entry back to itself,
            e.g. ``[A, B, A]``

    Example of circular dependency::

        class ServiceA:
            def __init__(self, b: ServiceB): ...

        class ServiceB:
            def __init__(self, a: ServiceA): ...  # Circular!

    Solution:
        1. Refactor to remove the circular dependency
        2. Move one side of the edge into a scheduled call
           resolved against a different instance tag
        3. Extract common functionality to a third service
    """

    def __init__(self, message: str, cycle: Optional[List['ClassIdentifier']] = None):
        super().__init__(message)
        self.cycle = list(cycle or [])


class UnknownTypeError(AutoWiringError):
    """
    Raised when a referenced class, interface or callable does not exist.

    Common causes:
        - Typo in a dotted class name (``"app.servcies.Mailer"``)
        - The defining module cannot be imported
        - A class defined inside a function referenced by name before
          it was ever handed to the container as an object

    Solution:
        Use the fully qualified name (``module.QualName``) or pass the
        class object itself::

            core.make("app.services.Mailer")
            core.make(Mailer)
    """

    pass


class TypeInferenceError(AutoWiringError):
    """
    Raised when the parameter list of a class or callable cannot be inspected.

    Common causes:
        - Built-in types or C extensions without accessible signatures
        - Forward references (string annotations) naming undefined types
        - Scheduling a call to a method that does not exist

    Solution:
        Ensure referenced types are importable from the defining module::

            class UserRepository:
                def __init__(self, db: "Database"):  # Database must exist
                    self.db = db
    """

    pass


class ConfigurationError(AutoWiringError):
    """
    Raised when a configuration rule set is malformed.

    This error occurs when ``AutoWiringModule.from_mapping()`` receives
    unknown keys or values of the wrong shape.
    """

    pass


class ContainerClosedError(AutoWiringError):
    """
    Raised when attempting to use a closed container.

    Solution:
        Create a new ``AutoWiringCore`` instance instead of reusing
        a closed one::

            with AutoWiringCore(modules=[module]) as core:
                service = core.make(MyService)  # OK
            # Container is now closed
    """

    pass


class NotInitializedError(AutoWiringError):
    """
    Raised when the global AutoWiring container is not initialized.

    Solution:
        Initialize AutoWiring before using the global API::

            AutoWiring.start(modules=[module])
            service = AutoWiring.make(MyService)
    """

    pass


class AlreadyStartedError(AutoWiringError):
    """
    Raised when AutoWiring.start() is called while already started.

    Solution:
        Call ``stop()`` before starting again, or use ``load_modules()``
        to add configuration to the running container.
    """

    pass
