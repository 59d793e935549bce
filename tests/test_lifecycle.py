"""
Lifecycle Management Tests

Tests for container lifecycle management:
- Global AutoWiring start/stop
- Double start prevention (AlreadyStartedError)
- Closed AutoWiringCore instances
- Exception hierarchy
"""

import sys
import os
import unittest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from autowiring import (
    AlreadyStartedError,
    AutoWiring,
    AutoWiringCore,
    AutoWiringError,
    AutoWiringModule,
    CircularDependencyError,
    ConfigurationError,
    ContainerClosedError,
    GlobalContext,
    NotInitializedError,
    TypeInferenceError,
    UnknownTypeError,
    UnmappedAbstractTypeError,
    UnresolvableArgumentError,
)

from conftest import AutoWiringTestCase
from fixtures import Database, IDatabase, PostgresDatabase, build_report


class TestGlobalAutoWiring(AutoWiringTestCase):
    """Tests for the process-wide container"""

    def test_make_before_start_raises(self):
        with self.assertRaises(NotInitializedError) as ctx:
            AutoWiring.make(Database)

        self.assertIn("not started", str(ctx.exception))

    def test_start_and_make(self):
        module = AutoWiringModule().set_mapping(IDatabase, PostgresDatabase)

        AutoWiring.start(modules=[module])

        self.assertTrue(AutoWiring.is_started())
        self.assertIsInstance(AutoWiring.make(IDatabase), PostgresDatabase)

    def test_double_start_raises_error(self):
        AutoWiring.start()

        with self.assertRaises(AlreadyStartedError) as ctx:
            AutoWiring.start()

        self.assertIn("already started", str(ctx.exception))

    def test_stop_is_idempotent(self):
        AutoWiring.stop()
        AutoWiring.stop()

        self.assertFalse(AutoWiring.is_started())

    def test_restart_drops_cached_instances(self):
        AutoWiring.start()
        first = AutoWiring.make(Database)
        AutoWiring.stop()
        AutoWiring.start()

        self.assertIsNot(AutoWiring.make(Database), first)

    def test_get_core_configuration(self):
        AutoWiring.start()
        AutoWiring.get_core().set_mapping(IDatabase, PostgresDatabase)

        self.assertIsInstance(AutoWiring.make(IDatabase), PostgresDatabase)

    def test_load_modules_after_start(self):
        AutoWiring.start()
        AutoWiring.load_modules([AutoWiringModule().set_mapping(IDatabase, PostgresDatabase)])

        self.assertIsInstance(AutoWiring.make(IDatabase), PostgresDatabase)

    def test_invoke(self):
        AutoWiring.start()

        self.assertEqual(AutoWiring.invoke(build_report, {"title": "g"}), "g:TestDB")

    def test_global_context_is_singleton(self):
        self.assertIs(GlobalContext(), GlobalContext())


class TestClosedCore(unittest.TestCase):
    """Tests for AutoWiringCore.close()"""

    def test_make_after_close(self):
        core = AutoWiringCore()
        core.close()

        with self.assertRaises(ContainerClosedError):
            core.make(Database)

    def test_configuration_after_close(self):
        core = AutoWiringCore()
        core.close()

        with self.assertRaises(ContainerClosedError):
            core.set_mapping(IDatabase, PostgresDatabase)
        with self.assertRaises(ContainerClosedError):
            core.get_constructor(Database)

    def test_context_manager_closes(self):
        with AutoWiringCore() as core:
            core.make(Database)

        self.assertTrue(core.is_closed)

    def test_close_is_idempotent(self):
        core = AutoWiringCore()
        core.close()
        core.close()

        self.assertTrue(core.is_closed)

    def test_isolated_cores_do_not_share_state(self):
        first = AutoWiringCore().set_mapping(IDatabase, PostgresDatabase)
        second = AutoWiringCore()

        self.assertIsInstance(first.make(IDatabase), PostgresDatabase)
        with self.assertRaises(UnmappedAbstractTypeError):
            second.make(IDatabase)
        self.assertIsNot(first.make(Database), second.make(Database))


class TestExceptionHierarchy(unittest.TestCase):
    """Test that all exceptions inherit from AutoWiringError."""

    def test_all_errors_inherit_from_base(self):
        for error_type in (
            UnresolvableArgumentError,
            UnmappedAbstractTypeError,
            CircularDependencyError,
            UnknownTypeError,
            TypeInferenceError,
            ConfigurationError,
            ContainerClosedError,
            NotInitializedError,
            AlreadyStartedError,
        ):
            with self.subTest(error_type=error_type.__name__):
                self.assertIsInstance(error_type("test"), AutoWiringError)

    def test_circular_dependency_cycle_defaults_to_empty(self):
        self.assertEqual(CircularDependencyError("test").cycle, [])


if __name__ == '__main__':
    unittest.main()
