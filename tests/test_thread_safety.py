"""
Thread Safety Tests

Tests that each thread owns its resolution stack.
The registry itself is not synchronized; these tests only use
transient blueprints so threads never race on the instance store.
"""

import sys
import os
import threading
import unittest
import concurrent.futures

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from autowiring import AutoWiringCore

from fixtures import Database


class Rendezvous:
    """Blocks until two threads are constructing it at the same time."""

    barrier = threading.Barrier(2, timeout=5)

    def __init__(self, db: Database):
        Rendezvous.barrier.wait()
        self.db = db
        self.thread_id = threading.current_thread().ident


class TestResolutionStackIsolation(unittest.TestCase):
    """Test ContextVar isolation between threads."""

    def setUp(self):
        Rendezvous.barrier.reset()

    def test_concurrent_make_of_same_identifier(self):
        """Two threads inside the same constructor do not see a cycle."""
        core = AutoWiringCore()
        core.singleton(Rendezvous, False)
        core.singleton(Database, False)

        with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
            futures = [executor.submit(core.make, Rendezvous) for _ in range(2)]
            results = [future.result(timeout=10) for future in futures]

        self.assertEqual(len({r.thread_id for r in results}), 2)
        self.assertIsNot(results[0], results[1])

    def test_stack_not_visible_from_other_thread(self):
        core = AutoWiringCore()
        core.singleton(Database, False)
        errors = []

        def resolve():
            try:
                core.make(Database)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=resolve) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])


if __name__ == '__main__':
    unittest.main()
