"""
Subtree Relocator Tests

Author: YSNRFD
Version: 1.0.0
"""

import unittest

from pyterm.exceptions import (
    NotFoundError,
    AlreadyExistsError,
    InvalidDestinationError,
    ProtectedRootError,
)
from pyterm.filesystem import Namespace, copy, move


def build_tree():
    ns = Namespace()
    ns.create_directory('/a')
    ns.create_file('/a/f.txt', b'one')
    ns.create_directory('/a/sub')
    ns.create_file('/a/sub/g.txt', b'two')
    ns.create_directory('/b')
    return ns


def snapshot(ns):
    return {path: (ns.stat(path).kind, ns.stat(path).content) for path in ns.paths()}


class TestCopy(unittest.TestCase):
    """Test subtree copy."""

    def setUp(self):
        self.ns = build_tree()

    def test_copy_directory(self):
        count = copy(self.ns, '/a', '/b/a2')

        self.assertEqual(count, 4)
        self.assertTrue(self.ns.is_directory('/b/a2'))
        self.assertTrue(self.ns.is_directory('/b/a2/sub'))
        self.assertEqual(self.ns.read_content('/b/a2/f.txt'), b'one')
        self.assertEqual(self.ns.read_content('/b/a2/sub/g.txt'), b'two')

    def test_source_untouched(self):
        before = {p: v for p, v in snapshot(self.ns).items() if p.startswith('/a')}
        copy(self.ns, '/a', '/c')
        after = {p: v for p, v in snapshot(self.ns).items() if p.startswith('/a')}
        self.assertEqual(after, before)

    def test_copies_are_independent_nodes(self):
        copy(self.ns, '/a', '/c')
        self.assertIsNot(self.ns.stat('/a/f.txt'), self.ns.stat('/c/f.txt'))

    def test_copy_single_file(self):
        self.assertEqual(copy(self.ns, '/a/f.txt', '/a/f2.txt'), 1)
        self.assertEqual(self.ns.read_content('/a/f2.txt'), b'one')
        self.assertEqual(self.ns.list_children('/a'), ['f.txt', 'f2.txt', 'sub/'])

    def test_namespace_method(self):
        self.assertEqual(self.ns.copy('/a/sub', '/b/sub'), 2)
        self.assertTrue(self.ns.exists('/b/sub/g.txt'))


class TestMove(unittest.TestCase):
    """Test subtree move."""

    def setUp(self):
        self.ns = build_tree()

    def test_move_directory(self):
        total = len(self.ns)
        count = move(self.ns, '/a', '/c')

        self.assertEqual(count, 4)
        self.assertEqual(len(self.ns), total)
        self.assertFalse(any(p == '/a' or p.startswith('/a/') for p in self.ns.paths()))
        for suffix in ('', '/f.txt', '/sub', '/sub/g.txt'):
            self.assertTrue(self.ns.exists('/c' + suffix), suffix)
        self.assertEqual(self.ns.read_content('/c/sub/g.txt'), b'two')

    def test_move_into_sibling_with_shared_prefix(self):
        """'/ab' only shares a string prefix with '/a'; it is not inside it."""
        move(self.ns, '/a', '/ab')
        self.assertTrue(self.ns.exists('/ab/sub/g.txt'))
        self.assertFalse(self.ns.exists('/a'))

    def test_cwd_follows_moved_subtree(self):
        self.ns.set_current_path('/a/sub')
        move(self.ns, '/a', '/b/moved')
        self.assertEqual(self.ns.current_path(), '/b/moved/sub')

    def test_cwd_equal_to_source(self):
        self.ns.set_current_path('/a')
        move(self.ns, '/a', '/z')
        self.assertEqual(self.ns.current_path(), '/z')

    def test_cwd_outside_is_unchanged(self):
        self.ns.set_current_path('/b')
        move(self.ns, '/a', '/c')
        self.assertEqual(self.ns.current_path(), '/b')

    def test_rename_file(self):
        self.ns.move('/a/f.txt', '/b/renamed.txt')
        self.assertFalse(self.ns.exists('/a/f.txt'))
        self.assertEqual(self.ns.read_content('/b/renamed.txt'), b'one')


class TestPreconditions(unittest.TestCase):
    """Refused relocations raise a specific error and change nothing."""

    def setUp(self):
        self.ns = build_tree()
        self.before = snapshot(self.ns)

    def assertRefused(self, error, src, dst):
        for operation in (copy, move):
            with self.assertRaises(error):
                operation(self.ns, src, dst)
            self.assertEqual(snapshot(self.ns), self.before)

    def test_into_own_subtree(self):
        self.assertRefused(InvalidDestinationError, '/a', '/a/b')
        self.assertRefused(InvalidDestinationError, '/a', '/a/sub/deeper')

    def test_root_source(self):
        self.assertRefused(ProtectedRootError, '/', '/x')
        self.assertRefused(ProtectedRootError, '/', '/a')

    def test_missing_source(self):
        self.assertRefused(NotFoundError, '/missing', '/x')

    def test_existing_destination(self):
        self.assertRefused(AlreadyExistsError, '/a', '/b')
        self.assertRefused(AlreadyExistsError, '/a', '/a')

    def test_destination_parent_missing(self):
        self.assertRefused(InvalidDestinationError, '/a/f.txt', '/nope/f.txt')

    def test_destination_parent_is_file(self):
        self.assertRefused(InvalidDestinationError, '/b', '/a/f.txt/b')


if __name__ == '__main__':
    unittest.main()
