"""
Namespace Store Tests

Author: YSNRFD
Version: 1.0.0
"""

import unittest

from pyterm.exceptions import (
    NotFoundError,
    NotAFileError,
    NotADirectoryError,
    DirectoryNotEmptyError,
    ProtectedRootError,
)
from pyterm.filesystem import Namespace, NodeKind


def snapshot(ns):
    return {path: (ns.stat(path).kind, ns.stat(path).content) for path in ns.paths()}


class TestNamespaceBasics(unittest.TestCase):
    """Test creation and lookup."""

    def setUp(self):
        self.ns = Namespace()
        self.ns.create_directory('/home')

    def test_root_exists(self):
        ns = Namespace()
        self.assertEqual(len(ns), 1)
        self.assertTrue(ns.is_directory('/'))
        self.assertEqual(ns.current_path(), '/')

    def test_create_and_read_file(self):
        self.ns.create_file('/home/x.txt', b'hi', 12.5)

        self.assertTrue(self.ns.is_file('/home/x.txt'))
        self.assertFalse(self.ns.is_directory('/home/x.txt'))
        self.assertEqual(self.ns.read_content('/home/x.txt'), b'hi')
        self.assertEqual(self.ns.stat('/home/x.txt').created_at, 12.5)
        self.assertEqual(self.ns.stat('/home/x.txt').kind, NodeKind.FILE)

    def test_read_content_of_non_files(self):
        self.assertIsNone(self.ns.read_content('/home'))
        self.assertIsNone(self.ns.read_content('/missing'))

    def test_read_file_errors(self):
        self.ns.create_file('/home/f', b'x')

        self.assertEqual(self.ns.read_file('/home/f'), b'x')
        with self.assertRaises(NotFoundError):
            self.ns.read_file('/home/missing')
        with self.assertRaises(NotAFileError):
            self.ns.read_file('/home')

    def test_missing_path_lookups_are_false(self):
        self.assertFalse(self.ns.exists('/nope'))
        self.assertFalse(self.ns.is_file('/nope'))
        self.assertFalse(self.ns.is_directory('/nope'))
        self.assertNotIn('/nope', self.ns)

    def test_create_overwrites_silently(self):
        """The primitives do not guard against clobbering."""
        self.ns.create_file('/home/x.txt', b'one')
        self.ns.create_file('/home/x.txt', b'two')
        self.assertEqual(self.ns.read_content('/home/x.txt'), b'two')

        self.ns.create_directory('/home/x.txt')
        self.assertTrue(self.ns.is_directory('/home/x.txt'))

    def test_keys_are_normalized(self):
        self.ns.create_directory('/home//docs/')
        self.assertIn('/home/docs', self.ns.paths())
        self.assertTrue(self.ns.exists('/home/docs/'))

    def test_stats(self):
        self.ns.create_file('/home/a', b'123')
        self.ns.create_file('/home/b', b'45')

        stats = self.ns.get_stats()
        self.assertEqual(stats['total_entries'], 4)
        self.assertEqual(stats['files'], 2)
        self.assertEqual(stats['directories'], 2)
        self.assertEqual(stats['total_size'], 5)


class TestListing(unittest.TestCase):
    """Test directory listing."""

    def test_sorted_and_suffixed(self):
        ns = Namespace()
        ns.create_directory('/d')
        ns.create_file('/d/b', b'')
        ns.create_file('/d/a', b'')
        ns.create_directory('/d/c')
        ns.create_file('/d/c/deep', b'')

        self.assertEqual(ns.list_children('/d'), ['a', 'b', 'c/'])

    def test_root_listing(self):
        ns = Namespace()
        ns.create_directory('/home')
        ns.create_directory('/etc')
        ns.create_file('/etc/hosts', b'')

        self.assertEqual(ns.list_children('/'), ['etc/', 'home/'])

    def test_sibling_prefix_not_listed(self):
        ns = Namespace()
        ns.create_directory('/a')
        ns.create_directory('/ab')
        ns.create_file('/ab/x', b'')

        self.assertEqual(ns.list_children('/a'), [])

    def test_empty_directory(self):
        ns = Namespace()
        ns.create_directory('/empty')
        self.assertEqual(ns.list_children('/empty'), [])


class TestDeletion(unittest.TestCase):
    """Test guarded deletion."""

    def setUp(self):
        self.ns = Namespace()
        self.ns.create_directory('/home')

    def test_walkthrough(self):
        """Copy, delete the original, and only then remove the directory."""
        ns = self.ns
        ns.create_file('/home/x.txt', b'hi')
        ns.copy('/home/x.txt', '/home/y.txt')
        self.assertEqual(ns.read_content('/home/y.txt'), b'hi')

        self.assertTrue(ns.delete('/home/x.txt'))
        self.assertFalse(ns.delete('/home'))
        self.assertTrue(ns.exists('/home/y.txt'))
        self.assertTrue(ns.is_directory('/'))

        self.assertTrue(ns.delete('/home/y.txt'))
        self.assertTrue(ns.delete('/home'))
        self.assertEqual(ns.paths(), ['/'])

    def test_non_empty_guard_leaves_store_unchanged(self):
        self.ns.create_directory('/home/docs')
        self.ns.create_file('/home/docs/a.txt', b'data')
        before = snapshot(self.ns)

        self.assertFalse(self.ns.delete('/home'))
        self.assertFalse(self.ns.delete('/home/docs'))
        self.assertEqual(snapshot(self.ns), before)

    def test_missing_and_root(self):
        self.assertFalse(self.ns.delete('/missing'))
        self.assertFalse(self.ns.delete('/'))
        self.assertTrue(self.ns.exists('/'))

    def test_remove_raises(self):
        self.ns.create_file('/home/a', b'')

        with self.assertRaises(ProtectedRootError):
            self.ns.remove('/')
        with self.assertRaises(NotFoundError):
            self.ns.remove('/missing')
        with self.assertRaises(DirectoryNotEmptyError):
            self.ns.remove('/home')

        self.ns.remove('/home/a')
        self.assertFalse(self.ns.exists('/home/a'))


class TestCurrentPath(unittest.TestCase):
    """Test the working directory cursor."""

    def setUp(self):
        self.ns = Namespace()
        self.ns.create_directory('/home')
        self.ns.create_file('/home/f', b'')

    def test_set_current_path(self):
        self.ns.set_current_path('/home')
        self.assertEqual(self.ns.current_path(), '/home')
        self.assertEqual(self.ns.resolve('f'), '/home/f')

    def test_set_current_path_rejects_bad_targets(self):
        with self.assertRaises(NotFoundError):
            self.ns.set_current_path('/missing')
        with self.assertRaises(NotADirectoryError):
            self.ns.set_current_path('/home/f')
        self.assertEqual(self.ns.current_path(), '/')

    def test_parent_of_root_is_root(self):
        self.assertEqual(self.ns.change_directory('..'), '/')
        self.assertEqual(self.ns.current_path(), '/')

    def test_change_directory_relative(self):
        self.ns.change_directory('home')
        self.ns.change_directory('../home/.')
        self.assertEqual(self.ns.current_path(), '/home')


if __name__ == '__main__':
    unittest.main()
