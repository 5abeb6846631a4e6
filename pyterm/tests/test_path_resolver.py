"""
Path Resolver Tests

Author: YSNRFD
Version: 1.0.0
"""

import unittest

from pyterm.filesystem.path_resolver import PathResolver


SAMPLE_PATHS = [
    '', '/', '//', '.', '..', '/..', '/../..', 'a', 'a/b/', '/a//b/./c/',
    '/home/../tmp/.', '/a/b/../../..', './x/../y', '/x/./././y//z/..',
]


class TestNormalize(unittest.TestCase):
    """Test path normalization."""

    def test_basic_forms(self):
        """Slashes, dots and trailing separators are cleaned up."""
        self.assertEqual(PathResolver.normalize('/a//b/./c/'), '/a/b/c')
        self.assertEqual(PathResolver.normalize('/home/../tmp/.'), '/tmp')
        self.assertEqual(PathResolver.normalize('a/b'), '/a/b')

    def test_empty_is_root(self):
        self.assertEqual(PathResolver.normalize(''), '/')
        self.assertEqual(PathResolver.normalize('/'), '/')
        self.assertEqual(PathResolver.normalize('.'), '/')

    def test_parent_past_root_is_ignored(self):
        """Going above the root silently stays at the root."""
        self.assertEqual(PathResolver.normalize('/..'), '/')
        self.assertEqual(PathResolver.normalize('/a/../../..'), '/')
        self.assertEqual(PathResolver.normalize('/../etc'), '/etc')

    def test_idempotent(self):
        for path in SAMPLE_PATHS:
            once = PathResolver.normalize(path)
            self.assertEqual(PathResolver.normalize(once), once, path)

    def test_result_is_canonical(self):
        for path in SAMPLE_PATHS:
            result = PathResolver.normalize(path)
            self.assertTrue(result.startswith('/'))
            self.assertNotIn('//', result)
            if result != '/':
                self.assertFalse(result.endswith('/'))
            self.assertNotIn('.', result.split('/'))
            self.assertNotIn('..', result.split('/'))


class TestResolve(unittest.TestCase):
    """Test resolution against a working directory."""

    def test_relative(self):
        self.assertEqual(PathResolver.resolve('x.txt', '/home'), '/home/x.txt')
        self.assertEqual(PathResolver.resolve('../etc', '/home'), '/etc')
        self.assertEqual(PathResolver.resolve('..', '/'), '/')

    def test_absolute_ignores_cwd(self):
        self.assertEqual(PathResolver.resolve('/tmp/../bin', '/home'), '/bin')

    def test_agrees_with_normalize(self):
        """Relative resolution equals normalizing cwd + '/' + path."""
        for cwd in ('/', '/home', '/a/b'):
            for raw in ('x', '../y', './z/..', 'p//q/', '..'):
                self.assertEqual(
                    PathResolver.resolve(raw, cwd),
                    PathResolver.normalize(cwd + '/' + raw)
                )


class TestPathHelpers(unittest.TestCase):
    """Test the smaller path helpers."""

    def test_dirname_basename(self):
        self.assertEqual(PathResolver.dirname('/home/user/file.txt'), '/home/user')
        self.assertEqual(PathResolver.dirname('/home'), '/')
        self.assertEqual(PathResolver.dirname('/'), '/')
        self.assertEqual(PathResolver.basename('/home/user/file.txt'), 'file.txt')
        self.assertEqual(PathResolver.split('/etc/hosts'), ('/etc', 'hosts'))

    def test_join(self):
        self.assertEqual(PathResolver.join('/home', 'user'), '/home/user')
        self.assertEqual(PathResolver.join('/home', '/etc', 'x'), '/etc/x')

    def test_depth(self):
        self.assertEqual(PathResolver.get_depth('/'), 0)
        self.assertEqual(PathResolver.get_depth('/a/b'), 2)

    def test_is_within(self):
        self.assertTrue(PathResolver.is_within('/a', '/a'))
        self.assertTrue(PathResolver.is_within('/a/b', '/a'))
        self.assertTrue(PathResolver.is_within('/x', '/'))
        self.assertFalse(PathResolver.is_within('/ab', '/a'))
        self.assertFalse(PathResolver.is_within('/a', '/a/b'))

    def test_rebase(self):
        self.assertEqual(PathResolver.rebase('/a/b/c', '/a', '/z'), '/z/b/c')
        self.assertEqual(PathResolver.rebase('/a', '/a', '/z/y'), '/z/y')


if __name__ == '__main__':
    unittest.main()
