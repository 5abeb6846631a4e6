"""
Path Resolver Module

Handles path resolution and manipulation in the virtual namespace.
Resolution never fails: it always yields some normalized absolute
path, and existence is checked by the caller.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List, Tuple


ROOT = '/'


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return '/' + '/'.join(self.components)
        return '/'.join(self.components) if self.components else '.'


class PathResolver:
    """
    Resolves and manipulates namespace paths.

    Handles:
    - Absolute and relative paths
    - . and .. components
    - Path normalization

    ``..`` at the root is a silent no-op, so ``cd ..`` from ``/``
    stays at ``/``.
    """

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with components
        """
        is_absolute = path.startswith('/')

        components = [c for c in path.split('/') if c and c != '.']

        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def normalize(path: str) -> str:
        """
        Normalize a path by resolving . and ..

        The result is always absolute: relative input is treated as
        rooted at ``/``.

        Args:
            path: Path to normalize

        Returns:
            Normalized absolute path string
        """
        stack: List[str] = []

        for component in PathResolver.parse(path).components:
            if component == '..':
                if stack:
                    stack.pop()
            else:
                stack.append(component)

        return '/' + '/'.join(stack)

    @staticmethod
    def resolve(path: str, cwd: str = ROOT) -> str:
        """
        Resolve a path relative to a current working directory.

        Args:
            path: Path to resolve
            cwd: Current working directory

        Returns:
            Absolute resolved path
        """
        if PathResolver.is_absolute(path):
            return PathResolver.normalize(path)

        return PathResolver.normalize(cwd + '/' + path)

    @staticmethod
    def join(*paths: str) -> str:
        """
        Join multiple path components.

        A later absolute component discards everything before it.
        """
        if not paths:
            return ROOT

        result = paths[0]

        for path in paths[1:]:
            if path.startswith('/'):
                result = path
            else:
                result = result.rstrip('/') + '/' + path

        return PathResolver.normalize(result)

    @staticmethod
    def dirname(path: str) -> str:
        """Get the parent directory of a path (``/`` for the root)."""
        normalized = PathResolver.normalize(path)

        if normalized == ROOT:
            return ROOT

        return normalized.rsplit('/', 1)[0] or ROOT

    @staticmethod
    def basename(path: str) -> str:
        """Get the final component of a path (``/`` for the root)."""
        normalized = PathResolver.normalize(path)

        if normalized == ROOT:
            return ROOT

        return normalized.rsplit('/', 1)[1]

    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """Split a path into (dirname, basename)."""
        return (PathResolver.dirname(path), PathResolver.basename(path))

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith('/')

    @staticmethod
    def get_depth(path: str) -> int:
        """Number of components in the normalized path."""
        return len(PathResolver.parse(PathResolver.normalize(path)).components)

    @staticmethod
    def child_prefix(path: str) -> str:
        """Prefix shared by every path strictly below ``path``."""
        return path if path == ROOT else path + '/'

    @staticmethod
    def is_within(path: str, ancestor: str) -> bool:
        """
        Check whether ``path`` equals ``ancestor`` or is nested under it.

        Both arguments must already be normalized.
        """
        return path == ancestor or path.startswith(PathResolver.child_prefix(ancestor))

    @staticmethod
    def rebase(path: str, old_prefix: str, new_prefix: str) -> str:
        """
        Replace the ``old_prefix`` subtree root of ``path`` with ``new_prefix``.

        ``path`` must be within ``old_prefix``.
        """
        if path == old_prefix:
            return new_prefix
        suffix = path[len(PathResolver.child_prefix(old_prefix)):]
        return PathResolver.child_prefix(new_prefix) + suffix
