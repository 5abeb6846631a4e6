"""
Virtual Namespace Module

An in-memory, Unix-style hierarchy of files and directories:
- Flat mapping of normalized absolute paths to nodes
- Current working directory cursor
- Lookup, listing and guarded deletion
- Whole-subtree copy and move (see relocator)

Author: YSNRFD
Version: 1.0.0
"""

import time
from typing import Optional, Any, Iterator, List, Tuple

from .node import Node, NodeKind
from .path_resolver import PathResolver, ROOT
from pyterm.exceptions import (
    NotFoundError,
    NotAFileError,
    NotADirectoryError,
    DirectoryNotEmptyError,
    ProtectedRootError,
)
from pyterm.logger import get_logger


class Namespace:
    """
    Virtual namespace.

    Owns every node, keyed by normalized absolute path. The root
    directory is created on construction and can never be removed.

    ``create_directory`` and ``create_file`` overwrite silently; callers
    check existence and parents first. Everything else refuses to break
    the tree's invariants.

    Example:
        >>> ns = Namespace()
        >>> ns.create_directory('/home')
        >>> ns.create_file('/home/x.txt', b'hi')
        >>> ns.list_children('/home')
        ['x.txt']
    """

    def __init__(self, created_at: Optional[float] = None):
        self._logger = get_logger('namespace')
        self._entries: dict[str, Node] = {}
        self._cwd = ROOT
        self.create_directory(ROOT, created_at)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: str) -> bool:
        return self.exists(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    # Path handling

    def resolve(self, raw: str) -> str:
        """Resolve a user-supplied path against the current directory."""
        return PathResolver.resolve(raw, self._cwd)

    def current_path(self) -> str:
        """Get the current working directory."""
        return self._cwd

    def set_current_path(self, path: str) -> None:
        """
        Move the cursor to an existing directory.

        Raises:
            NotFoundError: If the path does not exist
            NotADirectoryError: If the path is a file
        """
        path = PathResolver.normalize(path)
        node = self._entries.get(path)
        if node is None:
            raise NotFoundError(path)
        if not node.is_directory:
            raise NotADirectoryError(path)
        self._cwd = path

    def change_directory(self, raw: str) -> str:
        """Resolve ``raw`` and make it the current directory."""
        target = self.resolve(raw)
        self.set_current_path(target)
        return target

    # Primitive mutators

    def create_directory(self, path: str, created_at: Optional[float] = None) -> None:
        """Insert (or overwrite) a directory at ``path``."""
        self._store(path, Node(NodeKind.DIRECTORY, b'', _timestamp(created_at)))

    def create_file(
        self,
        path: str,
        content: bytes = b'',
        created_at: Optional[float] = None
    ) -> None:
        """Insert (or overwrite) a file at ``path``."""
        self._store(path, Node(NodeKind.FILE, bytes(content), _timestamp(created_at)))

    def _store(self, path: str, node: Node) -> None:
        path = PathResolver.normalize(path)
        self._entries[path] = node
        self._logger.debug(
            "Stored entry",
            context={'path': path, 'kind': node.kind.name, 'size': node.size}
        )

    def insert_node(self, path: str, node: Node) -> None:
        """Place an existing node at ``path``; used for relocation."""
        self._store(path, node)

    def pop_node(self, path: str) -> Node:
        """Remove and return the node at ``path`` with no checks."""
        return self._entries.pop(PathResolver.normalize(path))

    # Queries

    def stat(self, path: str) -> Optional[Node]:
        """Get the node at a path, or None."""
        return self._entries.get(PathResolver.normalize(path))

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return self.stat(path) is not None

    def is_directory(self, path: str) -> bool:
        """Check if a path is a directory."""
        node = self.stat(path)
        return node is not None and node.is_directory

    def is_file(self, path: str) -> bool:
        """Check if a path is a file."""
        node = self.stat(path)
        return node is not None and node.is_file

    def read_content(self, path: str) -> Optional[bytes]:
        """Get a file's bytes; None for directories and missing paths."""
        node = self.stat(path)
        if node is None or not node.is_file:
            return None
        return node.content

    def read_file(self, path: str) -> bytes:
        """
        Get a file's bytes, raising when there is no file to read.

        Raises:
            NotFoundError: If the path does not exist
            NotAFileError: If the path is a directory
        """
        path = PathResolver.normalize(path)
        node = self._entries.get(path)
        if node is None:
            raise NotFoundError(path)
        if not node.is_file:
            raise NotAFileError(path, actual_type=node.kind.name.lower())
        return node.content

    def paths(self) -> List[str]:
        """All stored paths, sorted."""
        return sorted(self._entries)

    def has_children(self, path: str) -> bool:
        """Check whether anything is stored below ``path``."""
        prefix = PathResolver.child_prefix(PathResolver.normalize(path))
        return any(key != ROOT and key.startswith(prefix) for key in self._entries)

    def list_children(self, path: str) -> List[str]:
        """
        List the direct children of a directory.

        Directory names get a trailing ``/``. Scans every entry, so the
        cost grows with the size of the whole namespace.

        Args:
            path: Directory path

        Returns:
            Sorted child names
        """
        prefix = PathResolver.child_prefix(PathResolver.normalize(path))

        children = []
        for key, node in self._entries.items():
            if key == ROOT or not key.startswith(prefix):
                continue
            name = key[len(prefix):]
            if name and '/' not in name:
                children.append(name + '/' if node.is_directory else name)

        return sorted(children)

    def subtree(self, path: str) -> List[Tuple[str, Node]]:
        """
        Snapshot of ``path`` and every entry nested under it.

        The returned list is detached from the store, so the caller may
        mutate the namespace while walking it.
        """
        path = PathResolver.normalize(path)
        return [
            (key, node) for key, node in self._entries.items()
            if PathResolver.is_within(key, path)
        ]

    # Deletion

    def delete(self, path: str) -> bool:
        """
        Delete a file or an empty directory.

        Returns:
            False, without touching the store, for a missing path, the
            root, or a non-empty directory; True otherwise.
        """
        path = PathResolver.normalize(path)
        node = self._entries.get(path)

        if node is None or path == ROOT:
            return False

        if node.is_directory and self.has_children(path):
            return False

        del self._entries[path]
        self._logger.debug("Deleted entry", context={'path': path})
        return True

    def remove(self, path: str) -> None:
        """
        Delete a file or an empty directory, raising on refusal.

        Raises:
            ProtectedRootError: If path is the root
            NotFoundError: If the path does not exist
            DirectoryNotEmptyError: If the directory has entries below it
        """
        path = PathResolver.normalize(path)

        if path == ROOT:
            raise ProtectedRootError(operation="remove")
        if path not in self._entries:
            raise NotFoundError(path)
        if not self.delete(path):
            raise DirectoryNotEmptyError(path)

    # Relocation

    def copy(self, src: str, dst: str) -> int:
        """Copy the subtree at ``src`` to ``dst``. See ``relocator.copy``."""
        from .relocator import copy
        return copy(self, src, dst)

    def move(self, src: str, dst: str) -> int:
        """Move the subtree at ``src`` to ``dst``. See ``relocator.move``."""
        from .relocator import move
        return move(self, src, dst)

    def get_stats(self) -> dict[str, Any]:
        """Get namespace statistics."""
        files = [node for node in self._entries.values() if node.is_file]
        return {
            'total_entries': len(self._entries),
            'files': len(files),
            'directories': len(self._entries) - len(files),
            'total_size': sum(node.size for node in files),
            'cwd': self._cwd,
        }


def _timestamp(value: Optional[float]) -> float:
    return time.time() if value is None else value
