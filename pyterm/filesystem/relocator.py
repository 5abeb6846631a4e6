"""
Subtree Relocator Module

Copies and moves whole subtrees inside a namespace by rewriting the
path prefix of every entry at or below the source.

Checks run in a fixed order and all of them happen before the first
write, so a refused operation leaves the namespace untouched.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from .node import Node
from .path_resolver import PathResolver, ROOT
from pyterm.exceptions import (
    NotFoundError,
    AlreadyExistsError,
    InvalidDestinationError,
    ProtectedRootError,
)
from pyterm.logger import get_logger

if TYPE_CHECKING:
    from .namespace import Namespace


_logger = get_logger('relocator')


def check_relocation(namespace: Namespace, src: str, dst: str, operation: str) -> Tuple[str, str]:
    """
    Validate a copy or move request.

    Args:
        namespace: Namespace to operate on
        src: Source path (absolute)
        dst: Destination path (absolute)
        operation: 'copy' or 'move', recorded on errors

    Returns:
        Normalized (src, dst)

    Raises:
        ProtectedRootError: If src is the root
        NotFoundError: If src does not exist
        AlreadyExistsError: If dst already exists
        InvalidDestinationError: If dst's parent is not a directory,
            or dst is src or lies under it
    """
    src = PathResolver.normalize(src)
    dst = PathResolver.normalize(dst)

    if src == ROOT:
        raise ProtectedRootError(operation=operation)

    if not namespace.exists(src):
        raise NotFoundError(src)

    if namespace.exists(dst):
        raise AlreadyExistsError(dst)

    parent = PathResolver.dirname(dst)
    if not namespace.is_directory(parent):
        raise InvalidDestinationError(dst, reason=f"parent {parent} is not a directory")

    if namespace.is_directory(src) and PathResolver.is_within(dst, src):
        raise InvalidDestinationError(dst, reason=f"inside source {src}")

    return src, dst


def _remap(entries: List[Tuple[str, Node]], src: str, dst: str) -> List[Tuple[str, Node]]:
    return [(PathResolver.rebase(path, src, dst), node) for path, node in entries]


def copy(namespace: Namespace, src: str, dst: str) -> int:
    """
    Copy ``src`` and everything under it to ``dst``.

    Every node is cloned, so later changes to either side do not leak
    into the other. The source subtree is left as it was.

    Returns:
        Number of entries created
    """
    src, dst = check_relocation(namespace, src, dst, 'copy')

    remapped = _remap(namespace.subtree(src), src, dst)
    for path, node in remapped:
        namespace.insert_node(path, node.clone())

    _logger.info("Copied subtree", context={'src': src, 'dst': dst, 'entries': len(remapped)})
    return len(remapped)


def move(namespace: Namespace, src: str, dst: str) -> int:
    """
    Move ``src`` and everything under it to ``dst``.

    The matching entries are collected first, every old key is removed,
    and only then are the nodes re-inserted under their new paths. If
    the current directory was inside the moved subtree it follows it.

    Returns:
        Number of entries moved
    """
    src, dst = check_relocation(namespace, src, dst, 'move')

    entries = namespace.subtree(src)
    for path, _ in entries:
        namespace.pop_node(path)

    for path, node in _remap(entries, src, dst):
        namespace.insert_node(path, node)

    cwd = namespace.current_path()
    if PathResolver.is_within(cwd, src):
        namespace.set_current_path(PathResolver.rebase(cwd, src, dst))

    _logger.info("Moved subtree", context={'src': src, 'dst': dst, 'entries': len(entries)})
    return len(entries)
