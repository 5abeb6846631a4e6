"""
PyTerm Virtual Namespace Module

An in-memory Unix-style file hierarchy:
- Path resolution and normalization
- Flat path-to-node store with a working directory cursor
- Guarded deletion
- Subtree copy and move
- Initial tree seeding
"""

from .node import Node, NodeKind
from .path_resolver import PathResolver, ParsedPath, ROOT
from .namespace import Namespace
from .relocator import copy, move, check_relocation
from .seed import seed_namespace, create_namespace, SAMPLE_FILES

__all__ = [
    # Node
    'Node',
    'NodeKind',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    'ROOT',
    # Namespace
    'Namespace',
    # Relocator
    'copy',
    'move',
    'check_relocation',
    # Seeding
    'seed_namespace',
    'create_namespace',
    'SAMPLE_FILES',
]
