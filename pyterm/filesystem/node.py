"""
Node Module

A namespace entry: either a file with byte content or a directory.

Author: YSNRFD
Version: 1.0.0
"""

import time
from dataclasses import dataclass, field, replace
from enum import Enum


class NodeKind(Enum):
    """Kinds of namespace entries."""
    FILE = 1
    DIRECTORY = 2


@dataclass
class Node:
    """
    A file or directory stored in the namespace.

    Directories carry an empty payload. ``created_at`` is informational
    and never used for ordering.
    """

    kind: NodeKind
    content: bytes = b''
    created_at: float = field(default_factory=time.time)

    @property
    def is_directory(self) -> bool:
        return self.kind == NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE

    @property
    def size(self) -> int:
        return len(self.content)

    def clone(self) -> 'Node':
        """Return an independent copy of this node."""
        return replace(self, content=bytes(self.content))
