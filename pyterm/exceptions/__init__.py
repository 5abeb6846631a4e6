"""
PyTerm Exception Hierarchy

All custom exceptions inherit from PyTermError as the base class.

Architecture:
    PyTermError (Base)
    ├── ConfigError
    ├── SessionError
    └── NamespaceError
        ├── NotFoundError
        ├── AlreadyExistsError
        ├── ProtectedRootError
        ├── DirectoryNotEmptyError
        ├── InvalidDestinationError
        ├── NotAFileError
        └── NotADirectoryError
"""

from .base import (
    PyTermError,
    ConfigError,
    SessionError,
)

from .fs_exceptions import (
    NamespaceError,
    NotFoundError,
    AlreadyExistsError,
    ProtectedRootError,
    DirectoryNotEmptyError,
    InvalidDestinationError,
    NotAFileError,
    NotADirectoryError,
)

__all__ = [
    # Base exceptions
    "PyTermError",
    "ConfigError",
    "SessionError",
    # Namespace exceptions
    "NamespaceError",
    "NotFoundError",
    "AlreadyExistsError",
    "ProtectedRootError",
    "DirectoryNotEmptyError",
    "InvalidDestinationError",
    "NotAFileError",
    "NotADirectoryError",
]
