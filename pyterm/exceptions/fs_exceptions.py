"""
Namespace Exceptions

Exceptions raised by the virtual namespace, the path store and the
subtree relocator. Every user-triggered failure maps to exactly one of
these; the command dispatcher turns them into one-line messages.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .base import PyTermError


class NamespaceError(PyTermError):
    """
    Base exception for all namespace-related errors.

    Attributes:
        message: Human-readable error description
        path: Path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 4000, context=context)
        self.path = path
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class NotFoundError(NamespaceError):
    """
    The path does not exist where existence was required.

    Example:
        >>> raise NotFoundError("/home/missing.txt")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"No such file or directory: {path}",
            path=path,
            error_code=4001,
            context=context
        )


class AlreadyExistsError(NamespaceError):
    """
    A create, copy or move destination is already taken.

    Example:
        >>> raise AlreadyExistsError("/home/notes.txt")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File exists: {path}",
            path=path,
            error_code=4002,
            context=context
        )


class ProtectedRootError(NamespaceError):
    """
    The root path was used where it is not allowed.

    The root is never deleted, moved, or copied as a source.
    """

    def __init__(
        self,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message="Operation not permitted on root",
            path="/",
            error_code=4003,
            context=ctx
        )
        self.operation = operation


class DirectoryNotEmptyError(NamespaceError):
    """
    Directory is not empty.

    Example:
        >>> raise DirectoryNotEmptyError("/home")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Directory not empty: {path}",
            path=path,
            error_code=4004,
            context=context
        )


class InvalidDestinationError(NamespaceError):
    """
    Copy or move destination is unusable.

    Raised when the destination's parent is missing or not a directory,
    or when the destination equals or lies under the source.

    Example:
        >>> raise InvalidDestinationError("/a/b", reason="inside source")
    """

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid destination: {path}",
            path=path,
            error_code=4006,
            context=ctx
        )
        self.reason = reason


class NotAFileError(NamespaceError):
    """
    Path is not a regular file.

    Example:
        >>> raise NotAFileError("/home")
    """

    def __init__(
        self,
        path: str,
        actual_type: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if actual_type:
            ctx["actual_type"] = actual_type
        super().__init__(
            message=f"Is a directory: {path}",
            path=path,
            error_code=4008,
            context=ctx
        )
        self.actual_type = actual_type


class NotADirectoryError(NamespaceError):
    """
    Path is not a directory.

    Example:
        >>> raise NotADirectoryError("/home/projects.txt")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4009,
            context=context
        )
