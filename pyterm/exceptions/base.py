"""
Base Exceptions

Root of the PyTerm exception hierarchy plus the configuration and
session errors raised outside the namespace.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class PyTermError(Exception):
    """
    Base exception for all PyTerm errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    Example:
        >>> raise PyTermError("Terminal failure", error_code=1001)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 0
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base


class ConfigError(PyTermError):
    """
    Configuration could not be loaded or updated.

    Raised for a missing or malformed configuration file and for
    unknown dot-notation keys.
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if config_path:
            ctx["config_path"] = config_path
        super().__init__(message, error_code=1002, context=ctx)
        self.config_path = config_path


class SessionError(PyTermError):
    """
    Invalid request against a terminal session.

    Example:
        >>> raise SessionError("Unknown theme", setting="theme")
    """

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if setting:
            ctx["setting"] = setting
        super().__init__(message, error_code=5001, context=ctx)
        self.setting = setting
