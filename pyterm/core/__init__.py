"""
PyTerm Core Module

Configuration for the terminal and its sessions.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    TerminalConfig,
    NamespaceConfig,
    SessionConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'TerminalConfig',
    'NamespaceConfig',
    'SessionConfig',
    'LoggingConfig',
    'get_config',
]
