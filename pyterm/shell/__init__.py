"""
PyTerm Shell Module

Provides the terminal front end:
- Command parsing
- Per-session sudo, history and theme state
- Command dispatch against a namespace
- Interactive loop
"""

from .parser import CommandParser, ParsedCommand
from .session import Session, SudoState, TerminalState
from .dispatcher import CommandDispatcher, create_dispatcher
from .shell import Shell, create_shell

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'Session',
    'SudoState',
    'TerminalState',
    'CommandDispatcher',
    'create_dispatcher',
    'Shell',
    'create_shell',
]
