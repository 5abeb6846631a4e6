"""
PyTerm - A Secure Terminal Simulation

An in-memory Unix-style namespace driven by a small command shell,
implemented in Python 3.10+ using only the standard library.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .filesystem import Namespace, PathResolver, create_namespace
from .shell.dispatcher import CommandDispatcher, create_dispatcher
from .shell.shell import Shell, create_shell

__all__ = [
    'Namespace',
    'PathResolver',
    'create_namespace',
    'CommandDispatcher',
    'create_dispatcher',
    'Shell',
    'create_shell',
]
