"""
Terminal Session State

Per-session state that lives next to the namespace: sudo
authentication, command history and the selected theme.

Author: YSNRFD
Version: 1.0.0
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional, List

from pyterm.core.config_loader import SessionConfig
from pyterm.exceptions import SessionError


@dataclass
class SudoState:
    """Sudo authentication and an optional command awaiting the password."""
    authenticated: bool = False
    waiting_for_password: bool = False
    pending_command: Optional[str] = None

    def request_password(self, command: Optional[str]) -> None:
        self.waiting_for_password = True
        self.pending_command = command

    def grant(self) -> Optional[str]:
        """Mark the session authenticated and hand back the pending command."""
        self.waiting_for_password = False
        self.authenticated = True
        command, self.pending_command = self.pending_command, None
        return command


@dataclass
class TerminalState:
    """Command history and display theme."""
    themes: List[str] = field(default_factory=list)
    theme: str = "matrix"
    history_size: int = 1000
    history: List[str] = field(default_factory=list)

    def record(self, line: str) -> None:
        self.history.append(line)
        if len(self.history) > self.history_size:
            del self.history[:len(self.history) - self.history_size]

    def set_theme(self, name: str) -> None:
        """
        Switch theme.

        Raises:
            SessionError: If the theme is not one of the configured themes
        """
        if name not in self.themes:
            raise SessionError(f"Unknown theme: {name}", setting="theme")
        self.theme = name


@dataclass
class Session:
    """Everything one terminal user owns apart from the namespace."""
    sudo: SudoState = field(default_factory=SudoState)
    terminal: TerminalState = field(default_factory=TerminalState)
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    @classmethod
    def from_config(cls, config: SessionConfig) -> 'Session':
        terminal = TerminalState(
            themes=list(config.themes),
            theme=config.default_theme,
            history_size=config.history_size,
        )
        return cls(terminal=terminal)
