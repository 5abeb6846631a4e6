"""
Command Dispatcher

Turns one line of terminal input into one string of output. Every
command runs against the dispatcher's own namespace and session, and
one command finishes before the next is admitted.

Author: YSNRFD
Version: 1.0.0
"""

import threading
import time
from typing import Optional, Callable, List

from .parser import CommandParser
from .session import Session
from pyterm import codec
from pyterm.core.config_loader import Config, get_config
from pyterm.exceptions import (
    NamespaceError,
    NotFoundError,
    NotAFileError,
    AlreadyExistsError,
    InvalidDestinationError,
    ProtectedRootError,
    DirectoryNotEmptyError,
    SessionError,
)
from pyterm.filesystem import Namespace, PathResolver, create_namespace
from pyterm.logger import get_logger


# Obfuscated account name reported by `whoami`.
WHOAMI = bytes([18, 33, 48, 59, 31, 58, 61, 38, 43, 12, 0, 50, 61, 52, 54, 54, 39, 59])

# Prompt-refresh commands issued by the front end; kept out of history.
INTERNAL_COMMANDS = ('__pwd__', '__ls__')

HELP_TEXT = (
    "Available commands: ls, cd, pwd, cat, mkdir, touch, rm, cp, mv, sudo, "
    "date, echo, whoami, history, theme, newtab, downld, clear"
)


def _reason(error: NamespaceError) -> str:
    """Short, shell-style reason for a namespace error."""
    if isinstance(error, NotFoundError):
        return "No such file or directory"
    if isinstance(error, AlreadyExistsError):
        return "File exists"
    if isinstance(error, DirectoryNotEmptyError):
        return "Directory not empty"
    if isinstance(error, ProtectedRootError):
        return "Operation not permitted"
    if isinstance(error, InvalidDestinationError):
        return "Invalid destination"
    return error.message


class CommandDispatcher:
    """
    Executes terminal commands.

    Owns a namespace and a session; nothing is shared between
    dispatchers, so each terminal user gets an independent tree.

    Example:
        >>> dispatcher = CommandDispatcher()
        >>> dispatcher.execute('pwd')
        '/home'
        >>> dispatcher.execute('ls')
        'contact.txt    projects.txt'
    """

    def __init__(
        self,
        namespace: Optional[Namespace] = None,
        session: Optional[Session] = None,
        config: Optional[Config] = None
    ):
        self._config = config or get_config()
        self._namespace = namespace if namespace is not None else create_namespace(self._config)
        self._session = session or Session.from_config(self._config.session)
        self._parser = CommandParser()
        self._lock = threading.Lock()
        self._logger = get_logger('dispatcher')
        self._commands: dict[str, Callable[[List[str]], str]] = {
            'pwd': self.cmd_pwd,
            'cd': self.cmd_cd,
            'ls': self.cmd_ls,
            'cat': self.cmd_cat,
            'mkdir': self.cmd_mkdir,
            'touch': self.cmd_touch,
            'rm': self.cmd_rm,
            'cp': self.cmd_cp,
            'mv': self.cmd_mv,
            'date': self.cmd_date,
            'echo': self.cmd_echo,
            'whoami': self.cmd_whoami,
            'newtab': self.cmd_newtab,
            'history': self.cmd_history,
            'theme': self.cmd_theme,
            'help': self.cmd_help,
            'clear': self.cmd_clear,
            'downld': self.cmd_download,
        }

    @property
    def namespace(self) -> Namespace:
        return self._namespace

    @property
    def session(self) -> Session:
        return self._session

    @property
    def config(self) -> Config:
        return self._config

    def execute(self, line: str) -> str:
        """
        Execute one line of input.

        Args:
            line: Raw terminal input

        Returns:
            Output text (possibly empty)
        """
        with self._lock:
            return self._execute(line)

    def _execute(self, line: str) -> str:
        sudo = self._session.sudo

        if sudo.waiting_for_password:
            return self._check_password(line)

        cmd = self._parser.parse(line)
        if cmd is None:
            return ""

        if cmd.command == '__pwd__':
            return self.cmd_pwd([])
        if cmd.command == '__ls__':
            return self.cmd_ls([])

        self._session.terminal.record(cmd.line)

        if cmd.command == 'sudo':
            if not cmd.args:
                return "Usage: sudo <command> [args...]"
            # Keep the remainder as typed so quoting survives the re-parse.
            pending = cmd.line.split(None, 1)[1]
            sudo.request_password(pending)
            self._logger.debug(
                "Awaiting sudo password",
                session=self._session.session_id,
                context={'command': pending}
            )
            return "[sudo] password: "

        handler = self._commands.get(cmd.command)
        if handler is None:
            return f"command not found: {cmd.command}. Type 'help' for info."

        try:
            return handler(cmd.args)
        except NamespaceError as e:
            self._logger.warning(
                f"{cmd.command} failed: {e.message}",
                session=self._session.session_id,
                context=e.context
            )
            return f"{cmd.command}: {_reason(e)}"
        except Exception as e:
            self._logger.exception(
                f"{cmd.command} raised {type(e).__name__}",
                exc=e,
                session=self._session.session_id
            )
            return f"{cmd.command}: {e}"

    def _check_password(self, line: str) -> str:
        sudo = self._session.sudo

        if line.strip() != self._config.session.sudo_password:
            self._logger.warning("Wrong sudo password", session=self._session.session_id)
            return "[sudo] Sorry, try again."

        pending = sudo.grant()
        self._logger.notice("Sudo authenticated", session=self._session.session_id)

        if pending:
            return self._execute(pending)
        return "[sudo] authenticated successfully"

    # Command implementations

    def cmd_pwd(self, args: List[str]) -> str:
        """Print working directory."""
        return self._namespace.current_path()

    def cmd_cd(self, args: List[str]) -> str:
        """Change directory; no argument goes home."""
        ns = self._namespace

        if not args:
            ns.set_current_path(self._config.namespace.home_path)
            return ""

        target = ns.resolve(args[0])
        if not ns.is_directory(target):
            return f"cd: {args[0]}: No such file or directory"

        ns.set_current_path(target)
        return ""

    def cmd_ls(self, args: List[str]) -> str:
        """List directory contents."""
        ns = self._namespace
        raw = args[0] if args else ns.current_path()
        target = ns.resolve(raw)

        if not ns.exists(target):
            return f"ls: cannot access '{raw}': No such file or directory"

        if not ns.is_directory(target):
            return f"ls: {raw}: Not a directory"

        return "    ".join(ns.list_children(target))

    def cmd_cat(self, args: List[str]) -> str:
        """Display decoded file contents."""
        if not args:
            return "Usage: cat <filename>"

        return self._read_text('cat', args[0])

    def _read_text(self, name: str, raw: str) -> str:
        try:
            content = self._namespace.read_file(self._namespace.resolve(raw))
        except NotFoundError:
            return f"{name}: {raw}: No such file"
        except NotAFileError:
            return f"{name}: {raw}: Is a directory"

        return codec.decode(content)

    def cmd_mkdir(self, args: List[str]) -> str:
        """Create directory."""
        if not args:
            return "Usage: mkdir <directory>"

        ns = self._namespace
        target = ns.resolve(args[0])

        if ns.exists(target):
            return f"mkdir: cannot create directory '{args[0]}': File exists"

        if not ns.is_directory(PathResolver.dirname(target)):
            return f"mkdir: cannot create directory '{args[0]}': No such file or directory"

        ns.create_directory(target)
        return ""

    def cmd_touch(self, args: List[str]) -> str:
        """Create an empty file if it does not exist."""
        if not args:
            return "Usage: touch <filename>"

        ns = self._namespace
        target = ns.resolve(args[0])

        if ns.exists(target):
            return ""

        if not ns.is_directory(PathResolver.dirname(target)):
            return f"touch: cannot touch '{args[0]}': No such file or directory"

        ns.create_file(target, b'')
        return ""

    def cmd_rm(self, args: List[str]) -> str:
        """Remove a file or empty directory (requires sudo)."""
        if not args:
            return "Usage: rm <filename>"

        if not self._session.sudo.authenticated:
            return f"rm: Permission denied. Use 'sudo rm {args[0]}' first."

        target = self._namespace.resolve(args[0])

        try:
            self._namespace.remove(target)
        except ProtectedRootError:
            return f"rm: cannot remove '{args[0]}': Operation not permitted"
        except NotFoundError:
            return f"rm: cannot remove '{args[0]}': No such file or directory"
        except DirectoryNotEmptyError:
            return f"rm: cannot remove '{args[0]}': Directory not empty"

        return ""

    def cmd_cp(self, args: List[str]) -> str:
        """Copy a file or directory tree."""
        return self._relocate('cp', 'copy', args)

    def cmd_mv(self, args: List[str]) -> str:
        """Move a file or directory tree."""
        return self._relocate('mv', 'move', args)

    def _relocate(self, name: str, verb: str, args: List[str]) -> str:
        if len(args) < 2:
            return f"Usage: {name} <source> <destination>"

        ns = self._namespace
        src, dst = ns.resolve(args[0]), ns.resolve(args[1])
        operation = ns.copy if verb == 'copy' else ns.move

        try:
            operation(src, dst)
        except NamespaceError as e:
            return f"{name}: cannot {verb} '{args[0]}' to '{args[1]}': {_reason(e)}"

        return ""

    def cmd_date(self, args: List[str]) -> str:
        """Display current date and time."""
        return time.strftime('%a %b %d %Y %H:%M:%S')

    def cmd_echo(self, args: List[str]) -> str:
        """Echo arguments."""
        return " ".join(args)

    def cmd_whoami(self, args: List[str]) -> str:
        """Display the current user."""
        return codec.decode(WHOAMI)

    def cmd_newtab(self, args: List[str]) -> str:
        """Ask the front end to open an http(s) URL."""
        if not args:
            return "Usage: newtab [http(s)://]<host-or-url>\nExample: newtab openai.com"

        raw = " ".join(args).strip()
        if any(c.isspace() for c in raw):
            return f"newtab: invalid URL '{raw}'"

        if raw.startswith(('http://', 'https://')):
            url = raw
        elif '://' in raw:
            return "newtab: only http/https URLs are allowed"
        else:
            url = f"https://{raw}"

        return f"NEWTAB:{url}"

    def cmd_history(self, args: List[str]) -> str:
        """Display command history."""
        history = self._session.terminal.history
        if not history:
            return "No history yet"
        return "\n".join(f"{i}  {line}" for i, line in enumerate(history, 1))

    def cmd_theme(self, args: List[str]) -> str:
        """Select a display theme."""
        terminal = self._session.terminal
        available = ", ".join(terminal.themes)

        if not args:
            return f"Usage: theme <name>\nAvailable themes: {available}"

        try:
            terminal.set_theme(args[0])
        except SessionError:
            return f"theme: unknown theme '{args[0]}'. Available themes: {available}"

        return f"THEME:{args[0]}"

    def cmd_help(self, args: List[str]) -> str:
        """Display available commands."""
        return HELP_TEXT

    def cmd_clear(self, args: List[str]) -> str:
        """Ask the front end to clear the screen."""
        return "CLEARED"

    def cmd_download(self, args: List[str]) -> str:
        """Return a file's decoded text as base64 for download."""
        if not args:
            return "Usage: downld <filename>"

        target = self._namespace.resolve(args[0])
        if not self._namespace.is_file(target):
            return self._read_text('downld', args[0])

        text = self._read_text('downld', args[0])
        filename = PathResolver.basename(target)
        return f"DOWNLOAD:{filename}:{codec.base64_encode(text.encode('utf-8'))}"


def create_dispatcher(config: Optional[Config] = None) -> CommandDispatcher:
    """Factory: a dispatcher with its own freshly seeded namespace."""
    return CommandDispatcher(config=config)
