"""
PyTerm Shell Module

Interactive read-eval-print loop over a command dispatcher.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, List

from .dispatcher import CommandDispatcher
from pyterm.core.config_loader import Config, get_config
from pyterm.logger import get_logger


EXIT_COMMANDS = ('exit', 'quit')


class Shell:
    """
    PyTerm Interactive Shell.

    Reads lines, hands them to the dispatcher and prints whatever comes
    back. The dispatcher owns all state; the shell only owns the loop.

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(
        self,
        dispatcher: Optional[CommandDispatcher] = None,
        config: Optional[Config] = None
    ):
        self._config = config or get_config()
        self._dispatcher = dispatcher or CommandDispatcher(config=self._config)
        self._logger = get_logger('shell')
        self._exiting = False

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop.
        """
        print(f"\n{self._config.terminal.welcome_message}")
        print("Type 'help' for a list of commands.\n")

        while not self._exiting:
            try:
                line = input(self._get_prompt())
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print("^C")
                continue

            output = self.execute_line(line)
            if output:
                print(output)

    def _get_prompt(self) -> str:
        """Generate the shell prompt."""
        if self._dispatcher.session.sudo.waiting_for_password:
            return ""

        cwd = self._dispatcher.namespace.current_path()
        home = self._config.namespace.home_path

        if cwd == home:
            cwd_display = '~'
        elif cwd.startswith(home + '/'):
            cwd_display = '~' + cwd[len(home):]
        else:
            cwd_display = cwd

        return f"{cwd_display} {self._config.session.prompt}"

    def execute_line(self, line: str) -> str:
        """
        Execute one line, handling shell-level exit.

        Args:
            line: Command line string

        Returns:
            Output text
        """
        waiting = self._dispatcher.session.sudo.waiting_for_password
        if not waiting and line.strip() in EXIT_COMMANDS:
            self.request_exit()
            return ""

        return self._dispatcher.execute(line)

    def request_exit(self) -> None:
        """Request the shell to exit."""
        self._exiting = True

    def run_script(self, script: str) -> List[str]:
        """
        Run a script (one command per line).

        Blank lines and ``#`` comments are skipped.

        Returns:
            Output of each executed line, in order
        """
        outputs = []

        for line in script.split('\n'):
            line = line.strip()
            if line and not line.startswith('#'):
                outputs.append(self.execute_line(line))
                if self._exiting:
                    break

        return outputs


def create_shell(config: Optional[Config] = None) -> Shell:
    """Factory function to create a shell."""
    return Shell(config=config)
