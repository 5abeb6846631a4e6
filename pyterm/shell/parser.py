"""
Command Parser Module

Splits terminal input into a command name and its arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class ParsedCommand:
    """A parsed command line."""
    command: str
    args: List[str] = field(default_factory=list)
    line: str = ""

    def rejoin(self) -> str:
        """The command and arguments as a single space-separated line."""
        return " ".join([self.command] + self.args)


class CommandParser:
    """
    Parses terminal command lines.

    Handles:
    - Whitespace-separated words
    - Single and double quoted strings
    - Backslash escapes

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse('cp "my notes.txt" backup.txt')
        >>> cmd.args
        ['my notes.txt', 'backup.txt']
    """

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            ParsedCommand or None if the line holds no words
        """
        line = line.strip()

        if not line:
            return None

        words = self.tokenize(line)

        if not words:
            return None

        return ParsedCommand(command=words[0], args=words[1:], line=line)

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """Convert a line into words."""
        words = []
        current = ""
        in_word = False
        in_quote = None
        i = 0

        while i < len(line):
            char = line[i]

            if char in ('"', "'") and in_quote is None:
                in_quote = char
                in_word = True
                i += 1
                continue

            if char == in_quote:
                in_quote = None
                i += 1
                continue

            if char == '\\' and i + 1 < len(line) and in_quote != "'":
                current += line[i + 1]
                in_word = True
                i += 2
                continue

            if in_quote:
                current += char
                i += 1
                continue

            if char.isspace():
                if in_word:
                    words.append(current)
                    current = ""
                    in_word = False
                i += 1
                continue

            current += char
            in_word = True
            i += 1

        if in_word:
            words.append(current)

        return words
