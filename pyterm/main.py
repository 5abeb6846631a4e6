#!/usr/bin/env python3
"""
PyTerm - A Secure Terminal Simulation

Main entry point.

PyTerm runs a small Unix-style shell over an in-memory namespace:
- Virtual files and directories addressed by absolute paths
- Subtree copy and move with collision and cycle checks
- Sudo-gated deletion
- Obfuscated sample content

Author: YSNRFD
Version: 1.0.0
"""

import argparse
import sys
from typing import Optional, List

from pyterm.core.config_loader import Config, ConfigLoader
from pyterm.exceptions import ConfigError
from pyterm.logger import Logger, LogLevel
from pyterm.shell.shell import Shell


DEMO_SCRIPT = """
pwd
ls
cat projects.txt
mkdir backup
cp projects.txt backup/projects.txt
ls backup
mv backup archive
ls
history
"""


def _load_config(config_path: Optional[str]) -> Config:
    loader = ConfigLoader()
    if config_path:
        return loader.load(config_path)
    return loader.config


def _init_logging(config: Config) -> None:
    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
    )


def run_headless(config: Config) -> int:
    """
    Run a fixed demo script without the interactive loop.

    Useful for smoke-testing a configuration.
    """
    shell = Shell(config=config)

    for line, output in zip(
        [l for l in DEMO_SCRIPT.split('\n') if l.strip()],
        shell.run_script(DEMO_SCRIPT)
    ):
        print(f"$ {line}")
        if output:
            print(output)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for PyTerm.

    Sequence:
    1. Load configuration
    2. Initialize logging
    3. Start the shell (or the headless demo)
    """
    parser = argparse.ArgumentParser(prog='pyterm', description='A secure terminal simulation')
    parser.add_argument('-c', '--config', help='path to a JSON configuration file')
    parser.add_argument('--headless', action='store_true', help='run the demo script and exit')
    args = parser.parse_args(argv)

    try:
        config = _load_config(args.config)
    except ConfigError as e:
        print(f"pyterm: {e}", file=sys.stderr)
        return 1

    _init_logging(config)

    if args.headless:
        return run_headless(config)

    shell = Shell(config=config)

    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted")

    return 0


if __name__ == '__main__':
    sys.exit(main())
