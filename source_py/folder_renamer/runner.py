"""
Follow-up command execution.
"""

import logging
import subprocess
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .types import CommandFailedError


class CommandRunner:
    """Runs a command string through the platform shell and checks its status."""

    def __init__(self, verbose: bool = False, console: Optional[Console] = None):
        self.verbose = verbose
        self.console = console or Console(emoji=False, highlight=False)

    def run(self, command: str) -> int:
        """Run command to completion.

        The string is handed to the shell verbatim; quoting is the caller's
        job. Raises CommandFailedError on a non-zero exit status.
        """
        if self.verbose:
            self.console.print(f"Running command: {escape(command)}")

        logging.info(f"Running command: {command}")
        completed = subprocess.run(command, shell=True)
        logging.info(f"Command exited with status {completed.returncode}")

        if completed.returncode != 0:
            raise CommandFailedError(command, completed.returncode)

        if self.verbose:
            self.console.print("[green]Command completed successfully[/green]")

        return completed.returncode
