"""
Type definitions, data structures and errors for the folder renamer.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Config:
    """Application configuration."""
    keyword: str
    new_name: str
    command: Optional[str] = None
    verbose: bool = False
    dry_run: bool = False
    log_file: Optional[str] = None

    @property
    def execute_command(self) -> bool:
        return self.command is not None


@dataclass
class FolderMatch:
    """A directory whose name contains the keyword."""
    path: str
    name: str


@dataclass
class RenameResult:
    """Outcome of a rename (or of a dry-run rename)."""
    old_path: str
    new_path: str
    dry_run: bool = False


class FolderRenameError(Exception):
    """Base class for errors that end a run with a failure status."""


class UsageError(FolderRenameError):
    """Invalid command-line arguments."""

    def __init__(self, message: str, show_help: bool = False):
        super().__init__(message)
        self.show_help = show_help


class AmbiguousMatchError(FolderRenameError):
    """More than one folder matched the keyword."""

    def __init__(self, keyword: str, matches: List[FolderMatch]):
        super().__init__(
            f"Found {len(matches)} folders containing keyword \"{keyword}\", "
            "but only one can be renamed per run"
        )
        self.keyword = keyword
        self.matches = matches


class TargetExistsError(FolderRenameError):
    """The rename target is already taken."""

    def __init__(self, target: str):
        super().__init__(f"Target name \"{target}\" already exists")
        self.target = target


class CommandFailedError(FolderRenameError):
    """The follow-up command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int):
        super().__init__(f"Command failed (exit code: {returncode})")
        self.command = command
        self.returncode = returncode
