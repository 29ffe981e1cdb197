"""
Directory scanning functionality for the folder renamer.
"""

import logging
import os
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .matcher import contains_keyword
from .types import FolderMatch


class Scanner:
    """Finds the immediate sub-folders of a directory that contain a keyword."""

    def __init__(self, root_path: str, keyword: str, verbose: bool = False,
                 console: Optional[Console] = None):
        self.root_path = root_path
        self.keyword = keyword
        self.verbose = verbose
        self.console = console or Console(emoji=False, highlight=False)

    def scan(self) -> List[FolderMatch]:
        """Scan root_path (not recursively) for matching directories.

        Matches are returned in the order the filesystem yields them.
        """
        matches = []

        with os.scandir(self.root_path) as entries:
            for entry in entries:
                if not self._is_directory(entry):
                    continue
                if not contains_keyword(entry.name, self.keyword):
                    continue

                matches.append(FolderMatch(path=os.path.abspath(entry.path), name=entry.name))
                logging.debug(f"Matched folder: {entry.path}")

                if self.verbose:
                    self.console.print(f"Found matching folder: [bold]{escape(entry.name)}[/bold]")

        logging.info(f"Found {len(matches)} folders containing {self.keyword!r} in {self.root_path}")
        return matches

    def _is_directory(self, entry: os.DirEntry) -> bool:
        """Whether entry is a directory, following symlinks."""
        try:
            return entry.is_dir()
        except OSError as e:
            logging.warning(f"Skipping unreadable entry {entry.path}: {e}")
            return False
