"""
Rename execution for the folder renamer.
"""

import logging
import os

from .types import FolderMatch, RenameResult, TargetExistsError


class FolderRenamer:
    """Renames a matched folder to a name relative to root_path."""

    def __init__(self, root_path: str):
        self.root_path = root_path

    def target_path(self, new_name: str) -> str:
        return os.path.join(self.root_path, new_name)

    def rename(self, match: FolderMatch, new_name: str, dry_run: bool = False) -> RenameResult:
        """Rename match to new_name.

        Raises TargetExistsError if anything (even a broken symlink) already
        sits at the target. OSError from the rename itself propagates.
        """
        new_path = self.target_path(new_name)

        if os.path.lexists(new_path):
            logging.info(f"Refusing to rename {match.path}: {new_path} already exists")
            raise TargetExistsError(new_name)

        if dry_run:
            logging.info(f"Dry run, not renaming: {match.path} -> {new_path}")
        else:
            os.rename(match.path, new_path)
            logging.info(f"Renamed: {match.path} -> {new_path}")

        return RenameResult(old_path=match.path, new_path=new_path, dry_run=dry_run)
