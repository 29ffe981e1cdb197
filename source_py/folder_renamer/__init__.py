"""
Folder Renamer - Python Implementation

A tool for renaming the single sub-folder of the current directory whose
name contains a keyword, optionally followed by a shell command.
"""

__version__ = "1.0.0"
