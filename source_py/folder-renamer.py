#!/usr/bin/env python3
"""
Folder Renamer - Python Implementation

Rename the one sub-folder of the current directory whose name contains a
keyword, then optionally run a follow-up command.
"""

import sys
from folder_renamer.cli import main

if __name__ == "__main__":
    sys.exit(main())
