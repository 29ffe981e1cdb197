"""
Keyword matching for folder names.
"""

import string

# Only A-Z are folded; str.lower() would also fold non-ASCII letters.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lower-case the ASCII letters of text, leaving everything else as is."""
    return text.translate(_ASCII_LOWER)


def contains_keyword(folder_name: str, keyword: str) -> bool:
    """Return True if keyword occurs in folder_name, ignoring ASCII case."""
    return ascii_lower(keyword) in ascii_lower(folder_name)
