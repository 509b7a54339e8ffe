"""
Line tokenizer shared by the text-file loaders.
"""

from typing import List


def split(line: str, delimiter: str = ' ') -> List[str]:
    """
    Split a line on a single delimiter character.

    Runs of the delimiter collapse, and leading or trailing delimiters
    produce no empty tokens, so an empty line gives an empty list.

    Example:
        split("  1 2  3 ") -> ['1', '2', '3']
    """
    return [token for token in line.split(delimiter) if token]
