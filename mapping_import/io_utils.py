"""
Path handling and line reading shared by the loaders.
"""

from contextlib import contextmanager
import os
from pathlib import PurePath
from typing import Iterator, Optional, TextIO, Tuple, Union
import logging

from .exceptions import FileOpenError

logger = logging.getLogger(__name__)

PathLike = Union[str, PurePath]


def resolve_path(filepath: PathLike, filename: Optional[PathLike] = None) -> str:
    """
    Build the path a loader should open.

    With a single argument the path is used as given. With a directory and
    a filename the two segments are joined with a single separator. Nothing
    is normalized, so errors name the same path the caller passed, and the
    result is not checked for existence.
    """
    if filename is None:
        return os.fspath(filepath)
    return os.path.join(os.fspath(filepath), os.fspath(filename))


@contextmanager
def open_text_file(path: str) -> Iterator[TextIO]:
    """Open a text file for reading, raising FileOpenError if that fails."""
    try:
        f = open(path, 'r')
    except OSError as e:
        raise FileOpenError(path, e.strerror) from e

    with f:
        try:
            yield f
        except UnicodeDecodeError as e:
            raise FileOpenError(path, "not a text file") from e


def iter_lines(f: TextIO) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, line) pairs with line endings removed.

    Line numbers start at 1.
    """
    for line_num, line in enumerate(f, 1):
        yield line_num, line.rstrip('\r\n')
