"""
Surface point loader.

Point File Format (space separated, no header):
    x y z

Points are returned as an Nx3 array in file order.
"""

import numpy as np
from typing import List, Optional
import logging

from . import tokenizer
from .exceptions import InsufficientFields, MalformedLine
from .io_utils import PathLike, iter_lines, open_text_file, resolve_path

logger = logging.getLogger(__name__)

POINT_FIELD_COUNT = 3


def load_surface_points_from_txt(
    filepath: PathLike,
    filename: Optional[PathLike] = None,
) -> np.ndarray:
    """
    Load surface points from a text file.

    Args:
        filepath: Path to the point file, or its directory if filename is given
        filename: Optional file name joined onto filepath

    Returns:
        Nx3 array of (x, y, z); shape (0, 3) for an empty file

    Raises:
        FileOpenError: the file is missing or unreadable
        InsufficientFields: a line has fewer than 3 tokens
        MalformedLine: a token is not numeric
    """
    path = resolve_path(filepath, filename)
    points: List[List[float]] = []

    with open_text_file(path) as f:
        for line_num, line in iter_lines(f):
            tokens = tokenizer.split(line, ' ')
            if not tokens:
                continue

            if len(tokens) < POINT_FIELD_COUNT:
                raise InsufficientFields(
                    path, line_num, line, POINT_FIELD_COUNT, len(tokens)
                )

            try:
                points.append([float(t) for t in tokens[:POINT_FIELD_COUNT]])
            except ValueError as e:
                raise MalformedLine(path, line_num, line, str(e)) from e

    logger.info(f"Loaded {len(points)} surface points from {path}")
    return np.array(points, dtype=np.float64).reshape(-1, POINT_FIELD_COUNT)
