"""
TUM trajectory loader.

Trajectory File Format (TUM-style, space separated, no header):
    timestamp x y z qx qy qz qw

    - timestamp: unsigned integer, unique key of the pose
    - x, y, z: translation
    - qx, qy, qz, qw: orientation quaternion, scalar part last

Each line becomes a 3x4 pose matrix [R | t]. A timestamp that appears
more than once keeps the pose of its last line.
"""

import re
import numpy as np
from typing import Dict, List, NamedTuple, Optional
import logging

from . import tokenizer
from .exceptions import InsufficientFields, MalformedLine
from .io_utils import PathLike, iter_lines, open_text_file, resolve_path
from .transforms import compose_pose, quaternion_to_rotation_matrix

logger = logging.getLogger(__name__)

# timestamp x y z qx qy qz qw
TUM_FIELD_COUNT = 8
UINT64_MAX = 2 ** 64 - 1

_UNSIGNED_INT = re.compile(r'[0-9]+')

Trajectory = Dict[int, np.ndarray]


class PoseRecord(NamedTuple):
    """A single parsed trajectory line."""
    timestamp: int
    x: float
    y: float
    z: float
    qx: float
    qy: float
    qz: float
    qw: float

    def to_pose(self) -> np.ndarray:
        """Convert to a 3x4 pose matrix."""
        R = quaternion_to_rotation_matrix(self.qw, self.qx, self.qy, self.qz)
        return compose_pose(R, (self.x, self.y, self.z))


def parse_timestamp(token: str) -> int:
    """Parse an unsigned 64-bit timestamp, raising ValueError otherwise."""
    if not _UNSIGNED_INT.fullmatch(token):
        raise ValueError(f"invalid timestamp '{token}'")
    timestamp = int(token)
    if timestamp > UINT64_MAX:
        raise ValueError(f"timestamp '{token}' exceeds 64 bits")
    return timestamp


def parse_pose_record(tokens: List[str]) -> PoseRecord:
    """
    Convert the tokens of one trajectory line.

    Raises:
        ValueError: a token is not numeric
    """
    timestamp = parse_timestamp(tokens[0])
    x, y, z, qx, qy, qz, qw = (float(t) for t in tokens[1:TUM_FIELD_COUNT])
    return PoseRecord(timestamp, x, y, z, qx, qy, qz, qw)


def load_trajectory_from_txt_tum(
    filepath: PathLike,
    filename: Optional[PathLike] = None,
) -> Trajectory:
    """
    Load a TUM trajectory file.

    Args:
        filepath: Path to the trajectory file, or its directory if filename is given
        filename: Optional file name joined onto filepath

    Returns:
        Dictionary mapping timestamp to 3x4 pose matrix, in file order

    Raises:
        FileOpenError: the file is missing or unreadable
        InsufficientFields: a line has fewer than 8 tokens
        MalformedLine: a token is not numeric
    """
    path = resolve_path(filepath, filename)
    trajectory: Trajectory = {}

    with open_text_file(path) as f:
        for line_num, line in iter_lines(f):
            tokens = tokenizer.split(line, ' ')
            if not tokens:
                continue

            if len(tokens) < TUM_FIELD_COUNT:
                raise InsufficientFields(
                    path, line_num, line, TUM_FIELD_COUNT, len(tokens)
                )

            try:
                record = parse_pose_record(tokens)
            except ValueError as e:
                raise MalformedLine(path, line_num, line, str(e)) from e

            if record.timestamp in trajectory:
                logger.debug(
                    f"Timestamp {record.timestamp} repeated on line {line_num}, "
                    f"keeping the later pose"
                )
            trajectory[record.timestamp] = record.to_pose()

    logger.info(f"Loaded {len(trajectory)} poses from {path}")
    return trajectory
