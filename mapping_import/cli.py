"""
Command-line interface for inspecting mapping inputs.

Usage:
    mapping-import camera PATH [FILENAME] [-v]
    mapping-import trajectory PATH [FILENAME] [-v]
    mapping-import points PATH [FILENAME] [-v]
"""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from .camera_loader import load_camera_from_yaml
from .exceptions import MappingImportError
from .point_loader import load_surface_points_from_txt
from .trajectory_loader import load_trajectory_from_txt_tum
from .transforms import validate_rotation_matrix


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def summarize_camera(path: str, filename: Optional[str]) -> None:
    camera = load_camera_from_yaml(path, filename)
    d = camera.distortion
    print(f"Image size:       {camera.width} x {camera.height}")
    print(f"Focal length:     fx={camera.fx:.3f}  fy={camera.fy:.3f}")
    print(f"Principal point:  cx={camera.cx:.3f}  cy={camera.cy:.3f}")
    print(f"Distortion:       k1={d.k1:.6g}  k2={d.k2:.6g}  "
          f"p1={d.p1:.6g}  p2={d.p2:.6g}  k3={d.k3:.6g}")


def summarize_trajectory(path: str, filename: Optional[str]) -> None:
    logger = logging.getLogger(__name__)
    trajectory = load_trajectory_from_txt_tum(path, filename)
    print(f"Poses:            {len(trajectory)}")
    if not trajectory:
        return

    print(f"Time range:       {min(trajectory)} to {max(trajectory)}")
    positions = np.array([pose[:, 3] for pose in trajectory.values()])
    path_length = np.linalg.norm(np.diff(positions, axis=0), axis=1).sum()
    print(f"Path length:      {path_length:.3f}")

    invalid = [t for t, pose in trajectory.items()
               if not validate_rotation_matrix(pose[:, :3])]
    if invalid:
        logger.warning(
            f"{len(invalid)} poses have non-orthonormal rotations "
            f"(non-unit quaternions), first at timestamp {invalid[0]}"
        )


def summarize_points(path: str, filename: Optional[str]) -> None:
    points = load_surface_points_from_txt(path, filename)
    print(f"Points:           {len(points)}")
    if len(points) == 0:
        return

    lo = points.min(axis=0)
    hi = points.max(axis=0)
    print(f"Bounding box min: {lo[0]:.3f} {lo[1]:.3f} {lo[2]:.3f}")
    print(f"Bounding box max: {hi[0]:.3f} {hi[1]:.3f} {hi[2]:.3f}")


SUMMARIES = {
    'camera': summarize_camera,
    'trajectory': summarize_trajectory,
    'points': summarize_points,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description='Load and summarize camera, trajectory and point inputs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
    # Inspect a camera settings file
    mapping-import camera calib.yaml

    # Directory and file name given separately
    mapping-import trajectory ./dataset groundtruth.txt

    # Verbose output
    mapping-import points surface_points.txt -v
'''
    )

    parser.add_argument(
        'kind',
        choices=sorted(SUMMARIES),
        help='Type of input to load'
    )

    parser.add_argument(
        'path',
        type=str,
        help='Path to the input file, or its directory if FILENAME is given'
    )

    parser.add_argument(
        'filename',
        nargs='?',
        default=None,
        help='File name inside PATH'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        SUMMARIES[args.kind](args.path, args.filename)
    except MappingImportError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
