"""
Rotation and pose helpers.

Quaternions are taken in Hamilton convention with the scalar part first,
(w, x, y, z). Poses are 3x4 matrices [R | t] mapping points from the
camera frame into the world frame.
"""

import numpy as np


def quaternion_to_rotation_matrix(
    qw: float, qx: float, qy: float, qz: float
) -> np.ndarray:
    """
    Convert a unit quaternion to a 3x3 rotation matrix.

    The quaternion is not normalized. A non-unit input gives a matrix
    that is not orthonormal; checking the norm is up to the caller.

    Args:
        qw: Scalar part
        qx, qy, qz: Vector part

    Returns:
        3x3 rotation matrix
    """
    tx, ty, tz = 2.0 * qx, 2.0 * qy, 2.0 * qz
    twx, twy, twz = tx * qw, ty * qw, tz * qw
    txx, txy, txz = tx * qx, ty * qx, tz * qx
    tyy, tyz, tzz = ty * qy, tz * qy, tz * qz

    return np.array([
        [1.0 - (tyy + tzz), txy - twz, txz + twy],
        [txy + twz, 1.0 - (txx + tzz), tyz - twx],
        [txz - twy, tyz + twx, 1.0 - (txx + tyy)]
    ], dtype=np.float64)


def compose_pose(rotation: np.ndarray, translation) -> np.ndarray:
    """
    Assemble a 3x4 pose matrix from a rotation block and a translation.

    Args:
        rotation: 3x3 rotation matrix
        translation: 3-element translation vector

    Returns:
        3x4 matrix with the rotation in columns 0-2 and the translation in column 3
    """
    pose = np.empty((3, 4), dtype=np.float64)
    pose[:, :3] = rotation
    pose[:, 3] = translation
    return pose


def validate_rotation_matrix(R: np.ndarray, tol: float = 1e-6) -> bool:
    """Check that R is orthonormal with determinant +1."""
    if R.shape != (3, 3):
        return False
    if not np.allclose(R @ R.T, np.eye(3), atol=tol):
        return False
    return abs(np.linalg.det(R) - 1.0) < tol
