"""
Mapping Import Package

Loaders that turn the text and settings files of a visual mapping pipeline
into typed geometry:

    - Camera settings (YAML) → PinholeCamera
    - TUM trajectory (timestamp x y z qx qy qz qw) → {timestamp: 3x4 pose}
    - Surface points (x y z) → Nx3 array

Every loader accepts either a file path or a (directory, filename) pair,
reads the whole input and either returns the complete result or raises a
MappingImportError describing the offending file and line.
"""

from .camera import PinholeCamera, Distortion
from .settings import CameraSettings
from .camera_loader import load_camera_from_yaml, camera_from_settings
from .trajectory_loader import load_trajectory_from_txt_tum, PoseRecord
from .point_loader import load_surface_points_from_txt
from .transforms import quaternion_to_rotation_matrix, compose_pose
from .exceptions import (
    MappingImportError,
    FileOpenError,
    ConfigLoadError,
    FieldMissingOrInvalid,
    UnsupportedCameraType,
    InsufficientFields,
    MalformedLine,
)

__version__ = "1.0.0"
__all__ = [
    "PinholeCamera",
    "Distortion",
    "CameraSettings",
    "load_camera_from_yaml",
    "camera_from_settings",
    "load_trajectory_from_txt_tum",
    "PoseRecord",
    "load_surface_points_from_txt",
    "quaternion_to_rotation_matrix",
    "compose_pose",
    "MappingImportError",
    "FileOpenError",
    "ConfigLoadError",
    "FieldMissingOrInvalid",
    "UnsupportedCameraType",
    "InsufficientFields",
    "MalformedLine",
]
