"""
Camera loader.

Reads a camera settings file, looks up its declared 'type' and builds the
matching camera model. Only the pinhole model is implemented; any other
type is rejected with UnsupportedCameraType.
"""

from typing import Callable, Dict, Optional
import logging

from .camera import UINT32_MAX, Distortion, PinholeCamera
from .exceptions import FieldMissingOrInvalid, UnsupportedCameraType
from .io_utils import PathLike, resolve_path
from .settings import CameraSettings

logger = logging.getLogger(__name__)


def _build_pinhole(settings: CameraSettings) -> PinholeCamera:
    """Build a pinhole camera; k3 is not read and always set to 0.0."""
    fx = settings.get_finite_double('fx')
    fy = settings.get_finite_double('fy')
    cx = settings.get_finite_double('cx')
    cy = settings.get_finite_double('cy')
    width = _get_image_dimension(settings, 'width')
    height = _get_image_dimension(settings, 'height')

    distortion = Distortion(
        k1=settings.get_double('k1'),
        k2=settings.get_double('k2'),
        p1=settings.get_double('p1'),
        p2=settings.get_double('p2'),
        k3=0.0,
    )

    return PinholeCamera(
        fx=fx, fy=fy, cx=cx, cy=cy,
        width=width, height=height,
        distortion=distortion,
    )


def _get_image_dimension(settings: CameraSettings, key: str) -> int:
    value = settings.get_int(key)
    if not 0 < value <= UINT32_MAX:
        raise FieldMissingOrInvalid(
            settings.source, key, f"must be a positive 32-bit integer, got {value}"
        )
    return value


CAMERA_BUILDERS: Dict[str, Callable[[CameraSettings], PinholeCamera]] = {
    'pinhole': _build_pinhole,
}


def camera_from_settings(settings: CameraSettings) -> PinholeCamera:
    """
    Build a camera model from already loaded settings.

    Raises:
        FieldMissingOrInvalid: 'type' or a model field is missing or invalid
        UnsupportedCameraType: 'type' names a model with no builder
    """
    camera_type = settings.get_string('type')

    builder = CAMERA_BUILDERS.get(camera_type)
    if builder is None:
        raise UnsupportedCameraType(settings.source, camera_type)

    camera = builder(settings)
    logger.debug(
        f"Camera model '{camera_type}': fx={camera.fx}, fy={camera.fy}, "
        f"cx={camera.cx}, cy={camera.cy}, size={camera.width}x{camera.height}"
    )
    return camera


def load_camera_from_yaml(
    filepath: PathLike,
    filename: Optional[PathLike] = None,
) -> PinholeCamera:
    """
    Load a camera model from a YAML settings file.

    Args:
        filepath: Path to the settings file, or its directory if filename is given
        filename: Optional file name joined onto filepath

    Returns:
        PinholeCamera built from the settings

    Raises:
        FileOpenError: the file is missing or unreadable
        ConfigLoadError: the file is not a YAML mapping
        FieldMissingOrInvalid: a required field is missing or invalid
        UnsupportedCameraType: the declared type is not 'pinhole'
    """
    path = resolve_path(filepath, filename)
    settings = CameraSettings.from_yaml(path)
    camera = camera_from_settings(settings)

    logger.info(f"Loaded {settings.get_string('type')} camera from {path}")
    return camera
