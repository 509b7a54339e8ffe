"""
Pinhole camera model.

The model holds the intrinsic parameters and the Brown-Conrady lens
distortion coefficients in OpenCV order (k1, k2, p1, p2, k3):

    r² = x'² + y'²
    x'' = x'(1 + k1*r² + k2*r⁴ + k3*r⁶) + 2*p1*x'*y' + p2*(r² + 2*x'²)
    y'' = y'(1 + k1*r² + k2*r⁴ + k3*r⁶) + p1*(r² + 2*y'²) + 2*p2*x'*y'

A model always carries a distortion vector; an undistorted camera simply
has all coefficients at zero.
"""

import math
import numpy as np
from dataclasses import dataclass, field
from typing import Tuple

UINT32_MAX = 2 ** 32 - 1


@dataclass(frozen=True)
class Distortion:
    """Radial (k1, k2, k3) and tangential (p1, p2) distortion coefficients."""
    k1: float = 0.0
    k2: float = 0.0
    p1: float = 0.0
    p2: float = 0.0
    k3: float = 0.0

    def as_array(self) -> np.ndarray:
        """Return the coefficients as an array in OpenCV order."""
        return np.array([self.k1, self.k2, self.p1, self.p2, self.k3])


@dataclass(frozen=True)
class PinholeCamera:
    """
    Intrinsic parameters of a pinhole camera.

    Attributes:
        fx: Focal length in x (pixels)
        fy: Focal length in y (pixels)
        cx: Principal point x (pixels)
        cy: Principal point y (pixels)
        width: Image width in pixels
        height: Image height in pixels
        distortion: Lens distortion coefficients
    """
    fx: float
    fy: float
    cx: float
    cy: float
    width: int
    height: int
    distortion: Distortion = field(default_factory=Distortion)

    def __post_init__(self):
        for name in ('fx', 'fy', 'cx', 'cy'):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)}")
        for name in ('width', 'height'):
            value = getattr(self, name)
            if not 0 < value <= UINT32_MAX:
                raise ValueError(f"{name} must be in 1..{UINT32_MAX}, got {value}")

    @property
    def K(self) -> np.ndarray:
        """3x3 calibration matrix."""
        return np.array([
            [self.fx, 0, self.cx],
            [0, self.fy, self.cy],
            [0, 0, 1]
        ], dtype=np.float64)

    @property
    def distortion_coefficients(self) -> np.ndarray:
        return self.distortion.as_array()

    @property
    def has_distortion(self) -> bool:
        return not np.allclose(self.distortion_coefficients, 0)

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) in pixels."""
        return self.width, self.height
