"""
Camera settings source.

Camera files are small YAML documents of key/value pairs, for example:

    %YAML:1.0
    type: pinhole
    fps: 10.0
    width: 1200
    height: 800
    fx: 1200.0
    fy: 1200.0
    cx: 600.0
    cy: 400.0
    k1: -0.1
    k2: 0.01
    p1: 0.0
    p2: 0.0

Files written by OpenCV's FileStorage start with a '%YAML:1.0' directive,
which is not valid YAML 1.1, so any leading '%YAML' directive is dropped
before the document is parsed.

The loaders only see the typed getters of CameraSettings, never the
underlying dictionary.
"""

import math
import re
import yaml
import os
from typing import Any, Dict
import logging

from .exceptions import ConfigLoadError, FieldMissingOrInvalid, FileOpenError

logger = logging.getLogger(__name__)

_YAML_DIRECTIVE = re.compile(r'^\s*%YAML[:\s]\s*\d+\.\d+\s*$')
_YAML12_FLOAT = re.compile(r'[-+]?(\.[0-9]+|[0-9]+(\.[0-9]*)?)([eE][-+]?[0-9]+)?')


class CameraSettings:
    """Typed read access to the key/value pairs of a camera settings file."""

    def __init__(self, values: Dict[str, Any], source: str = "<memory>"):
        self.values = values
        self.source = source

    @classmethod
    def from_yaml(cls, config_path: str) -> "CameraSettings":
        """
        Load camera settings from a YAML file.

        Args:
            config_path: Path to the YAML settings file

        Returns:
            CameraSettings wrapping the parsed document

        Raises:
            FileOpenError: the file is missing or unreadable
            ConfigLoadError: the file is not a YAML mapping
        """
        path = os.fspath(config_path)
        try:
            with open(path, 'r') as f:
                text = f.read()
        except OSError as e:
            raise FileOpenError(path, e.strerror) from e
        except UnicodeDecodeError as e:
            raise FileOpenError(path, "not a text file") from e

        lines = text.splitlines()
        if lines and _YAML_DIRECTIVE.match(lines[0]):
            text = '\n'.join(lines[1:])

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(path, f"Invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigLoadError(
                path, "Camera settings must be a mapping of key/value pairs"
            )

        logger.debug(f"Loaded {len(data)} camera settings from {path}")
        return cls(data, source=path)

    def _get(self, key: str) -> Any:
        if key not in self.values or self.values[key] is None:
            raise FieldMissingOrInvalid(self.source, key, "is missing")
        return self.values[key]

    def get_string(self, key: str) -> str:
        value = self._get(key)
        if not isinstance(value, str):
            raise FieldMissingOrInvalid(
                self.source, key, f"must be a string, got {value!r}"
            )
        return value

    def get_double(self, key: str) -> float:
        value = self._get(key)
        # YAML 1.1 leaves exponent floats without a dot (1e-3, 5e2) as strings
        if isinstance(value, str) and _YAML12_FLOAT.fullmatch(value.strip()):
            return float(value)
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldMissingOrInvalid(
                self.source, key, f"must be a number, got {value!r}"
            )
        try:
            return float(value)
        except OverflowError as e:
            raise FieldMissingOrInvalid(
                self.source, key, "is too large for a double"
            ) from e

    def get_int(self, key: str) -> int:
        value = self._get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldMissingOrInvalid(
                self.source, key, f"must be an integer, got {value!r}"
            )
        return value

    def get_finite_double(self, key: str) -> float:
        """Like get_double, but rejects NaN and infinity."""
        value = self.get_double(key)
        if not math.isfinite(value):
            raise FieldMissingOrInvalid(
                self.source, key, f"must be finite, got {value!r}"
            )
        return value
