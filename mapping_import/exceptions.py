"""
Exceptions raised by the mapping_import loaders.

Every loader fails fast: the first problem found aborts the whole load and
no partial result is returned. All errors derive from MappingImportError and
carry the path that was being read, so callers can report where the bad
input lives.
"""

from typing import Optional


class MappingImportError(Exception):
    """Base class for all loader errors."""

    def __init__(self, path: str, message: str):
        # Subclasses record their own constructor arguments first
        self.__dict__.setdefault('_init_args', (path, message))
        self.path = str(path)
        super().__init__(f"Error loading '{self.path}': {message}")

    def __reduce__(self):
        return (type(self), self._init_args)


class FileOpenError(MappingImportError, OSError):
    """The input file does not exist or cannot be read."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self._init_args = (path, reason)
        message = "Could not open file!"
        if reason:
            message = f"Could not open file ({reason})!"
        super().__init__(path, message)


class ConfigLoadError(MappingImportError, ValueError):
    """The camera settings file could not be parsed into key/value pairs."""


class FieldMissingOrInvalid(MappingImportError, ValueError):
    """A required settings field is absent, of the wrong type or out of range."""

    def __init__(self, path: str, field: str, reason: str):
        self._init_args = (path, field, reason)
        self.field = field
        super().__init__(path, f"Field '{field}' {reason}")


class UnsupportedCameraType(MappingImportError, ValueError):
    """The settings declare a camera type with no registered model."""

    def __init__(self, path: str, camera_type: str):
        self._init_args = (path, camera_type)
        self.camera_type = camera_type
        super().__init__(path, f"Unsupported camera type '{camera_type}'")


class InsufficientFields(MappingImportError, ValueError):
    """A line holds fewer tokens than its format requires."""

    def __init__(self, path: str, line_number: int, line: str, expected: int, found: int):
        self._init_args = (path, line_number, line, expected, found)
        self.line_number = line_number
        self.line = line
        self.expected = expected
        self.found = found
        super().__init__(
            path,
            f"Not enough arguments in line {line_number} "
            f"(expected {expected}, found {found}): '{line}'",
        )


class MalformedLine(MappingImportError, ValueError):
    """A token on a line cannot be converted to the required numeric type."""

    def __init__(self, path: str, line_number: int, line: str, reason: str = ""):
        self._init_args = (path, line_number, line, reason)
        self.line_number = line_number
        self.line = line
        message = f"Malformed line {line_number}: '{line}'"
        if reason:
            message += f" ({reason})"
        super().__init__(path, message)
