"""
Tests for path joining, file opening and error messages.
"""

import pickle
import pytest

from mapping_import.exceptions import (
    ConfigLoadError,
    FieldMissingOrInvalid,
    FileOpenError,
    InsufficientFields,
    MalformedLine,
    MappingImportError,
    UnsupportedCameraType,
)
from mapping_import.io_utils import iter_lines, open_text_file, resolve_path


class TestResolvePath:
    """Tests for building loader paths."""

    def test_single_path(self):
        assert resolve_path("data/calib.yaml") == "data/calib.yaml"

    def test_single_path_not_normalized(self):
        assert resolve_path("./data//calib.yaml") == "./data//calib.yaml"

    def test_directory_and_filename(self):
        assert resolve_path("data", "calib.yaml") == "data/calib.yaml"

    def test_directory_not_normalized(self):
        assert resolve_path("./data", "calib.yaml") == "./data/calib.yaml"

    def test_trailing_separator_not_duplicated(self):
        assert resolve_path("data/", "calib.yaml") == "data/calib.yaml"

    def test_accepts_path_objects(self, tmp_path):
        assert resolve_path(tmp_path, "a.txt") == str(tmp_path / "a.txt")


class TestOpenTextFile:
    """Tests for scoped file reading."""

    def test_reads_numbered_lines(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_text("first\r\nsecond\n\nlast")

        with open_text_file(path) as f:
            lines = list(iter_lines(f))

        assert lines == [(1, "first"), (2, "second"), (3, ""), (4, "last")]

    def test_file_closed_after_error(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_text("a\n")

        with pytest.raises(RuntimeError):
            with open_text_file(path) as f:
                raise RuntimeError("stop")
        assert f.closed

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        with pytest.raises(FileOpenError) as exc_info:
            with open_text_file(path):
                pass
        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestErrorMessages:
    """Tests for error context."""

    def test_base_class(self):
        assert issubclass(FileOpenError, MappingImportError)
        assert issubclass(InsufficientFields, MappingImportError)

    def test_file_open_message(self):
        error = FileOpenError("/data/traj.txt")
        assert str(error) == "Error loading '/data/traj.txt': Could not open file!"

    def test_insufficient_fields_message(self):
        error = InsufficientFields("/data/traj.txt", 3, "1 2", 8, 2)
        assert "line 3" in str(error)
        assert "'1 2'" in str(error)

    def test_unsupported_type_message(self):
        error = UnsupportedCameraType("calib.yaml", "spherical")
        assert "'spherical'" in str(error)
        assert error.camera_type == "spherical"

    @pytest.mark.parametrize("error", [
        FileOpenError("/data/traj.txt", "No such file or directory"),
        ConfigLoadError("calib.yaml", "Invalid YAML"),
        FieldMissingOrInvalid("calib.yaml", "fx", "is missing"),
        UnsupportedCameraType("calib.yaml", "spherical"),
        InsufficientFields("/data/traj.txt", 3, "1 2", 8, 2),
        MalformedLine("/data/points.txt", 7, "1 x 3", "bad float"),
    ])
    def test_errors_survive_pickling(self, error):
        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is type(error)
        assert str(restored) == str(error)
        assert restored.__dict__ == error.__dict__


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
