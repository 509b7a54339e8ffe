"""
Tests for the command-line interface.
"""

import pytest

from mapping_import.cli import main


CAMERA_YAML = """%YAML:1.0
type: pinhole
width: 640
height: 480
fx: 500.0
fy: 500.0
cx: 320.0
cy: 240.0
k1: 0.0
k2: 0.0
p1: 0.0
p2: 0.0
"""


class TestCLI:
    """Tests for the mapping-import entry point."""

    def test_camera_summary(self, tmp_path, capsys):
        (tmp_path / "calib.yaml").write_text(CAMERA_YAML)

        assert main(['camera', str(tmp_path), 'calib.yaml']) == 0
        out = capsys.readouterr().out
        assert "640 x 480" in out

    def test_trajectory_summary(self, tmp_path, capsys):
        path = tmp_path / "trajectory.txt"
        path.write_text(
            "10 0 0 0 0 0 0 1\n"
            "20 3 4 0 0 0 0 1\n"
        )

        assert main(['trajectory', str(path)]) == 0
        out = capsys.readouterr().out
        assert "Poses:            2" in out
        assert "10 to 20" in out
        assert "5.000" in out

    def test_points_summary(self, tmp_path, capsys):
        path = tmp_path / "points.txt"
        path.write_text("0 0 0\n1 2 3\n")

        assert main(['points', str(path)]) == 0
        out = capsys.readouterr().out
        assert "Points:           2" in out
        assert "1.000 2.000 3.000" in out

    def test_empty_points(self, tmp_path, capsys):
        path = tmp_path / "points.txt"
        path.write_text("")

        assert main(['points', str(path)]) == 0
        assert "Points:           0" in capsys.readouterr().out

    def test_missing_file_returns_error(self, tmp_path):
        assert main(['trajectory', str(tmp_path / "missing.txt")]) == 1

    def test_unsupported_camera_returns_error(self, tmp_path):
        path = tmp_path / "calib.yaml"
        path.write_text(CAMERA_YAML.replace("pinhole", "fisheye"))

        assert main(['camera', str(path)]) == 1

    def test_unknown_kind(self):
        with pytest.raises(SystemExit):
            main(['mesh', 'file.txt'])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
