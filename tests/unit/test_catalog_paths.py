"""Unit tests for the path conversions."""

import pytest

from textamender.transforms import Pipeline
from textamender.transforms.catalog.paths import (
    this_pc_folders_to_full_path,
    to_git_bash_path,
    to_unix_path,
    to_windows_path,
    to_wsl_path,
    wsl_to_windows_path,
)


class TestWindowsToPosix:
    """Tests for Windows paths to POSIX-style paths."""

    def test_unix_path_keeps_drive(self):
        assert to_unix_path.apply("C:\\Users\\a") == "C:/Users/a"

    def test_git_bash(self):
        assert to_git_bash_path.apply("C:\\Users\\a") == "/c/Users/a"

    @pytest.mark.parametrize(
        "path,expected",
        [("D:\\data", "/d/data"), ("e:\\x", "/e/x")],
    )
    def test_git_bash_folds_drive_letter(self, path, expected):
        assert to_git_bash_path.apply(path) == expected

    def test_git_bash_after_unix_path(self):
        pipeline = Pipeline([to_unix_path, to_git_bash_path])
        assert pipeline.run("C:\\Users\\a") == "/c/Users/a"

    def test_wsl(self):
        assert to_wsl_path.apply("C:\\Users\\a") == "/mnt/c/Users/a"

    def test_each_line_is_a_path(self):
        assert to_git_bash_path.apply("C:\\a\nD:\\b") == "/c/a\n/d/b"

    def test_drive_only_rewritten_at_start(self):
        assert to_git_bash_path.apply("see C:\\x") == "see C:/x"


class TestPosixToWindows:
    """Tests for POSIX-style paths to Windows paths."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/c/Users/a", "C:\\Users\\a"),
            ("/mnt/d/data", "D:\\data"),
            ("/c", "C:"),
            ("/usr/bin", "\\usr\\bin"),
            ("relative/dir", "relative\\dir"),
        ],
    )
    def test_windows_path(self, path, expected):
        assert to_windows_path.apply(path) == expected

    def test_wsl_to_windows(self):
        assert wsl_to_windows_path.apply("/mnt/c/Users") == "C:\\Users"

    def test_wsl_round_trip(self):
        path = "C:\\Users\\a"
        assert wsl_to_windows_path.apply(to_wsl_path.apply(path)) == path

    def test_git_bash_round_trip(self):
        path = "C:\\Users\\a"
        assert to_windows_path.apply(to_git_bash_path.apply(path)) == path


class TestThisPcFolders:
    """Tests for This PC folder expansion."""

    def test_known_folder(self):
        assert this_pc_folders_to_full_path.apply("Documents\\notes.txt") == (
            "C:\\Users\\%USERNAME%\\Documents\\notes.txt"
        )

    def test_unknown_folder_unchanged(self):
        assert this_pc_folders_to_full_path.apply("Projects\\x") == "Projects\\x"
