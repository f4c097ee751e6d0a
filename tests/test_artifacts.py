"""
Tests for artifact discovery.
"""

import os

import pytest

from envinject_cli.core.artifacts import (
    DEFAULT_EXTENSIONS,
    find_artifacts,
    normalize_extensions,
    validate_root,
)
from envinject_cli.core.errors import IOFailure

# Root ignores permission bits, so chmod cannot make a directory unreadable
needs_permissions = pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="requires a non-root POSIX user",
)


class TestNormalizeExtensions:

    def test_adds_dot_and_lowercases(self):
        assert normalize_extensions(["JS", ".Css", "html", "", "js"]) == [".js", ".css", ".html"]


class TestFindArtifacts:
    """Recursive, allow-listed discovery."""

    def test_finds_only_allow_listed_files(self, build_dir):
        found = [p.relative_to(build_dir).as_posix() for p in find_artifacts(build_dir, DEFAULT_EXTENSIONS)]
        assert found == [
            "server/app/index.html",
            "static/chunks/app.js",
            "static/chunks/main.js",
            "static/css/site.css",
        ]

    def test_extension_match_is_case_insensitive(self, tmp_path):
        (tmp_path / "BUNDLE.JS").write_text("x", encoding="utf-8")
        assert [p.name for p in find_artifacts(tmp_path, [".js"])] == ["BUNDLE.JS"]

    def test_custom_allow_list(self, build_dir):
        found = [p.name for p in find_artifacts(build_dir, [".json"])]
        assert found == ["page.json"]

    def test_empty_root_yields_nothing(self, tmp_path):
        assert find_artifacts(tmp_path, DEFAULT_EXTENSIONS) == []

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(IOFailure, match="does not exist") as exc_info:
            find_artifacts(tmp_path / "missing", DEFAULT_EXTENSIONS)
        assert exc_info.value.path == tmp_path / "missing"

    def test_symlinks_are_skipped(self, tmp_path):
        root = tmp_path / "build"
        root.mkdir()
        (tmp_path / "outside.js").write_text("x", encoding="utf-8")
        (root / "link.js").symlink_to(tmp_path / "outside.js")
        (root / "app.js").write_text("y", encoding="utf-8")

        assert [p.name for p in find_artifacts(root, DEFAULT_EXTENSIONS)] == ["app.js"]

    @needs_permissions
    def test_unreadable_root_raises(self, tmp_path):
        root = tmp_path / "build"
        root.mkdir()
        root.chmod(0)
        try:
            with pytest.raises(IOFailure, match="not readable"):
                find_artifacts(root, DEFAULT_EXTENSIONS)
        finally:
            root.chmod(0o755)

    @needs_permissions
    def test_unreadable_subdirectory_raises(self, build_dir):
        locked = build_dir / "server"
        locked.chmod(0)
        try:
            with pytest.raises(IOFailure, match="Cannot read directory") as exc_info:
                find_artifacts(build_dir, DEFAULT_EXTENSIONS)
            assert exc_info.value.path == locked
        finally:
            locked.chmod(0o755)

    def test_file_as_root_raises(self, tmp_path):
        target = tmp_path / "file.js"
        target.write_text("x", encoding="utf-8")
        with pytest.raises(IOFailure, match="not a directory"):
            validate_root(target)
