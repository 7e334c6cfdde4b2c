"""Tests for settings loading and overrides."""

import os

from spaserve.config import Settings, build_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("HOST", "PORT", "ROOT_DIR", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.HOST == "0.0.0.0"
        assert s.PORT == 8000
        assert s.ROOT_DIR == "./dist"
        assert s.LOG_LEVEL == "info"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "9123")
        monkeypatch.setenv("ROOT_DIR", str(tmp_path))
        s = build_settings()
        assert s.PORT == 9123
        assert s.ROOT_DIR == str(tmp_path)

    def test_explicit_overrides_win(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "9123")
        s = build_settings(PORT=7000, ROOT_DIR=str(tmp_path))
        assert s.PORT == 7000
        assert s.root_path == tmp_path

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("PORT", "9123")
        s = build_settings(PORT=None)
        assert s.PORT == 9123

    def test_relative_root_made_absolute(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("ROOT_DIR", raising=False)
        s = build_settings(ROOT_DIR="build")
        assert os.path.isabs(s.ROOT_DIR)
        assert s.root_path == tmp_path.resolve() / "build"
