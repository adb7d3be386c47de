"""Tests for persisted display preferences."""

import json

import pytest

from worklog.preferences import Preferences, detect_system_theme


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("WORKLOG_COLOR_SCHEME", raising=False)
    monkeypatch.delenv("COLORFGBG", raising=False)


@pytest.fixture
def prefs_file(tmp_path):
    return tmp_path / "config" / "prefs.json"


class TestDetectSystemTheme:
    def test_defaults_to_light(self):
        assert detect_system_theme() == "light"

    def test_explicit_env(self, monkeypatch):
        monkeypatch.setenv("WORKLOG_COLOR_SCHEME", "Dark")
        assert detect_system_theme() == "dark"

    @pytest.mark.parametrize("value,expected", [("15;0", "dark"), ("0;15", "light"), ("15;default;0", "dark")])
    def test_colorfgbg(self, monkeypatch, value, expected):
        monkeypatch.setenv("COLORFGBG", value)
        assert detect_system_theme() == expected


class TestPreferences:
    def test_first_run_uses_ambient_theme(self, prefs_file, monkeypatch):
        monkeypatch.setenv("WORKLOG_COLOR_SCHEME", "dark")
        prefs = Preferences.load(prefs_file)
        assert prefs.theme == "dark"
        assert not prefs_file.exists()

    def test_saved_theme_wins(self, prefs_file, monkeypatch):
        monkeypatch.setenv("WORKLOG_COLOR_SCHEME", "dark")
        prefs_file.parent.mkdir(parents=True)
        prefs_file.write_text(json.dumps({"theme": "light"}))
        assert Preferences.load(prefs_file).theme == "light"

    def test_invalid_saved_theme_falls_back(self, prefs_file):
        prefs_file.parent.mkdir(parents=True)
        prefs_file.write_text(json.dumps({"theme": "sepia"}))
        assert Preferences.load(prefs_file).theme == "light"

    def test_corrupt_file_falls_back(self, prefs_file):
        prefs_file.parent.mkdir(parents=True)
        prefs_file.write_text("{not json")
        assert Preferences.load(prefs_file).theme == "light"

    def test_toggle_writes_through(self, prefs_file):
        prefs = Preferences.load(prefs_file)
        assert prefs.toggle() == "dark"
        assert json.loads(prefs_file.read_text()) == {"theme": "dark"}
        assert Preferences.load(prefs_file).theme == "dark"

        prefs.toggle()
        assert Preferences.load(prefs_file).theme == "light"

    def test_set_theme_rejects_unknown(self, prefs_file):
        prefs = Preferences.load(prefs_file)
        with pytest.raises(ValueError, match="sepia"):
            prefs.set_theme("sepia")
        assert not prefs_file.exists()
