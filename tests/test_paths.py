import pytest

from citybuild.paths import (
    APP_DIR_NAME,
    data_dir,
    data_dir_base,
    savegame_dir,
)


def test_linux_prefers_xdg_data_home():
    env = {"XDG_DATA_HOME": "/xdg", "HOME": "/home/u"}
    assert data_dir_base("linux", env) == "/xdg"


def test_linux_falls_back_to_home():
    env = {"HOME": "/home/u"}
    assert data_dir_base("linux", env) == "/home/u" + "/.local/share"


def test_linux_without_home_raises():
    with pytest.raises(KeyError):
        data_dir_base("linux", {})


def test_windows_uses_appdata():
    env = {"APPDATA": "C:/Users/u/AppData"}
    assert data_dir_base("win32", env) == "C:/Users/u/AppData"


def test_windows_without_appdata_raises():
    with pytest.raises(KeyError):
        data_dir_base("win32", {"HOME": "/home/u"})


def test_mac_uses_application_support():
    env = {"HOME": "/Users/u"}
    assert data_dir_base("darwin", env) == "/Users/u" + "/Library/Application Support"


def test_other_platform_has_empty_base():
    assert data_dir_base("sunos5", {}) == ""


def test_data_dir_builds_on_base():
    env = {"HOME": "/home/u"}
    base = data_dir_base("linux", env)
    assert data_dir("linux", env) == f"{base}/{APP_DIR_NAME}/"


def test_savegame_dir_is_under_data_dir():
    env = {"XDG_DATA_HOME": "/xdg"}
    result = savegame_dir("linux", env)
    assert result == data_dir("linux", env) + "saves/"
    assert result.endswith("/saves/")