import sys

import pytest

from citybuild.platform_info import platform_name


@pytest.mark.parametrize(
    "system, expected",
    [
        ("win32", "win"),
        ("Windows", "win"),
        ("darwin", "macosx"),
        ("Darwin", "macosx"),
        ("freebsd13", "freebsd"),
        ("OpenBSD", "freebsd"),
        ("haiku1", "haiku"),
        ("android", "android"),
        ("linux", "linux"),
        ("sunos5", "linux"),
    ],
)
def test_platform_name(system, expected):
    assert platform_name(system) == expected


def test_default_uses_running_platform():
    assert platform_name() == platform_name(sys.platform)