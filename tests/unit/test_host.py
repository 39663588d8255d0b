from __future__ import annotations

import pytest

from wrapit import host
from wrapit.errors import PlatformUnsupportedError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("linux", "linux"),
        ("linux2", "linux"),
        ("freebsd13", "freebsd"),
        ("darwin", "macos"),
        ("win32", "windows"),
        ("cygwin", "windows"),
        ("sunos5", "sunos5"),
    ],
)
def test_current_platform_mapping(raw, expected):
    assert host.current_platform(raw) == expected


def test_library_path_variable_per_platform():
    assert host.library_path_variable("linux") == "LD_LIBRARY_PATH"
    assert host.library_path_variable("freebsd") == "LD_LIBRARY_PATH"
    assert host.library_path_variable("macos") == "DYLD_FALLBACK_LIBRARY_PATH"


@pytest.mark.parametrize("platform", ["windows", "sunos5", "aix"])
def test_library_path_variable_rejects_other_platforms(platform):
    with pytest.raises(PlatformUnsupportedError) as excinfo:
        host.library_path_variable(platform)
    assert excinfo.value.platform == platform


def test_check_platform_returns_result_instead_of_raising():
    result = host.check_platform("windows")
    assert not result.ok
    assert result.platform == "windows"
    assert "Windows" in (result.reason or "")
    assert host.check_platform("linux").ok


def test_ensure_supported_raises_on_windows():
    with pytest.raises(PlatformUnsupportedError, match="cannot be used on Windows"):
        host.ensure_supported("windows")
    assert host.ensure_supported("macos").ok


def test_runtime_library_dirs_are_unique():
    dirs = host.runtime_library_dirs()
    assert dirs
    assert len(dirs) == len({str(d) for d in dirs})
