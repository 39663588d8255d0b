"""Host platform facts used to launch the wrapit executable.

The dynamic loader reads a different search-path variable on each operating
system, and the Python runtime's own shared libraries must stay visible to
the tool. This module keeps those rules in one place:

* ``current_platform`` maps ``sys.platform`` to a short host name.
* ``library_path_variable`` names the loader variable for a host.
* ``runtime_library_dirs`` lists the interpreter's shared library directories.
* ``check_platform`` / ``ensure_supported`` gate package initialisation.
"""
from __future__ import annotations

import sys
import sysconfig
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import PlatformUnsupportedError

LINUX = "linux"
FREEBSD = "freebsd"
MACOS = "macos"
WINDOWS = "windows"

_LIBRARY_PATH_VARIABLES = {
    LINUX: "LD_LIBRARY_PATH",
    FREEBSD: "LD_LIBRARY_PATH",
    MACOS: "DYLD_FALLBACK_LIBRARY_PATH",
}
SUPPORTED_PLATFORMS = frozenset(_LIBRARY_PATH_VARIABLES)
WINDOWS_MESSAGE = "The wrapit package cannot be used on Windows operating systems."


def current_platform(raw: Optional[str] = None) -> str:
    """Return ``linux``, ``freebsd``, ``macos``, ``windows`` or the raw name."""
    name = (raw if raw is not None else sys.platform).lower()
    if name.startswith("linux"):
        return LINUX
    if name.startswith("freebsd"):
        return FREEBSD
    if name == "darwin":
        return MACOS
    if name.startswith(("win32", "cygwin", "msys")):
        return WINDOWS
    return name


def library_path_variable(platform: Optional[str] = None) -> str:
    host = platform or current_platform()
    try:
        return _LIBRARY_PATH_VARIABLES[host]
    except KeyError:
        raise PlatformUnsupportedError(
            f"Unsupported platform '{host}'. Expected one of: {', '.join(sorted(SUPPORTED_PLATFORMS))}.",
            platform=host,
        ) from None


def runtime_library_dirs() -> List[Path]:
    """Shared library directories of the running Python interpreter."""
    candidates = [sysconfig.get_config_var("LIBDIR"), str(Path(sys.base_prefix) / "lib")]
    dirs: List[Path] = []
    for entry in candidates:
        if not entry:
            continue
        path = Path(entry)
        if path not in dirs:
            dirs.append(path)
    return dirs


@dataclass(frozen=True)
class InitResult:
    """Outcome of the platform gate run when the package initialises."""

    ok: bool
    platform: str
    reason: Optional[str] = None


def check_platform(platform: Optional[str] = None) -> InitResult:
    host = platform or current_platform()
    if host == WINDOWS:
        return InitResult(ok=False, platform=host, reason=WINDOWS_MESSAGE)
    return InitResult(ok=True, platform=host)


def ensure_supported(platform: Optional[str] = None) -> InitResult:
    result = check_platform(platform)
    if not result.ok:
        raise PlatformUnsupportedError(result.reason or WINDOWS_MESSAGE, platform=result.platform)
    return result


__all__ = [
    "FREEBSD",
    "InitResult",
    "LINUX",
    "MACOS",
    "SUPPORTED_PLATFORMS",
    "WINDOWS",
    "check_platform",
    "current_platform",
    "ensure_supported",
    "library_path_variable",
    "runtime_library_dirs",
]
