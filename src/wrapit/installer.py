"""Install a ``wrapit`` command outside of Python.

``install(path)`` places a ``wrapit`` entry in ``path`` that runs the
executable shipped with this package: a symbolic link where the loader finds
the bundled libraries on its own, or a small launcher script that exports
the library search path (and SDKROOT on macOS) before exec'ing the tool.
"""
from __future__ import annotations

import logging
import os
import shlex
import stat
import sys
from pathlib import Path
from typing import Mapping, Optional

from .artifact import EXECUTABLE_NAME
from .locator import Locator, default_locator
from .utils.env import install_script_requested

LOG = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
REINSTALL_HINT = "pip install --force-reinstall wrapit"


def render_launcher_script(locator: Locator) -> str:
    """Shell launcher that validates the install, sets the loader path and execs wrapit."""
    variable = locator.library_path_variable()
    lines = [
        "#!/bin/sh",
        "# wrapit launcher generated by the wrapit Python package",
        f"WRAPIT_EXECUTABLE={shlex.quote(str(locator.executable_path))}",
        'if [ ! -f "$WRAPIT_EXECUTABLE" ]; then',
        f'  echo "wrapit executable $WRAPIT_EXECUTABLE not found. Reinstall it with \'{REINSTALL_HINT}\' and run the installation again." >&2',
        "  exit 1",
        "fi",
    ]
    if locator.needs_sdk_root:
        lines += [
            'if [ -z "${SDKROOT+x}" ]; then',
            '  SDKROOT=$(xcrun --show-sdk-path) || { echo "Failed to retrieve the macOS SDK path with xcrun. Set the SDKROOT environment variable." >&2; exit 1; }',
            "fi",
            'if [ ! -d "$SDKROOT" ]; then',
            '  echo "Directory $SDKROOT pointed by SDKROOT environment variable does not exist." >&2',
            "  exit 1",
            "fi",
            "export SDKROOT",
        ]
    lines += [
        f'{variable}={shlex.quote(locator.library_path_value())}"${{{variable}:+:${variable}}}"',
        f"export {variable}",
        'exec "$WRAPIT_EXECUTABLE" "$@"',
    ]
    return "\n".join(lines) + "\n"


def install(
    path: str | os.PathLike[str] = ".",
    *,
    script: Optional[bool] = None,
    locator: Optional[Locator] = None,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Install the wrapit command in ``path`` (default: current directory).

    Returns 0 on success or when the command is already installed there, and
    1 when the user has to fix something first; the reason goes to stderr.
    Existing files are never removed.
    """
    target = os.fspath(path)
    if not os.path.isdir(target):
        print(f"The path {target} is not a directory. Installation failed.", file=sys.stderr)
        return 1

    loc = locator or default_locator()
    executable = str(loc.executable_path)
    if not os.path.isfile(executable):
        print(
            "WrapIt executable not found. Check that the wrapit package is installed, "
            f"e.g. run '{REINSTALL_HINT}'. Installation failed.",
            file=sys.stderr,
        )
        return 1

    destpath = os.path.join(target, EXECUTABLE_NAME)
    destdir = os.path.dirname(destpath)
    destdir_h = ("current" if destdir == "." else destdir) + " directory"

    use_script = script if script is not None else (loc.needs_sdk_root or install_script_requested(env))
    content = render_launcher_script(loc) if use_script else None

    if _samefile(destpath, executable) or (content is not None and _has_content(destpath, content)):
        print(f"The wrapit command is already installed in {destdir_h}.")
        return 0

    if os.path.lexists(destpath):
        print(
            f"File {destpath} is on the way. You need to remove it before running install.",
            file=sys.stderr,
        )
        return 1

    try:
        if content is None:
            os.symlink(executable, destpath)
        else:
            _write_launcher(Path(destpath), content)
    except OSError as exc:
        print(f"{exc}, Installation failed.", file=sys.stderr)
        return 1

    LOG.debug("Installed %s -> %s (%s)", destpath, executable, "script" if content else "symlink")
    print(
        f"Command wrapit installed in {destdir_h}. "
        f"Run {destpath} --help to get help on the command invocation."
    )
    return 0


def _samefile(a: str, b: str) -> bool:
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def _has_content(path: str, content: str) -> bool:
    if os.path.islink(path) or not os.path.isfile(path):
        return False
    try:
        return Path(path).read_text(encoding="utf-8") == content
    except (OSError, UnicodeDecodeError):
        return False


def _write_launcher(dest: Path, content: str) -> None:
    with dest.open("x", encoding="utf-8") as fh:
        try:
            fh.write(content)
        except OSError:
            fh.close()
            dest.unlink()
            raise
    try:
        os.chmod(dest, dest.stat().st_mode | EXECUTE_BITS)
    except OSError:
        # A non-executable launcher must not be mistaken for an installed one.
        dest.unlink()
        raise


__all__ = ["install", "render_launcher_script"]
