"""Run the wrapit executable from Python.

Options are passed as keyword arguments:

* ``name=value`` for options taking an argument, e.g.
  ``resource_dir="/usr/lib/..."`` passes ``--resource-dir=/usr/lib/...``;
* ``name=True`` for options without argument, e.g. ``force=True`` passes
  ``--force``.

Underscores in the argument name stand for the dashes of the option name.
Call ``wrapit(help=True)`` for the list of options. With ``returncode=True``
the exit status of the command is returned (0 on success), otherwise
``None``.
"""
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Any, Callable, List, Mapping, MutableMapping, Optional, Sequence

from . import sdk
from .locator import Locator, default_locator
from .options import RETURNCODE_OPTION, OptionPairs, iter_pairs, render_options
from .utils.env import coerce_bool, prepend_search_path

LOG = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[Any]"]


def build_command(executable: Path | str, args: Sequence[Any] = (), options: OptionPairs = ()) -> List[str]:
    """Build ``[executable, *flags, *args]``; flags keep the caller's order."""
    positional = [os.fspath(a) if isinstance(a, os.PathLike) else str(a) for a in args]
    return [str(executable), *render_options(options), *positional]


def build_environment(
    locator: Locator,
    base_env: Optional[Mapping[str, str]] = None,
    *,
    sdk_runner: sdk.Runner = subprocess.run,
) -> MutableMapping[str, str]:
    """Copy ``base_env`` and prepend the tool's library path; ensure SDKROOT on macOS."""
    env = dict(os.environ if base_env is None else base_env)
    variable = locator.library_path_variable()
    value = prepend_search_path(env, variable, locator.library_path_value())
    LOG.debug("%s=%s", variable, value)
    if locator.needs_sdk_root:
        sdk.ensure_sdk_root(env, runner=sdk_runner)
    return env


def exit_status(returncode: int) -> int:
    """Shell-style status: a child killed by signal N reports 128 + N."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def invoke(
    args: Sequence[Any] = (),
    options: OptionPairs = (),
    *,
    returncode: bool = False,
    locator: Optional[Locator] = None,
    env: Optional[Mapping[str, str]] = None,
    runner: Runner = subprocess.run,
    sdk_runner: sdk.Runner = subprocess.run,
) -> Optional[int]:
    """Run wrapit with explicit ``(name, value)`` option pairs and block until it exits."""
    pairs = iter_pairs(options)
    for name, value in pairs:
        if name == RETURNCODE_OPTION:
            returncode = coerce_bool(value, name=RETURNCODE_OPTION)
    loc = locator or default_locator()
    cmd = build_command(loc.executable_path, args, pairs)
    child_env = build_environment(loc, env, sdk_runner=sdk_runner)
    LOG.debug("Running %s", " ".join(cmd))
    proc = runner(cmd, env=child_env, check=False)
    status = exit_status(proc.returncode)
    if status != 0:
        LOG.debug("wrapit exited with status %s", status)
    return status if returncode else None


def wrapit(*args: Any, **options: Any) -> Optional[int]:
    """Launch the wrapit command; see the module docstring for the option syntax."""
    return invoke(args, options)


__all__ = ["build_command", "build_environment", "exit_status", "invoke", "wrapit"]
