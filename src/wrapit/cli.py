from __future__ import annotations

"""Command-line interface for installing and running wrapit."""

import argparse
import logging
import os
import shlex
import sys
from typing import List, Optional, Sequence

from . import sdk
from .errors import WrapItError
from .installer import install
from .launcher import invoke
from .locator import Locator, default_locator

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wrapit-shim", description="Install and run the wrapit command")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to WRAPIT_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    install_cmd = sub.add_parser("install", help="Install the wrapit command in a directory")
    install_cmd.add_argument("path", nargs="?", default=".", help="Destination directory (default: .)")
    mode = install_cmd.add_mutually_exclusive_group()
    mode.add_argument(
        "--script",
        dest="script",
        action="store_const",
        const=True,
        default=None,
        help="Write a launcher script that sets the library path",
    )
    mode.add_argument(
        "--symlink",
        dest="script",
        action="store_const",
        const=False,
        help="Create a symbolic link to the executable",
    )

    sub.add_parser("path", help="Print the path of the wrapit executable")
    sub.add_parser("env", help="Print environment exports needed to run the executable directly")

    run_cmd = sub.add_parser("run", help="Run wrapit with the given arguments")
    run_cmd.add_argument("args", nargs=argparse.REMAINDER, help="Arguments forwarded to wrapit, flags included")
    return parser


def run_install(parsed_args: argparse.Namespace, locator: Locator) -> int:
    return install(parsed_args.path, script=parsed_args.script, locator=locator)


def run_path(_: argparse.Namespace, locator: Locator) -> int:
    executable = locator.executable_path
    print(executable)
    if not executable.is_file():
        print(f"wrapit executable {executable} does not exist.", file=sys.stderr)
        return 1
    return 0


def run_env(_: argparse.Namespace, locator: Locator) -> int:
    exports = dict(locator.library_path_overrides())
    if locator.needs_sdk_root:
        env = dict(os.environ)
        exports[sdk.SDKROOT_VARIABLE] = sdk.ensure_sdk_root(env)
    for key, value in exports.items():
        print(_format_export(key, value))
    return 0


def run_tool(parsed_args: argparse.Namespace, locator: Locator) -> int:
    args = list(parsed_args.args)
    if args and args[0] == "--":
        args = args[1:]
    status = invoke(args, returncode=True, locator=locator)
    return status if status is not None else 0


def _format_export(key: str, value: str) -> str:
    return f"export {key}={shlex.quote(str(value))}"


def _configure_logging(level: Optional[str]) -> None:
    name = (level or os.environ.get("WRAPIT_LOG_LEVEL") or "WARNING").upper().strip()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _split_run_args(argv: Sequence[str]) -> tuple[List[str], Optional[List[str]]]:
    """Cut ``argv`` after the ``run`` command; wrapit's own flags never reach argparse."""
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--log-level":
            i += 2
        elif token.startswith("--log-level="):
            i += 1
        elif token == "run":
            return list(argv[: i + 1]), list(argv[i + 1 :])
        else:
            break
    return list(argv), None


def main(argv: Optional[Sequence[str]] = None, *, locator: Optional[Locator] = None) -> int:
    parser = build_parser()
    head, tool_args = _split_run_args(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(head)
    if tool_args is not None:
        args.args = tool_args
    _configure_logging(args.log_level)
    handlers = {
        "install": run_install,
        "path": run_path,
        "env": run_env,
        "run": run_tool,
    }
    handler = handlers[args.command]
    try:
        return handler(args, locator or default_locator())
    except WrapItError as exc:
        raise SystemExit(str(exc))


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
