"""Translate keyword options into wrapit command-line flags.

``resource_dir="/usr/lib"`` becomes ``--resource-dir=/usr/lib``, ``force=True``
becomes ``--force`` and ``v=True`` becomes ``-v``. ``False`` drops the flag.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

RETURNCODE_OPTION = "returncode"

OptionPairs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def flag_name(name: str) -> str:
    token = str(name).replace("_", "-")
    if not token:
        raise ValueError("option name cannot be empty")
    return ("-" if len(token) == 1 else "--") + token


def render_option(name: str, value: Any) -> Optional[str]:
    """Render one ``(name, value)`` pair, or ``None`` when nothing is emitted."""
    flag = flag_name(name)
    if isinstance(value, bool):
        return flag if value else None
    return f"{flag}={value}"


def iter_pairs(options: OptionPairs) -> List[Tuple[str, Any]]:
    if isinstance(options, Mapping):
        return list(options.items())
    return [(name, value) for name, value in options]


def render_options(options: OptionPairs) -> List[str]:
    rendered: List[str] = []
    for name, value in iter_pairs(options):
        if name == RETURNCODE_OPTION:
            continue
        flag = render_option(name, value)
        if flag is not None:
            rendered.append(flag)
    return rendered


__all__ = ["RETURNCODE_OPTION", "flag_name", "iter_pairs", "render_option", "render_options"]
