"""Environment helpers shared across runtime modules."""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping
import os

TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off"}


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


def env_flag(value: str | None, *, default: bool = False) -> bool:
    token = _normalize(value)
    if not token:
        return default
    if token in TRUTHY:
        return True
    if token in FALSY:
        return False
    return default


def coerce_bool(value: Any, *, name: str = "value") -> bool:
    """Convert ``value`` to a bool, rejecting anything ambiguous.

    Accepts real booleans, the integers 0 and 1, and strings from the
    ``TRUTHY``/``FALSY`` sets. Everything else raises ``TypeError``.
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        token = _normalize(value)
        if token in TRUTHY:
            return True
        if token in FALSY:
            return False
    raise TypeError(f"{name} must be a boolean, got {value!r}")


def join_search_path(*parts: str | None, sep: str = ":") -> str:
    """Join path-list fragments in order, skipping empty ones."""

    return sep.join(part for part in parts if part)


def prepend_search_path(
    env: MutableMapping[str, str],
    variable: str,
    value: str,
    *,
    sep: str = ":",
) -> str:
    """Set ``env[variable]`` to ``value`` followed by whatever it held before."""

    merged = join_search_path(value, env.get(variable), sep=sep)
    env[variable] = merged
    return merged


def install_script_requested(env: Mapping[str, str] | None = None) -> bool:
    data = os.environ if env is None else env
    return env_flag(data.get("WRAPIT_INSTALL_SCRIPT"), default=False)


__all__ = [
    "TRUTHY",
    "FALSY",
    "coerce_bool",
    "env_flag",
    "install_script_requested",
    "join_search_path",
    "prepend_search_path",
]
