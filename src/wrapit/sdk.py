"""SDKROOT discovery for macOS hosts.

The compiler embedded in wrapit needs the system headers of the macOS SDK.
When ``SDKROOT`` is not configured we ask the developer tools for it.
"""
from __future__ import annotations

import logging
import os
import subprocess
from typing import Callable, MutableMapping, Sequence

from .errors import SdkRootError

LOG = logging.getLogger(__name__)

SDKROOT_VARIABLE = "SDKROOT"
XCRUN_COMMAND: Sequence[str] = ("xcrun", "--show-sdk-path")

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def query_sdk_root(*, runner: Runner = subprocess.run) -> str:
    """Return the SDK path reported by ``xcrun``."""
    try:
        proc = runner(list(XCRUN_COMMAND), stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    except FileNotFoundError as exc:
        raise SdkRootError(
            "xcrun not found. Install the Xcode command line tools or set the SDKROOT environment variable."
        ) from exc
    if proc.returncode != 0:
        detail = (proc.stderr or "").strip()
        raise SdkRootError(
            f"Failed to retrieve the macOS SDK path with '{' '.join(XCRUN_COMMAND)}'"
            f" (exit {proc.returncode}){': ' + detail if detail else ''}. Set the SDKROOT environment variable."
        )
    return (proc.stdout or "").strip()


def ensure_sdk_root(env: MutableMapping[str, str], *, runner: Runner = subprocess.run) -> str:
    """Make sure ``env`` carries a valid SDKROOT, querying xcrun when it is unset."""
    configured = env.get(SDKROOT_VARIABLE)
    if configured is not None:
        if not os.path.isdir(configured):
            raise SdkRootError(f"Directory {configured} pointed by SDKROOT environment variable does not exist.")
        return configured

    sdk_root = query_sdk_root(runner=runner)
    if not sdk_root or not os.path.isdir(sdk_root):
        raise SdkRootError(
            f"macOS SDK directory '{sdk_root}' returned by xcrun does not exist. Set the SDKROOT environment variable."
        )
    LOG.debug("SDKROOT resolved via xcrun: %s", sdk_root)
    env[SDKROOT_VARIABLE] = sdk_root
    return sdk_root


__all__ = ["SDKROOT_VARIABLE", "XCRUN_COMMAND", "ensure_sdk_root", "query_sdk_root"]
