"""Test configuration helpers."""
from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    for entry in (src, root):
        entry_str = str(entry)
        if entry_str not in sys.path:
            sys.path.insert(0, entry_str)


_ensure_src_on_path()

from wrapit.artifact import ArtifactBundle  # noqa: E402
from wrapit.locator import Locator  # noqa: E402

# Stand-in for the real tool: reports its loader environment and arguments.
FAKE_TOOL_SCRIPT = """#!/bin/sh
echo "LIBPATH=${LD_LIBRARY_PATH:-}"
echo "SDKROOT=${SDKROOT:-}"
for arg in "$@"; do
  echo "ARG=$arg"
done
if [ -n "${WRAPIT_FAKE_SIGNAL:-}" ]; then
  kill -"$WRAPIT_FAKE_SIGNAL" $$
fi
exit "${WRAPIT_FAKE_EXIT:-0}"
"""


@dataclass(frozen=True)
class FakeTool:
    """A throwaway wrapit bundle laid out under ``tmp_path``."""

    root: Path
    executable: Path
    libdir: Path
    dependency_libdir: Path
    runtime_libdir: Path
    bundle: ArtifactBundle

    def locator(self, platform: str = "linux") -> Locator:
        return Locator(self.bundle, platform=platform, runtime_libdirs=[self.runtime_libdir])

    def expected_library_path(self) -> str:
        return ":".join(str(p) for p in (self.libdir, self.dependency_libdir, self.runtime_libdir))


@pytest.fixture
def fake_tool(tmp_path: Path) -> FakeTool:
    root = tmp_path / "artifact"
    executable = root / "bin" / "wrapit"
    libdir = root / "lib"
    dependency_libdir = tmp_path / "openssl" / "lib"
    runtime_libdir = tmp_path / "python" / "lib"
    for directory in (executable.parent, libdir, dependency_libdir, runtime_libdir):
        directory.mkdir(parents=True, exist_ok=True)
    executable.write_text(FAKE_TOOL_SCRIPT, encoding="utf-8")
    executable.chmod(executable.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    bundle = ArtifactBundle(executable=executable, libdir=libdir, dependency_libdirs=[dependency_libdir])
    return FakeTool(
        root=root,
        executable=executable,
        libdir=libdir,
        dependency_libdir=dependency_libdir,
        runtime_libdir=runtime_libdir,
        bundle=bundle,
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Process environment without loader or wrapit variables leaking in from the host."""
    for key in (
        "LD_LIBRARY_PATH",
        "DYLD_FALLBACK_LIBRARY_PATH",
        "SDKROOT",
        "WRAPIT_FAKE_EXIT",
        "WRAPIT_FAKE_SIGNAL",
        "WRAPIT_INSTALL_SCRIPT",
    ):
        monkeypatch.delenv(key, raising=False)
    return dict(os.environ)
