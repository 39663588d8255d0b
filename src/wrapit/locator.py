"""Resolve the wrapit executable and the library path it needs at runtime."""
from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from . import host
from .artifact import ArtifactBundle, load_bundle

LOG = logging.getLogger(__name__)
PATH_SEPARATOR = ":"


class Locator:
    """Answers where the tool is and which directories the loader must search.

    The bundle and host facts are injected so callers (and tests) can point
    the locator at any layout; ``default_locator`` wires the real ones.
    """

    def __init__(
        self,
        bundle: ArtifactBundle,
        *,
        platform: Optional[str] = None,
        runtime_libdirs: Optional[Sequence[Path]] = None,
    ) -> None:
        self.bundle = bundle
        self.platform = platform or host.current_platform()
        self._runtime_libdirs = list(runtime_libdirs) if runtime_libdirs is not None else None

    @property
    def executable_path(self) -> Path:
        return self.bundle.executable

    @property
    def needs_sdk_root(self) -> bool:
        return self.platform == host.MACOS

    def library_path_variable(self) -> str:
        return host.library_path_variable(self.platform)

    def library_paths(self) -> List[Path]:
        """Library directories in loader precedence order; the tool's own libdir comes first."""
        runtime = self._runtime_libdirs if self._runtime_libdirs is not None else host.runtime_library_dirs()
        return _dedupe([self.bundle.libdir, *self.bundle.dependency_libdirs, *runtime])

    def library_path_value(self) -> str:
        return PATH_SEPARATOR.join(str(p) for p in self.library_paths())

    def library_path_overrides(self) -> Mapping[str, str]:
        return {self.library_path_variable(): self.library_path_value()}

    def __repr__(self) -> str:
        return f"Locator(executable={str(self.executable_path)!r}, platform={self.platform!r})"


def _dedupe(paths: Iterable[Path]) -> List[Path]:
    ordered: List[Path] = []
    seen: set[str] = set()
    for path in paths:
        key = str(path)
        if key in seen:
            continue
        seen.add(key)
        ordered.append(path)
    return ordered


@functools.lru_cache(maxsize=1)
def default_locator() -> Locator:
    """Locator for the installed bundle, resolved once per process."""
    locator = Locator(load_bundle())
    LOG.debug("Resolved %r", locator)
    return locator


__all__ = ["Locator", "PATH_SEPARATOR", "default_locator"]
