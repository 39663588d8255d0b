"""Artifact bundle describing where the prebuilt wrapit tool lives.

The executable and its shared libraries are not built by this package. A
binary wheel or a system package provides them together with a small YAML
manifest::

    version: "1.6.0"
    executable: bin/wrapit
    libdir: lib
    dependency_libdirs:
      - ../openssl/lib

Relative paths are resolved against the manifest's directory.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ArtifactManifestError

LOG = logging.getLogger(__name__)

PACKAGE_ARTIFACT_DIR = Path(__file__).resolve().parent / "_artifact"
MANIFEST_NAME = "artifact.yaml"
EXECUTABLE_NAME = "wrapit"


class ArtifactBundle(BaseModel):
    """Location of the wrapit executable and the libraries it links against."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    executable: Path
    libdir: Path
    dependency_libdirs: List[Path] = Field(default_factory=list)
    version: Optional[str] = None

    def resolved_against(self, base: Path) -> "ArtifactBundle":
        """Return a copy where every relative path is anchored at ``base``."""

        def _abs(path: Path) -> Path:
            path = path.expanduser()
            return path if path.is_absolute() else (base / path).resolve()

        return self.model_copy(
            update={
                "executable": _abs(self.executable),
                "libdir": _abs(self.libdir),
                "dependency_libdirs": [_abs(p) for p in self.dependency_libdirs],
            }
        )


@dataclass(frozen=True)
class ArtifactConfig:
    """Environment overrides that decide where the bundle comes from."""

    manifest: Optional[Path]
    executable: Optional[Path]
    libdir: Optional[Path]
    package_dir: Path = PACKAGE_ARTIFACT_DIR

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ArtifactConfig:
        data = os.environ if env is None else env
        return cls(
            manifest=_optional_path(data.get("WRAPIT_ARTIFACT_MANIFEST")),
            executable=_optional_path(data.get("WRAPIT_EXECUTABLE")),
            libdir=_optional_path(data.get("WRAPIT_LIBDIR")),
        )


def load_manifest(path: Path) -> ArtifactBundle:
    """Read and validate a YAML manifest; relative paths resolve next to it."""
    manifest = Path(path).expanduser().resolve()
    try:
        raw: Any = yaml.safe_load(manifest.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ArtifactManifestError(f"Cannot read artifact manifest {manifest}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ArtifactManifestError(f"Artifact manifest {manifest} is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ArtifactManifestError(f"Artifact manifest {manifest} must contain a mapping")
    try:
        bundle = ArtifactBundle.model_validate(raw)
    except ValidationError as exc:
        raise ArtifactManifestError(f"Invalid artifact manifest {manifest}: {exc}") from exc
    return bundle.resolved_against(manifest.parent)


def load_bundle(env: Mapping[str, str] | None = None, *, config: ArtifactConfig | None = None) -> ArtifactBundle:
    """Resolve the bundle: explicit manifest, executable override, packaged manifest, packaged layout."""
    cfg = config or ArtifactConfig.from_env(env)
    if cfg.manifest is not None:
        bundle = load_manifest(cfg.manifest)
        source = f"manifest {cfg.manifest}"
    elif cfg.executable is not None:
        executable = cfg.executable.resolve()
        libdir = cfg.libdir.resolve() if cfg.libdir else executable.parent.parent / "lib"
        bundle = ArtifactBundle(executable=executable, libdir=libdir)
        source = "WRAPIT_EXECUTABLE"
    elif (cfg.package_dir / MANIFEST_NAME).is_file():
        bundle = load_manifest(cfg.package_dir / MANIFEST_NAME)
        source = "packaged manifest"
    else:
        bundle = ArtifactBundle(
            executable=cfg.package_dir / "bin" / EXECUTABLE_NAME,
            libdir=cfg.package_dir / "lib",
        )
        source = "packaged layout"
    LOG.debug("wrapit bundle from %s: executable=%s libdir=%s", source, bundle.executable, bundle.libdir)
    return bundle


def _optional_path(value: str | None) -> Optional[Path]:
    token = (value or "").strip()
    if not token:
        return None
    return Path(token).expanduser()


__all__ = [
    "ArtifactBundle",
    "ArtifactConfig",
    "EXECUTABLE_NAME",
    "PACKAGE_ARTIFACT_DIR",
    "load_bundle",
    "load_manifest",
]
