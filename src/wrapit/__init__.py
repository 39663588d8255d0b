"""wrapit package.

Installs the WrapIt! tool (https://github.com/grasph/wrapit) and runs it from
Python. Use ``wrapit.install()`` to make the command available outside of
Python and ``wrapit.wrapit()`` to run it in-process.
"""

from .host import ensure_supported

ensure_supported()

from .artifact import ArtifactBundle, load_bundle  # noqa: E402
from .errors import (  # noqa: E402
    ArtifactManifestError,
    PlatformUnsupportedError,
    SdkRootError,
    WrapItError,
)
from .installer import install  # noqa: E402
from .launcher import invoke, wrapit  # noqa: E402
from .locator import Locator, default_locator  # noqa: E402

__version__ = "0.1.0"

# Path of the wrapit executable installed with this package. ``install()``
# makes it reachable from a more convenient directory, e.g. one on PATH.
wrapit_path = str(default_locator().executable_path)


def get_executable_path() -> str:
    return wrapit_path


__all__ = [
    "ArtifactBundle",
    "ArtifactManifestError",
    "Locator",
    "PlatformUnsupportedError",
    "SdkRootError",
    "WrapItError",
    "get_executable_path",
    "install",
    "invoke",
    "load_bundle",
    "wrapit",
    "wrapit_path",
]
