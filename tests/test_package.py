from __future__ import annotations

import importlib
import sys

import pytest


def test_public_api():
    import wrapit

    assert callable(wrapit.install)
    assert callable(wrapit.wrapit)
    assert wrapit.get_executable_path() == wrapit.wrapit_path
    assert wrapit.wrapit_path == str(wrapit.default_locator().executable_path)


def test_import_fails_on_windows(monkeypatch):
    for name in [m for m in sys.modules if m == "wrapit" or m.startswith("wrapit.")]:
        monkeypatch.delitem(sys.modules, name)
    monkeypatch.setattr(sys, "platform", "win32")
    with pytest.raises(RuntimeError, match="cannot be used on Windows"):
        importlib.import_module("wrapit")
    assert "wrapit" not in sys.modules
