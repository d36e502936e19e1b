"""The service modules are run in place and never installed as top-level modules."""

import os

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = os.path.join(os.path.dirname(__file__), "..", "..", "pyproject.toml")


def test_no_top_level_modules_installed():
    with open(PYPROJECT, "rb") as f:
        config = tomllib.load(f)
    setuptools = config["tool"]["setuptools"]
    assert setuptools.get("py-modules") == []
    assert "package-dir" not in setuptools
    assert "services/relay" in config["tool"]["pytest"]["ini_options"]["pythonpath"]
