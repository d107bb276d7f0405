# SPDX-License-Identifier: MPL-2.0

import pytest

from mdbook_plantuml_pkg import uninstall


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point the user's home directory at an empty temporary directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def binary_path(home):
    path = uninstall.get_installed_binary_path(home)
    path.parent.mkdir(parents=True)
    return path


@pytest.fixture
def installed_binary(binary_path):
    binary_path.write_bytes(b"\x7fELF fake binary")
    binary_path.chmod(0o755)
    return binary_path
