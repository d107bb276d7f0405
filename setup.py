#!/usr/bin/env python3
# SPDX-License-Identifier: MPL-2.0

import re
from pathlib import Path
from setuptools import setup

# Get the package directory
PACKAGE_DIR = Path(__file__).parent


def read_version():
    """Read __version__ from the package without importing it."""
    init_file = PACKAGE_DIR / "mdbook_plantuml_pkg" / "__init__.py"
    match = re.search(
        r'^__version__ = "([^"]+)"',
        init_file.read_text(encoding="utf-8"),
        re.MULTILINE,
    )
    if not match:
        raise RuntimeError("Unable to find __version__ in mdbook_plantuml_pkg/__init__.py")
    return match.group(1)


if __name__ == "__main__":
    setup(
        name="mdbook-plantuml-renderer-uninstall",
        version=read_version(),
        description="Remove the mdbook-plantuml-renderer binary installed by cargo",
        license="MPL-2.0",
        python_requires=">=3.8",
        packages=["mdbook_plantuml_pkg"],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "mdbook-plantuml-renderer-uninstall=mdbook_plantuml_pkg.cli:main",
            ],
        },
    )
