#!/usr/bin/env python3
# SPDX-License-Identifier: MPL-2.0

import errno
import stat
import sys
from pathlib import Path

BINARY_NAME = "mdbook-plantuml-renderer"
# Where `cargo install` places the binary, relative to the user's home
INSTALL_SUBPATH = Path(".cargo") / "bin" / BINARY_NAME


def get_installed_binary_path(home=None):
    """Return the path the binary is installed to for the given home directory."""
    if home is None:
        home = Path.home()
    return Path(home) / INSTALL_SUBPATH


def remove_installed_binary(binary_path=None):
    """Remove the installed binary if present.

    Returns True if something was removed and False if there was nothing to
    do. A dangling symlink at the target is removed as well. Anything other
    than a regular file (e.g. a directory) raises OSError and is left alone.
    """
    if binary_path is None:
        binary_path = get_installed_binary_path()
    binary_path = Path(binary_path)

    try:
        mode = binary_path.lstat().st_mode
    except FileNotFoundError:
        return False

    if not stat.S_ISLNK(mode):
        if stat.S_ISDIR(mode):
            raise IsADirectoryError(errno.EISDIR, "Not a regular file", str(binary_path))
        if not stat.S_ISREG(mode):
            raise OSError(f"Not a regular file: {binary_path}")
    elif binary_path.exists() and not binary_path.is_file():
        raise OSError(f"Symlink does not point to a regular file: {binary_path}")

    print("Removing installed binary")
    try:
        binary_path.unlink()
    except FileNotFoundError:
        # Removed by someone else in the meantime
        return False
    return True


def main():
    """Remove the installed binary, exiting non-zero on any filesystem error."""
    try:
        remove_installed_binary()
    except OSError as error:
        print(f"Error during uninstall: {error}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
