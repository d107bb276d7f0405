#!/usr/bin/env python3
# SPDX-License-Identifier: MPL-2.0

"""Command-line interface for the mdbook-plantuml-renderer uninstaller."""

import sys

from mdbook_plantuml_pkg import uninstall as uninstall_module

USAGE = "usage: mdbook-plantuml-renderer-uninstall"


def main(argv=None):
    """Main entry point for the mdbook-plantuml-renderer-uninstall command."""
    if argv is None:
        argv = sys.argv[1:]

    # The target location is fixed, so there is nothing to configure
    if argv:
        print(USAGE, file=sys.stderr)
        print(f"Unexpected arguments: {' '.join(argv)}", file=sys.stderr)
        sys.exit(2)

    uninstall_module.main()


if __name__ == "__main__":
    main()
