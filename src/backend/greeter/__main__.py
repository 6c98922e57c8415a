# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT

"""CLI entry point for the greeter service."""

from greeter.cli import main

if __name__ == "__main__":
    main()
