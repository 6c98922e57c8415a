# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT

__version__ = "1.0.0"
