# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
