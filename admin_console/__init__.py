# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Administrative console for companies, groups and user accounts."""

__version__ = "0.1.0"
