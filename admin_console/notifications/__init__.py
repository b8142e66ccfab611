# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Ephemeral notifications."""
from admin_console.notifications.center import Notification, NotificationCenter
from admin_console.notifications.scheduling import AsyncioScheduler, Scheduler

__all__ = ["AsyncioScheduler", "Notification", "NotificationCenter", "Scheduler"]
