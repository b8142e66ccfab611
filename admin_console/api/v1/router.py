# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API v1 router."""
from fastapi import APIRouter

from admin_console.api.v1 import notifications, screens, session

api_router = APIRouter()

api_router.include_router(session.router, prefix="/session", tags=["session"])
api_router.include_router(screens.router, prefix="/screens", tags=["screens"])
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["notifications"]
)
