"""Services package."""
from admin_console.services import session_service

__all__ = ["session_service"]
