"""Database models."""
from fanclub.models.user import LoginStatus, User
from fanclub.models.reminder import Reminder

__all__ = ["LoginStatus", "User", "Reminder"]
