"""
User Services Package
"""

from .user_service import UserService

__all__ = ["UserService"]
