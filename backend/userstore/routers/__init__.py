"""
API Routers module.
"""
from userstore.routers import users

__all__ = ["users"]
