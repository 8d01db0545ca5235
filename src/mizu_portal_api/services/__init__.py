"""Domain endpoint wrappers built on ApiClient."""

from . import auth, groups, notifications, transactions, users

__all__ = ["auth", "groups", "notifications", "transactions", "users"]
