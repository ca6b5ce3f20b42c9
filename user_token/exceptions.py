"""Local exceptions related to user tokens."""
from __future__ import annotations


class UserTokenError(Exception):
    """Base class for user_token errors."""

    pass


class ReplicationTimeoutError(UserTokenError):
    """Error raised when a replica fails to catch up within the timeout."""

    pass
