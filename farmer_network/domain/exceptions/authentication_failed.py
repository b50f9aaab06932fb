"""
AuthenticationError - Raised when credentials don't match a known user.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    """Raised when a username/password pair is rejected."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)
