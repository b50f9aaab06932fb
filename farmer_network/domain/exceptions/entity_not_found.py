"""
EntityNotFoundError - Raised when a referenced user, conversation, post,
comment or resource does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a referenced entity is missing from the store."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
