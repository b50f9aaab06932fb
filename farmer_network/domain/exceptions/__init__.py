"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from farmer_network.domain.exceptions.entity_not_found import EntityNotFoundError
from farmer_network.domain.exceptions.access_denied import AccessDeniedError
from farmer_network.domain.exceptions.validation_error import DomainValidationError
from farmer_network.domain.exceptions.authentication_failed import AuthenticationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "AuthenticationError",
]
