"""Credential handling: password hashes and bearer tokens."""

from farmer_network.infrastructure.security.password_hasher import PasswordHasher
from farmer_network.infrastructure.security.token_service import TokenService

__all__ = ["PasswordHasher", "TokenService"]
