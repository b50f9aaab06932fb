"""
Authentication Dependency for FastAPI.

Guidelines:
- Extracts and validates JWT token from Authorization header
- Returns AuthUser for use in route handlers
- Raises HTTPException 401 if unauthorized

The authenticated username is the ONLY acting identity handed to the
conversation and message handlers; request bodies never carry it.

Config needed (from farmer_network.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
"""

import jwt
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from farmer_network.domain.value_objects.user_id import UserId
from farmer_network.infrastructure.security import TokenService


@dataclass
class AuthUser:
    user_id: UserId
    username: str

    def __post_init__(self):
        if not self.user_id or not self.username:
            raise ValueError("AuthUser must have both user_id and username defined.")


security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is missing, invalid, expired, or lacks claims
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        claims = TokenService().verify(credentials.credentials)
        return AuthUser(user_id=UserId(claims.user_id), username=claims.username)
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token claims",
        )
