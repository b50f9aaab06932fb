"""
TokenService - issues and verifies the HS256 bearer tokens.

Claims:
- sub: user id (UUID string)
- username: the user's handle, used as the acting identity everywhere
- iat / exp / iss / aud
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from farmer_network.config.settings import Config


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    username: str


class TokenService:
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret: Optional[str] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
        ttl_minutes: Optional[int] = None,
    ):
        self._secret = secret if secret is not None else Config.SERVICE_AUTH_SECRET
        self._issuer = issuer or Config.SERVICE_AUTH_ISSUER
        self._audience = audience or Config.SERVICE_AUTH_AUDIENCE
        self._ttl = timedelta(minutes=ttl_minutes or Config.ACCESS_TOKEN_TTL_MINUTES)

    def issue(self, user_id: str, username: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "username": username,
            "iat": now,
            "exp": now + self._ttl,
            "iss": self._issuer,
            "aud": self._audience,
        }
        return jwt.encode(payload, self._secret, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        Raises:
            jwt.ExpiredSignatureError: token expired
            jwt.InvalidTokenError: bad signature, issuer, audience or missing claims
        """
        claims = jwt.decode(
            token,
            self._secret,
            algorithms=[self.ALGORITHM],
            audience=self._audience,
            issuer=self._issuer,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
        user_id = claims.get("sub")
        username = claims.get("username")
        if not user_id or not username:
            raise jwt.InvalidTokenError("Missing required claims in token")
        return TokenClaims(user_id=user_id, username=username)
