"""
Signed bearer tokens (HS256 JWT) carrying the user's email claim.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from app.config.settings import settings
from app.core.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class TokenIssuer:
    def __init__(self, secret: str, lifetime: timedelta, algorithm: str = "HS256"):
        self.secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def issue(self, email: str) -> str:
        """Create a token for ``email`` that expires after the configured lifetime."""
        now = datetime.now(timezone.utc)
        payload = {
            "email": email,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Return the claims of a valid token; raise InvalidToken otherwise."""
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "email"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidToken()
        return claims


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer(settings.jwt_secret, settings.get_token_lifetime(), settings.jwt_algorithm)
