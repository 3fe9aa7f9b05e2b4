"""
Core dependencies: collection handles and bearer token verification
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from app.config.settings import settings
from app.core.exceptions import InvalidToken
from app.database.mongo_client import get_database
from app.modules.auth.tokens import TokenIssuer, get_token_issuer

security = HTTPBearer(auto_error=False)


def get_users_collection(db: AsyncDatabase = Depends(get_database)) -> AsyncCollection:
    return db[settings.users_collection]


def get_relief_goods_collection(db: AsyncDatabase = Depends(get_database)) -> AsyncCollection:
    return db[settings.relief_goods_collection]


def get_recent_works_collection(db: AsyncDatabase = Depends(get_database)) -> AsyncCollection:
    return db[settings.recent_works_collection]


def get_current_user_email(
    credentials: HTTPAuthorizationCredentials = Security(security),
    tokens: TokenIssuer = Depends(get_token_issuer)
) -> str:
    """Extract the email claim from the Authorization bearer token"""
    if credentials is None:
        raise InvalidToken("Missing bearer token")
    claims = tokens.verify(credentials.credentials)
    return claims["email"]
