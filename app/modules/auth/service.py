import logging
from typing import Any, Dict, Optional

from fastapi.concurrency import run_in_threadpool
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import DuplicateUser, InvalidCredentials
from app.modules.auth.password import hash_password, verify_password
from app.modules.auth.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from app.modules.auth.tokens import TokenIssuer

logger = logging.getLogger(__name__)


class CredentialStore:
    """User documents, looked up by exact email."""

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"email": email})

    async def insert(self, name: Optional[str], email: str, password_hash: str) -> Any:
        result = await self.collection.insert_one({
            "name": name,
            "email": email,
            "password": password_hash,
        })
        return result.inserted_id


class AuthService:
    def __init__(self, credentials: CredentialStore, tokens: TokenIssuer):
        self.credentials = credentials
        self.tokens = tokens

    async def register(self, register_data: RegisterRequest) -> RegisterResponse:
        """Register a new user; the email must not be taken"""
        existing_user = await self.credentials.find_by_email(register_data.email)
        if existing_user:
            logger.info("Registration rejected, email already registered: %s", register_data.email)
            raise DuplicateUser()

        password_hash = await run_in_threadpool(hash_password, register_data.password)

        try:
            await self.credentials.insert(register_data.name, register_data.email, password_hash)
        except DuplicateKeyError:
            # Lost a race with a concurrent registration; the unique index decides
            logger.info("Registration rejected by unique index: %s", register_data.email)
            raise DuplicateUser()

        logger.info("Registered user %s", register_data.email)
        return RegisterResponse(message="User registered successfully")

    async def login(self, login_data: LoginRequest) -> LoginResponse:
        """Verify credentials and issue a bearer token"""
        user = await self.credentials.find_by_email(login_data.email)
        if not user:
            logger.info("Login failed for %s", login_data.email)
            raise InvalidCredentials()

        is_password_valid = await run_in_threadpool(
            verify_password, login_data.password, user.get("password")
        )
        if not is_password_valid:
            logger.info("Login failed for %s", login_data.email)
            raise InvalidCredentials()

        token = self.tokens.issue(user["email"])
        logger.info("Login: %s", user["email"])
        return LoginResponse(message="Login successful", token=token)
