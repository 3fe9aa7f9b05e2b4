from fastapi import APIRouter, Depends
from pymongo.asynchronous.collection import AsyncCollection

from app.core.dependencies import get_current_user_email, get_users_collection
from app.modules.auth.schemas import (
    LoginRequest, RegisterRequest, LoginResponse, RegisterResponse,
    CurrentUserResponse
)
from app.modules.auth.service import AuthService, CredentialStore
from app.modules.auth.tokens import TokenIssuer, get_token_issuer

router = APIRouter(tags=["auth"])


def get_auth_service(
    users: AsyncCollection = Depends(get_users_collection),
    tokens: TokenIssuer = Depends(get_token_issuer)
) -> AuthService:
    return AuthService(CredentialStore(users), tokens)


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    return await service.register(register_data)


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return await service.login(login_data)


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(email: str = Depends(get_current_user_email)):
    """Return the identity carried by the bearer token"""
    return CurrentUserResponse(email=email)
