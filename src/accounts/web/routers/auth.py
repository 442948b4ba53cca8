from fastapi import APIRouter
from pydantic import BaseModel, Field

from accounts.core.modules.user.models import LoggedInUserView
from accounts.web.deps import AppDep
from accounts.web.openapi import MessageResponse

router = APIRouter(tags=["auth"])


class RegisterRequest(BaseModel):
    """Registration request."""

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, must not belong to an existing account")
    password: str = Field(..., description="Plaintext password")


class LoginRequest(BaseModel):
    """Authentication request."""

    email: str = Field(..., description="Email address of the account")
    password: str = Field(..., description="Password for authentication")


class LoginResponse(BaseModel):
    """Authentication response."""

    message: str = Field("Login successful", description="Human-readable message")
    user: LoggedInUserView


@router.post(
    "/register",
    summary="Register account",
    description="Create a new account. No token is issued; log in afterwards.",
    operation_id="register",
    status_code=201,
    responses={
        201: {"description": "Account created"},
        400: {"model": MessageResponse, "description": "Email already registered"},
        500: {"model": MessageResponse, "description": "Internal server error"},
    },
)
async def register(register_data: RegisterRequest, app: AppDep) -> MessageResponse:
    await app.register(register_data.name, register_data.email, register_data.password)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    summary="Authenticate account",
    description="Authenticate with email and password to receive a bearer token valid for one hour.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": MessageResponse, "description": "Invalid credentials"},
        500: {"model": MessageResponse, "description": "Internal server error"},
    },
)
async def login(login_data: LoginRequest, app: AppDep) -> LoginResponse:
    user = await app.login(login_data.email, login_data.password)
    return LoginResponse(user=user)
