"""
Auth API endpoints.

Registration, login, password reset and email verification. None of
these require a bearer token.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_account_service

from .interfaces import IAccountService
from .models import (
    ConfirmPasswordResetRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    UserPublic,
)

router = APIRouter()


@router.post("/register", response_model=UserPublic, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAccountService = Depends(get_account_service),
) -> UserPublic:
    """
    Create an account.

    A verification link is emailed; login is refused until it is followed.
    """
    return await service.register(request)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials"}},
)
async def login(
    request: LoginRequest,
    service: IAccountService = Depends(get_account_service),
):
    """
    Exchange email and password for a bearer token.

    Every failure reason is reported to the client as the same 401.
    """
    result = await service.authenticate(request.email, request.password)
    if not result.token:
        return JSONResponse(status_code=401, content={"error": "Invalid credentials"})
    return LoginResponse(token=result.token, user=result.user)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    service: IAccountService = Depends(get_account_service),
) -> MessageResponse:
    """Email a password reset link."""
    await service.reset_password(request.email)
    return MessageResponse(message="Password reset email sent")


@router.post("/reset-password/confirm", response_model=MessageResponse)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    service: IAccountService = Depends(get_account_service),
):
    """Set a new password using the token from the reset email."""
    if not await service.complete_password_reset(request.token, request.password):
        return JSONResponse(status_code=400, content={"error": "Invalid or expired reset token"})
    return MessageResponse(message="Password has been reset")


@router.get("/verify-email/{token}", response_model=MessageResponse)
async def verify_email(
    token: str,
    service: IAccountService = Depends(get_account_service),
):
    """Follow the link from the verification email."""
    if not await service.verify_email(token):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid or expired verification token"},
        )
    return MessageResponse(message="Email verified successfully")
