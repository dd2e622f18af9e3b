"""API handlers for session (authentication) endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from src.inventoflow.auth.exceptions import MissingAttributeError, ProviderAuthError
from src.inventoflow.auth.manager import AuthSessionManager
from src.inventoflow.auth.models import AuthSnapshot, SignUpResult
from src.inventoflow.dependencies import get_session_manager
from src.inventoflow.features.session.schemas import (
    ConfirmPasswordRequest,
    ConfirmSignUpRequest,
    CredentialsRequest,
    ForgotPasswordRequest,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=AuthSnapshot)
async def get_session(
    manager: AuthSessionManager = Depends(get_session_manager),
) -> AuthSnapshot:
    """Current authentication state: is_authenticated, is_loading and the user profile."""
    return manager.snapshot


@router.post("/login", response_model=AuthSnapshot)
async def login(
    body: CredentialsRequest,
    manager: AuthSessionManager = Depends(get_session_manager),
) -> AuthSnapshot:
    """
    Sign in with email and password.

    Raises:
        HTTPException: 401 if the provider rejects the credentials
        HTTPException: 502 if the provider returned an incomplete profile
    """
    try:
        await manager.login(body.email, body.password)
    except ProviderAuthError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except MissingAttributeError as e:
        logger.error(f"Login for {body.email} returned incomplete profile: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    return manager.snapshot


@router.post("/signup", response_model=SignUpResult, status_code=status.HTTP_201_CREATED)
async def signup(
    body: CredentialsRequest,
    manager: AuthSessionManager = Depends(get_session_manager),
) -> SignUpResult:
    """Register a new account. 400 if the provider rejects it (duplicate, weak password)."""
    try:
        return await manager.signup(body.email, body.password)
    except ProviderAuthError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/confirm", response_model=MessageResponse)
async def confirm_sign_up(
    body: ConfirmSignUpRequest,
    manager: AuthSessionManager = Depends(get_session_manager),
) -> MessageResponse:
    try:
        await manager.confirm_sign_up(body.email, body.code)
    except ProviderAuthError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="Account confirmed")


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    body: ForgotPasswordRequest,
    manager: AuthSessionManager = Depends(get_session_manager),
) -> MessageResponse:
    try:
        await manager.forgot_password(body.email)
    except ProviderAuthError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="Password reset code sent")


@router.post("/confirm-password", response_model=MessageResponse)
async def confirm_password(
    body: ConfirmPasswordRequest,
    manager: AuthSessionManager = Depends(get_session_manager),
) -> MessageResponse:
    try:
        await manager.confirm_password(body.email, body.code, body.new_password)
    except ProviderAuthError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="Password updated")


@router.delete("", response_model=AuthSnapshot)
async def logout(
    manager: AuthSessionManager = Depends(get_session_manager),
) -> AuthSnapshot:
    """Sign out. Always succeeds."""
    manager.logout()
    return manager.snapshot
