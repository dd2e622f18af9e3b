"""Request/response schemas for session endpoints."""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Email + password, used for login and sign-up."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class ConfirmSignUpRequest(BaseModel):
    email: str
    code: str = Field(min_length=1)


class ForgotPasswordRequest(BaseModel):
    email: str


class ConfirmPasswordRequest(BaseModel):
    email: str
    code: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


class MessageResponse(BaseModel):
    message: str
