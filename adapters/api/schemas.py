"""
Request bodies accepted by the REST API.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    confirm_password: Optional[str] = None
    full_name: Optional[str] = None
    position: Optional[str] = None
    club: Optional[str] = None
    location: Optional[str] = None

    @model_validator(mode="after")
    def passwords_match(self):
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ConnectRequest(BaseModel):
    user_id: int


class CommentRequest(BaseModel):
    content: str = Field(min_length=1)


class ShareRequest(BaseModel):
    content: Optional[str] = None


class MessageRequest(BaseModel):
    receiver_id: int
    content: str = Field(min_length=1)
