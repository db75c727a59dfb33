# eventgraph/schemas/user.py
from pydantic import BaseModel, field_validator, model_validator

from eventgraph.core.security import BCRYPT_MAX_PASSWORD_BYTES


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserCreate(BaseModel):
    name: str
    email: str
    password: str
    confirm_password: str

    @field_validator("name", "email", "password", "confirm_password")
    @classmethod
    def required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("All fields are required")
        return value

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )
        return value

    @model_validator(mode="after")
    def passwords_match(self) -> "UserCreate":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email", "password")
    @classmethod
    def required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Email and password are required")
        return value

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)
