# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
from pydantic import Field, field_validator

from debsoc.schemas import RequestModel


class LoginRequest(RequestModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("email must be a valid address")
        return v


class RegisterRequest(LoginRequest):
    name: str = Field(..., min_length=1, max_length=120)
    password: str = Field(..., min_length=6, max_length=255)


class CabinetRegisterRequest(RegisterRequest):
    position: str = Field(..., min_length=1, max_length=120)
