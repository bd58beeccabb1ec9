from pydantic import BaseModel, field_validator

class RegisterIn(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_trim(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("username is required")
        if len(v) > 64:
            raise ValueError("username too long")
        return v

    @field_validator("password")
    @classmethod
    def password_required(cls, v: str):
        if not v:
            raise ValueError("password is required")
        return v

class LoginIn(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_trim(cls, v: str):
        return v.strip()

class TokenOut(BaseModel):
    token: str

class OkOut(BaseModel):
    ok: bool = True
