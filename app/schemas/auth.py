from typing import Literal
from pydantic import BaseModel

Role = Literal["admin", "user"]

class LoginIn(BaseModel):
    email: str | None = None
    password: str | None = None

class AuthIdentity(BaseModel):
    """Who a request acts as: the claims carried by a token."""
    id: int
    email: str
    role: Role
    fullname: str

    class Config:
        frozen = True

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

class LoginOut(BaseModel):
    message: str
    user: AuthIdentity
    token: str

class MeOut(BaseModel):
    user: AuthIdentity
