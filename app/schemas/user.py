from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from app.schemas.auth import Role

class UserCreate(BaseModel):
    fullname: str = Field(min_length=1, max_length=120)
    birthday: str = ""
    email: EmailStr
    phone: str = ""
    password: str = Field(min_length=6, max_length=256)
    address: str = ""
    specialization: str = ""
    avatar_url: str = ""
    role: Role = "user"

class UserUpdate(BaseModel):
    fullname: str | None = Field(default=None, min_length=1, max_length=120)
    birthday: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    password: str | None = Field(default=None, min_length=6, max_length=256)
    address: str | None = None
    specialization: str | None = None
    avatar_url: str | None = None
    role: Role | None = None

class UserOut(BaseModel):
    id: int
    fullname: str
    birthday: str | None = ""
    email: str
    phone: str | None = ""
    address: str | None = ""
    specialization: str | None = ""
    avatar_url: str | None = ""
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True

class OwnerOut(BaseModel):
    id: int
    fullname: str
    email: str

    class Config:
        from_attributes = True
