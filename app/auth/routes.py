from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.auth.deps import get_settings, get_token_codec, require_auth
from app.auth.resolver import identity_of
from app.auth.service import authenticate_user
from app.auth.tokens import TokenCodec
from app.config import Settings
from app.db.session import get_db
from app.schemas.auth import AuthIdentity, LoginIn, LoginOut, MeOut

router = APIRouter(prefix="/api/auth", tags=["auth"])

def set_auth_cookie(response: Response, settings: Settings, token: str, max_age: int):
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,
        samesite="strict",
        secure=settings.cookie_secure,
        path="/",
        max_age=max_age,
    )

@router.post("/login", response_model=LoginOut)
def login(
    body: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    codec: TokenCodec = Depends(get_token_codec),
):
    user = authenticate_user(db, body.email, body.password)
    identity = identity_of(user)
    token = codec.issue(identity)
    set_auth_cookie(response, settings, token, settings.cookie_max_age)
    return LoginOut(message="Đăng nhập thành công", user=identity, token=token)

@router.post("/logout")
def logout(response: Response, settings: Settings = Depends(get_settings)):
    set_auth_cookie(response, settings, "", 0)
    return {"message": "Đăng xuất thành công"}

@router.get("/me", response_model=MeOut)
def me(user: AuthIdentity = Depends(require_auth)):
    return MeOut(user=user)
