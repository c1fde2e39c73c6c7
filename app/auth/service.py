import logging
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from app.models.user import User
from app.schemas.user import UserCreate
from app.utils.security import hash_password, verify_password, needs_rehash

logger = logging.getLogger("portfolio.auth")

MSG_CREDENTIALS_REQUIRED = "Email và mật khẩu là bắt buộc"
MSG_BAD_CREDENTIALS = "Email hoặc mật khẩu không đúng"
MSG_EMAIL_TAKEN = "Email đã được sử dụng"

def register_user(db: Session, body: UserCreate) -> User:
    email = body.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail=MSG_EMAIL_TAKEN)
    data = body.model_dump(exclude={"password", "email"})
    user = User(email=email, password_hash=hash_password(body.password), **data)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s with role %s", user.id, user.role)
    return user

def authenticate_user(db: Session, email: str | None, password: str | None) -> User:
    if not email or not password:
        raise HTTPException(status_code=400, detail=MSG_CREDENTIALS_REQUIRED)

    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if not user or not verify_password(password, user.password_hash):
        logger.info("Rejected login for %s", email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=MSG_BAD_CREDENTIALS)

    if needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)
        db.commit()
    return user

def ensure_admin(db: Session, email: str, password: str, fullname: str) -> User:
    email = email.strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if user:
        if user.role != "admin":
            logger.warning("Seed admin %s exists with role %s; leaving it unchanged", email, user.role)
        return user
    user = User(fullname=fullname, email=email, password_hash=hash_password(password), role="admin")
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Seeded admin account %s", email)
    return user
