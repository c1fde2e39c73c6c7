from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.auth.deps import optional_identity, require_admin, require_owner_or_admin
from app.auth.guards import MSG_ADMIN_ONLY, path_owner
from app.auth.service import MSG_EMAIL_TAKEN, register_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import AuthIdentity
from app.schemas.user import UserCreate, UserUpdate, UserOut
from app.utils.security import hash_password

router = APIRouter(prefix="/api/user", tags=["users"])

LIST_CACHE_CONTROL = "s-maxage=60, stale-while-revalidate=300"
MSG_NOT_FOUND = "Không tìm thấy người dùng"

owner_guard = require_owner_or_admin(path_owner("user_id"), MSG_NOT_FOUND)

def _newest_first(query):
    return query.order_by(User.created_at.desc(), User.id.desc())

def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail=MSG_NOT_FOUND)
    return user

@router.get("", response_model=list[UserOut])
def list_users(
    response: Response,
    db: Session = Depends(get_db),
    caller: AuthIdentity | None = Depends(optional_identity),
):
    if caller and caller.is_admin:
        users = _newest_first(db.query(User)).all()
    elif caller:
        users = db.query(User).filter(User.id == caller.id).all()
    else:
        # anonymous visitors see the portfolio owner's public profile
        users = _newest_first(db.query(User)).limit(1).all()
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return users

@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    db: Session = Depends(get_db),
    caller: AuthIdentity | None = Depends(optional_identity),
):
    if body.role != "user" and not (caller and caller.is_admin):
        raise HTTPException(status_code=403, detail=MSG_ADMIN_ONLY)
    return register_user(db, body)

@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db), caller: AuthIdentity = Depends(owner_guard)):
    return _get_user_or_404(db, user_id)

@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: int,
    body: UserUpdate,
    db: Session = Depends(get_db),
    caller: AuthIdentity = Depends(owner_guard),
):
    if body.role is not None and not caller.is_admin:
        raise HTTPException(status_code=403, detail="Chỉ admin mới có thể thay đổi role")

    user = _get_user_or_404(db, user_id)
    changes = body.model_dump(exclude_unset=True, exclude_none=True)

    password = changes.pop("password", None)
    if password:
        user.password_hash = hash_password(password)

    email = changes.pop("email", None)
    if email:
        email = email.lower()
        taken = db.query(User).filter(User.email == email, User.id != user.id).first()
        if taken:
            raise HTTPException(status_code=400, detail=MSG_EMAIL_TAKEN)
        user.email = email

    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user

@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db), caller: AuthIdentity = Depends(require_admin)):
    if user_id == caller.id:
        raise HTTPException(status_code=400, detail="Không thể xóa tài khoản của chính mình")
    user = _get_user_or_404(db, user_id)
    payload = UserOut.model_validate(user)
    db.delete(user)
    db.commit()
    return {"message": "Xóa người dùng thành công", "user": payload}
