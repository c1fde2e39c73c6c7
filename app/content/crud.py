"""Router factory shared by the portfolio content collections.

Every collection row belongs to one user (``user_id``). Reads are public,
creating needs a signed-in caller, and changing or deleting a row is limited
to its owner or an admin.
"""
import logging
from typing import Type

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.auth.deps import optional_identity, require_auth, require_owner_or_admin
from app.auth.guards import OwnerOf
from app.db.session import Base, get_db
from app.models.user import User
from app.schemas.auth import AuthIdentity

logger = logging.getLogger("portfolio.content")

LIST_CACHE_CONTROL = "s-maxage=60, stale-while-revalidate=300"


def record_owner(model: Type[Base], param: str = "item_id") -> OwnerOf:
    """Owner id read from the stored record named by a path parameter.

    ``None`` when the parameter is not an id or no such record exists.
    """
    def _owner(request: Request, db: Session) -> int | None:
        try:
            item_id = int(request.path_params[param])
        except (KeyError, ValueError):
            return None
        item = db.get(model, item_id)
        if item is None:
            return None
        return item.user_id
    return _owner


def resolve_owner_id(db: Session, caller: AuthIdentity, requested: int | None) -> int:
    if requested is None or requested == caller.id or not caller.is_admin:
        return caller.id
    if db.get(User, requested) is None:
        raise HTTPException(status_code=404, detail="Không tìm thấy người dùng")
    return requested


def build_router(
    *,
    prefix: str,
    tag: str,
    model: Type[Base],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    label: str,
    scope_list_to_caller: bool = False,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])
    not_found = f"{label} not found"
    owner_guard = require_owner_or_admin(record_owner(model), not_found)

    def _get_or_404(db: Session, item_id: int):
        item = db.get(model, item_id)
        if not item:
            raise HTTPException(status_code=404, detail=not_found)
        return item

    @router.get("", response_model=list[out_schema])
    def list_items(
        response: Response,
        db: Session = Depends(get_db),
        caller: AuthIdentity | None = Depends(optional_identity),
    ):
        query = db.query(model)
        if scope_list_to_caller and caller and not caller.is_admin:
            query = query.filter(model.user_id == caller.id)
        response.headers["Cache-Control"] = LIST_CACHE_CONTROL
        return query.order_by(model.created_at.desc(), model.id.desc()).all()

    @router.post("", response_model=out_schema, status_code=status.HTTP_201_CREATED)
    def create_item(
        body: create_schema,
        db: Session = Depends(get_db),
        caller: AuthIdentity = Depends(require_auth),
    ):
        data = body.model_dump(exclude={"user_id"})
        item = model(user_id=resolve_owner_id(db, caller, body.user_id), **data)
        db.add(item)
        db.commit()
        db.refresh(item)
        logger.info("%s %s created by user %s", label, item.id, caller.id)
        return item

    @router.get("/{item_id}", response_model=out_schema)
    def get_item(item_id: int, db: Session = Depends(get_db)):
        return _get_or_404(db, item_id)

    @router.put("/{item_id}", response_model=out_schema)
    def update_item(
        item_id: int,
        body: update_schema,
        db: Session = Depends(get_db),
        caller: AuthIdentity = Depends(owner_guard),
    ):
        item = _get_or_404(db, item_id)
        for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(item, field, value)
        db.commit()
        db.refresh(item)
        return item

    @router.delete("/{item_id}")
    def delete_item(item_id: int, db: Session = Depends(get_db), caller: AuthIdentity = Depends(owner_guard)):
        item = _get_or_404(db, item_id)
        db.delete(item)
        db.commit()
        logger.info("%s %s deleted by user %s", label, item_id, caller.id)
        return {"message": f"{label} deleted successfully"}

    return router
