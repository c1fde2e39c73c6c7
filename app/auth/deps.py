from fastapi import Request, Depends
from sqlalchemy.orm import Session

from app.auth.guards import (
    ADMIN_ONLY,
    AUTHENTICATED,
    MSG_NOT_FOUND,
    Authenticated,
    Denied,
    Granted,
    Guard,
    OwnerOf,
    owner_or_admin,
    run_guards,
)
from app.auth.tokens import TokenCodec
from app.config import Settings
from app.db.session import get_db
from app.schemas.auth import AuthIdentity


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.tokens


def guarded(*guards: Guard):
    """Build a dependency that runs ``guards`` in order and yields the identity."""
    if not guards:
        raise ValueError("at least one guard is required")

    def dependency(request: Request, db: Session = Depends(get_db)) -> AuthIdentity:
        decision = run_guards(guards, request, db)
        if isinstance(decision, Denied):
            raise decision.to_exception()
        return decision.identity

    return dependency


require_auth = guarded(*AUTHENTICATED)
require_admin = guarded(*ADMIN_ONLY)

def require_owner_or_admin(owner_of: OwnerOf, not_found: str = MSG_NOT_FOUND):
    return guarded(*owner_or_admin(owner_of, not_found))


def optional_identity(request: Request, db: Session = Depends(get_db)) -> AuthIdentity | None:
    decision = Authenticated().check(request, None, db)
    if isinstance(decision, Granted):
        return decision.identity
    return None
