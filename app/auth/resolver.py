import logging
from sqlalchemy.orm import Session
from app.auth.tokens import TokenCodec, TokenResult, Ok, Err, AuthFailure
from app.models.user import User
from app.schemas.auth import AuthIdentity

logger = logging.getLogger("portfolio.auth.resolver")


def resolve_identity(db: Session, codec: TokenCodec, token: str) -> TokenResult:
    """Map a raw token to the identity of a subject that still exists.

    A valid signature is not enough: the subject is looked up again so a
    token outliving its account grants nothing. The returned identity is
    built from the current record. Store errors propagate to the caller.
    """
    verified = codec.verify(token)
    if not verified.ok:
        return verified

    user = db.get(User, verified.identity.id)
    if user is None:
        logger.info("Token subject %s no longer exists", verified.identity.id)
        return Err(AuthFailure.SUBJECT_NOT_FOUND)

    return Ok(identity_of(user))


def identity_of(user: User) -> AuthIdentity:
    return AuthIdentity(id=user.id, email=user.email, role=user.role, fullname=user.fullname)
