"""Access guards.

A guard looks at a request (and the identity resolved so far) and returns
either ``Granted(identity)`` or a terminal ``Denied``. Guards are chained in
order by :func:`run_guards`; the first denial wins and nothing after it runs.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.auth.credentials import extract_token
from app.auth.resolver import resolve_identity
from app.auth.tokens import AuthFailure
from app.schemas.auth import AuthIdentity

logger = logging.getLogger("portfolio.auth.guards")

MSG_NO_TOKEN = "Không có token xác thực"
MSG_INVALID_TOKEN = "Token không hợp lệ hoặc đã hết hạn"
MSG_ADMIN_ONLY = "Chỉ admin mới có quyền truy cập"
MSG_NOT_OWNER = "Bạn chỉ có thể truy cập tài nguyên của chính mình"
MSG_NOT_FOUND = "Không tìm thấy tài nguyên"


@dataclass(frozen=True)
class Granted:
    identity: AuthIdentity


@dataclass(frozen=True)
class Denied:
    status_code: int
    message: str
    reason: AuthFailure | None = None

    @property
    def headers(self) -> dict[str, str] | None:
        if self.status_code == status.HTTP_401_UNAUTHORIZED:
            return {"WWW-Authenticate": "Bearer"}
        return None

    def to_response(self) -> JSONResponse:
        return JSONResponse({"error": self.message}, status_code=self.status_code, headers=self.headers)

    def to_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.message, headers=self.headers)


Decision = Granted | Denied

UNAUTHENTICATED = Denied(status.HTTP_401_UNAUTHORIZED, MSG_NO_TOKEN, AuthFailure.MISSING_CREDENTIAL)


class Guard:
    def check(self, request: Request, identity: AuthIdentity | None, db: Session) -> Decision:
        raise NotImplementedError


class Authenticated(Guard):
    """Resolve the caller from the request credential."""

    def check(self, request, identity, db):
        state = request.app.state
        token = extract_token(request, state.settings.auth_cookie_name)
        if token is None:
            return UNAUTHENTICATED

        result = resolve_identity(db, state.tokens, token)
        if not result.ok:
            return Denied(status.HTTP_401_UNAUTHORIZED, MSG_INVALID_TOKEN, result.reason)
        return Granted(result.identity)


class AdminOnly(Guard):
    def check(self, request, identity, db):
        if identity is None:
            return UNAUTHENTICATED
        if not identity.is_admin:
            return Denied(status.HTTP_403_FORBIDDEN, MSG_ADMIN_ONLY)
        return Granted(identity)


OwnerOf = Callable[[Request, Session], int | None]


class OwnerOrAdmin(Guard):
    """Admit admins, or the subject owning the resource.

    ``owner_of`` supplies the owner id, e.g. from a path parameter or from the
    stored record. It is only consulted for non-admin callers; ``None`` means
    the resource cannot be found and is answered with 404.
    """

    def __init__(self, owner_of: OwnerOf, not_found: str = MSG_NOT_FOUND):
        self.owner_of = owner_of
        self.not_found = not_found

    def check(self, request, identity, db):
        if identity is None:
            return UNAUTHENTICATED
        if identity.is_admin:
            return Granted(identity)
        owner_id = self.owner_of(request, db)
        if owner_id is None:
            return Denied(status.HTTP_404_NOT_FOUND, self.not_found)
        if identity.id != owner_id:
            return Denied(status.HTTP_403_FORBIDDEN, MSG_NOT_OWNER)
        return Granted(identity)


def path_owner(param: str = "id") -> OwnerOf:
    """Owner id taken straight from a path parameter."""
    def _owner(request: Request, db: Session) -> int | None:
        try:
            return int(request.path_params[param])
        except (KeyError, ValueError):
            return None
    return _owner


AUTHENTICATED: tuple[Guard, ...] = (Authenticated(),)
ADMIN_ONLY: tuple[Guard, ...] = (Authenticated(), AdminOnly())


def owner_or_admin(owner_of: OwnerOf, not_found: str = MSG_NOT_FOUND) -> tuple[Guard, ...]:
    return (Authenticated(), OwnerOrAdmin(owner_of, not_found))


def run_guards(guards: Sequence[Guard], request: Request, db: Session) -> Decision:
    if not guards:
        raise ValueError("at least one guard is required")

    identity = None
    decision: Decision = UNAUTHENTICATED
    for guard in guards:
        decision = guard.check(request, identity, db)
        if isinstance(decision, Denied):
            logger.info(
                "Denied %s %s: %s (%s)",
                request.method,
                request.url.path,
                decision.status_code,
                decision.reason.value if decision.reason else type(guard).__name__,
            )
            return decision
        identity = decision.identity
    return decision
