"""Signed identity assertions.

A token is an HS256 JWT carrying ``sub``/``email``/``role``/``fullname`` plus
``iat``/``exp``. Verification never raises: it returns ``Ok(identity)`` or
``Err(reason)`` so callers may tell failures apart, even though the HTTP layer
currently collapses them into one generic 401.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from jose import jwt, JWTError, ExpiredSignatureError
from jose.exceptions import JWTClaimsError

from app.schemas.auth import AuthIdentity

logger = logging.getLogger("portfolio.auth.tokens")


class AuthFailure(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"
    SUBJECT_NOT_FOUND = "subject_not_found"


@dataclass(frozen=True)
class Ok:
    identity: AuthIdentity

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    reason: AuthFailure

    @property
    def ok(self) -> bool:
        return False


TokenResult = Ok | Err


class TokenCodec:
    def __init__(self, secret_key: str, expire_minutes: int, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes
        self.algorithm = algorithm

    def issue(self, identity: AuthIdentity, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(identity.id),
            "email": identity.email,
            "role": identity.role,
            "fullname": identity.fullname,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenResult:
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return Err(AuthFailure.EXPIRED)
        except JWTClaimsError:
            # signature checked out, a registered claim did not
            return Err(AuthFailure.MALFORMED)
        except JWTError:
            return Err(self._classify_rejected(token))

        try:
            identity = AuthIdentity(
                id=int(claims["sub"]),
                email=claims["email"],
                role=claims["role"],
                fullname=claims["fullname"],
            )
        except (KeyError, TypeError, ValueError):
            logger.info("Token accepted by signature but carries unusable claims")
            return Err(AuthFailure.MALFORMED)
        return Ok(identity)

    @staticmethod
    def _classify_rejected(token: str) -> AuthFailure:
        try:
            jwt.get_unverified_claims(token)
        except JWTError:
            return AuthFailure.MALFORMED
        return AuthFailure.INVALID_SIGNATURE
