"""
Guard composition: decisions are pure values, the first denial ends the chain.
"""
import json

import pytest
from starlette.requests import Request

from app.auth.guards import (
    MSG_ADMIN_ONLY,
    MSG_NO_TOKEN,
    MSG_NOT_FOUND,
    MSG_NOT_OWNER,
    AdminOnly,
    Denied,
    Granted,
    Guard,
    OwnerOrAdmin,
    path_owner,
    run_guards,
)
from app.auth.tokens import AuthFailure
from app.schemas.auth import AuthIdentity

ADMIN = AuthIdentity(id=1, email="admin@x.com", role="admin", fullname="Admin")
ALICE = AuthIdentity(id=2, email="alice@x.com", role="user", fullname="Alice")


def _request(path_params: dict | None = None) -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/things",
        "headers": [],
        "path_params": path_params or {},
    })


class Fixed(Guard):
    def __init__(self, decision):
        self.decision = decision
        self.calls = 0
        self.seen = []

    def check(self, request, identity, db):
        self.calls += 1
        self.seen.append(identity)
        return self.decision


def test_admin_only_grants_admin():
    assert AdminOnly().check(_request(), ADMIN, None) == Granted(ADMIN)


def test_admin_only_denies_user_with_403():
    decision = AdminOnly().check(_request(), ALICE, None)
    assert decision == Denied(403, MSG_ADMIN_ONLY)


def test_admin_only_without_identity_is_unauthenticated():
    decision = AdminOnly().check(_request(), None, None)
    assert decision.status_code == 401
    assert decision.reason is AuthFailure.MISSING_CREDENTIAL


@pytest.mark.parametrize("identity, owner_id, granted", [
    (ADMIN, 99, True),
    (ADMIN, 1, True),
    (ALICE, 2, True),
    (ALICE, 3, False),
])
def test_owner_or_admin(identity, owner_id, granted):
    guard = OwnerOrAdmin(lambda request, db: owner_id)
    decision = guard.check(_request(), identity, None)
    if granted:
        assert decision == Granted(identity)
    else:
        assert decision == Denied(403, MSG_NOT_OWNER)


def test_unknown_owner_is_not_found():
    guard = OwnerOrAdmin(lambda request, db: None)
    assert guard.check(_request(), ALICE, None) == Denied(404, MSG_NOT_FOUND)

    labelled = OwnerOrAdmin(lambda request, db: None, not_found="Skill not found")
    assert labelled.check(_request(), ALICE, None) == Denied(404, "Skill not found")


def test_owner_lookup_skipped_for_admin():
    def explode(request, db):
        raise AssertionError("owner lookup should not run for admins")
    assert OwnerOrAdmin(explode).check(_request(), ADMIN, None) == Granted(ADMIN)


def test_path_owner_reads_path_parameter():
    owner_of = path_owner("user_id")
    assert owner_of(_request({"user_id": "42"}), None) == 42
    assert owner_of(_request({"user_id": "abc"}), None) is None
    assert owner_of(_request(), None) is None


def test_run_guards_threads_identity():
    first = Fixed(Granted(ALICE))
    second = Fixed(Granted(ALICE))
    assert run_guards([first, second], _request(), None) == Granted(ALICE)
    assert first.seen == [None]
    assert second.seen == [ALICE]


def test_first_denial_is_terminal():
    denied = Denied(401, MSG_NO_TOKEN, AuthFailure.MISSING_CREDENTIAL)
    first = Fixed(denied)
    second = Fixed(Granted(ADMIN))
    assert run_guards([first, second], _request(), None) is denied
    assert second.calls == 0


def test_empty_chain_is_rejected():
    with pytest.raises(ValueError):
        run_guards([], _request(), None)


def test_denied_renders_error_body():
    response = Denied(401, MSG_NO_TOKEN).to_response()
    assert response.status_code == 401
    assert json.loads(response.body) == {"error": MSG_NO_TOKEN}
    assert response.headers["www-authenticate"] == "Bearer"

    forbidden = Denied(403, MSG_ADMIN_ONLY).to_exception()
    assert forbidden.status_code == 403
    assert forbidden.detail == MSG_ADMIN_ONLY
    assert forbidden.headers is None
