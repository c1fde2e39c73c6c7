from app.auth.resolver import resolve_identity
from app.auth.tokens import AuthFailure, Err, Ok


def test_resolves_existing_subject(app, db, make_user, token_for):
    user = make_user()
    result = resolve_identity(db, app.state.tokens, token_for(user))
    assert isinstance(result, Ok)
    assert result.identity.id == user.id
    assert result.identity.email == "a@x.com"


def test_deleted_subject_with_live_token_is_unauthenticated(app, db, make_user, token_for):
    user = make_user()
    token = token_for(user)
    db.delete(user)
    db.commit()

    assert app.state.tokens.verify(token).ok
    assert resolve_identity(db, app.state.tokens, token) == Err(AuthFailure.SUBJECT_NOT_FOUND)


def test_identity_reflects_current_record(app, db, make_user, token_for):
    user = make_user(role="user")
    token = token_for(user)
    user.role = "admin"
    user.fullname = "Renamed"
    db.commit()

    result = resolve_identity(db, app.state.tokens, token)
    assert result.identity.role == "admin"
    assert result.identity.fullname == "Renamed"


def test_invalid_token_short_circuits_lookup(app, db):
    assert resolve_identity(db, app.state.tokens, "garbage") == Err(AuthFailure.MALFORMED)
