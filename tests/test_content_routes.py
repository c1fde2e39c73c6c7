import pytest

from conftest import bearer
from app.auth.guards import MSG_NO_TOKEN, MSG_NOT_OWNER

pytestmark = pytest.mark.anyio

PROJECT = {
    "title": "Portfolio site",
    "description": "Personal showcase",
    "role": "Fullstack",
    "team_size": 2,
    "technologies": [{"category": "Backend", "items": ["FastAPI", "SQLAlchemy"]}],
    "main_features": ["Admin dashboard"],
    "status": "completed",
}


@pytest.fixture
def alice(make_user):
    return make_user(email="alice@x.com", fullname="Alice")


@pytest.fixture
def bob(make_user):
    return make_user(email="bob@x.com", fullname="Bob")


@pytest.fixture
def admin(make_user):
    return make_user(email="admin@x.com", role="admin", fullname="Admin")


async def test_create_requires_authentication(client):
    r = await client.post("/api/projects", json=PROJECT)
    assert r.status_code == 401
    assert r.json() == {"error": MSG_NO_TOKEN}


async def test_create_assigns_caller_and_populates_owner(client, alice, token_for):
    r = await client.post("/api/projects", json=PROJECT, headers=bearer(token_for(alice)))
    assert r.status_code == 201
    body = r.json()
    assert body["user_id"] == alice.id
    assert body["owner"] == {"id": alice.id, "fullname": "Alice", "email": "alice@x.com"}
    assert body["technologies"] == [{"category": "Backend", "items": ["FastAPI", "SQLAlchemy"]}]


async def test_non_admin_cannot_create_for_someone_else(client, alice, bob, token_for):
    r = await client.post("/api/skills", json={"category": "Languages", "user_id": bob.id}, headers=bearer(token_for(alice)))
    assert r.status_code == 201
    assert r.json()["user_id"] == alice.id


async def test_admin_creates_on_behalf_of_user(client, admin, alice, token_for):
    r = await client.post(
        "/api/educations",
        json={"school": "HUST", "degree": "BSc", "user_id": alice.id},
        headers=bearer(token_for(admin)),
    )
    assert r.status_code == 201
    assert r.json()["owner"]["email"] == "alice@x.com"

    r = await client.post(
        "/api/educations",
        json={"school": "HUST", "user_id": 9999},
        headers=bearer(token_for(admin)),
    )
    assert r.status_code == 404


async def test_reads_are_public(client, alice, token_for):
    created = await client.post(
        "/api/about",
        json={"title": "Hi", "description": "About me", "career_goals": ["Lead"]},
        headers=bearer(token_for(alice)),
    )
    item_id = created.json()["id"]

    listing = await client.get("/api/about")
    assert listing.status_code == 200
    assert [a["id"] for a in listing.json()] == [item_id]

    single = await client.get(f"/api/about/{item_id}")
    assert single.status_code == 200
    assert single.json()["career_goals"] == ["Lead"]


async def test_missing_item_is_404(client):
    r = await client.get("/api/contact/12345")
    assert r.status_code == 404
    assert r.json() == {"error": "Contact not found"}


async def test_projects_list_is_scoped_for_signed_in_users(client, alice, bob, admin, token_for):
    await client.post("/api/projects", json=PROJECT, headers=bearer(token_for(alice)))
    await client.post("/api/projects", json={**PROJECT, "title": "Bob's"}, headers=bearer(token_for(bob)))

    public = await client.get("/api/projects")
    assert len(public.json()) == 2
    assert public.headers["cache-control"] == "s-maxage=60, stale-while-revalidate=300"

    own = await client.get("/api/projects", headers=bearer(token_for(bob)))
    assert [p["title"] for p in own.json()] == ["Bob's"]

    everything = await client.get("/api/projects", headers=bearer(token_for(admin)))
    assert len(everything.json()) == 2


async def test_update_is_owner_or_admin(client, alice, bob, admin, token_for):
    created = await client.post("/api/projects", json=PROJECT, headers=bearer(token_for(alice)))
    item_id = created.json()["id"]

    r = await client.put(f"/api/projects/{item_id}", json={"status": "archived"})
    assert r.status_code == 401

    r = await client.put(f"/api/projects/{item_id}", json={"status": "archived"}, headers=bearer(token_for(bob)))
    assert r.status_code == 403
    assert r.json() == {"error": MSG_NOT_OWNER}

    r = await client.put(f"/api/projects/{item_id}", json={"status": "archived"}, headers=bearer(token_for(alice)))
    assert r.status_code == 200
    assert r.json()["status"] == "archived"
    assert r.json()["title"] == PROJECT["title"]

    r = await client.put(
        f"/api/projects/{item_id}",
        json={"main_features": ["Search", "Dark mode"]},
        headers=bearer(token_for(admin)),
    )
    assert r.status_code == 200
    assert r.json()["main_features"] == ["Search", "Dark mode"]


async def test_update_of_missing_item_is_404_for_users(client, alice, token_for):
    r = await client.put("/api/skills/777", json={"category": "X"}, headers=bearer(token_for(alice)))
    assert r.status_code == 404
    assert r.json() == {"error": "Skill not found"}


async def test_non_numeric_item_id_is_404_for_users(client, alice, token_for):
    r = await client.delete("/api/projects/abc", headers=bearer(token_for(alice)))
    assert r.status_code == 404
    assert r.json() == {"error": "Project not found"}


async def test_delete_is_owner_or_admin(client, alice, bob, admin, token_for):
    contact = {
        "email": "alice@x.com",
        "phone": "0900",
        "address": "Hà Nội",
        "social_links": [{"platform": "GitHub", "url": "https://github.com/alice", "icon": "github"}],
        "availability": "Weekdays",
        "preferred_contact": "email",
    }
    first = (await client.post("/api/contact", json=contact, headers=bearer(token_for(alice)))).json()["id"]
    second = (await client.post("/api/contact", json=contact, headers=bearer(token_for(alice)))).json()["id"]

    r = await client.delete(f"/api/contact/{first}", headers=bearer(token_for(bob)))
    assert r.status_code == 403

    r = await client.delete(f"/api/contact/{first}", headers=bearer(token_for(alice)))
    assert r.status_code == 200
    assert r.json() == {"message": "Contact deleted successfully"}

    r = await client.delete(f"/api/contact/{second}", headers=bearer(token_for(admin)))
    assert r.status_code == 200

    assert (await client.get("/api/contact")).json() == []


async def test_skill_levels_are_bounded(client, alice, token_for):
    r = await client.post(
        "/api/skills",
        json={"category": "Languages", "skills": [{"name": "Python", "level": 150}]},
        headers=bearer(token_for(alice)),
    )
    assert r.status_code == 422
