"""Tests for registration, login, refresh and the profile endpoints."""

from __future__ import annotations

from app.domain.entities import ProfileType

API = "/api/v1"
REGISTRATION = {
    "name": "Grace Hopper",
    "email": "Grace@Example.com",
    "password": "Secret123!",
    "profile_type": "MENTOR",
    "company": "Navy",
}


def test_register_then_login_and_read_profile(client) -> None:
    registered = client.post(f"{API}/auth/register", json=REGISTRATION)
    assert registered.status_code == 201
    session = registered.json()["data"]
    assert session["user"]["email"] == "grace@example.com"
    assert session["user"]["profile_type"] == "MENTOR"
    assert session["token_type"] == "bearer"

    login = client.post(
        f"{API}/auth/login",
        json={"email": "grace@example.com", "password": REGISTRATION["password"]},
    )
    assert login.status_code == 200
    access_token = login.json()["data"]["access_token"]

    me = client.get(f"{API}/users/me", headers={"Authorization": f"Bearer {access_token}"})
    assert me.status_code == 200
    assert me.json()["data"]["name"] == "Grace Hopper"
    assert me.json()["data"]["last_login"] is not None


def test_duplicate_registration_conflicts(client) -> None:
    assert client.post(f"{API}/auth/register", json=REGISTRATION).status_code == 201

    duplicate = client.post(f"{API}/auth/register", json=REGISTRATION)

    assert duplicate.status_code == 409
    assert duplicate.json()["success"] is False


def test_admin_profile_cannot_self_register(client) -> None:
    response = client.post(f"{API}/auth/register", json={**REGISTRATION, "profile_type": "ADMIN"})

    assert response.status_code == 422


def test_wrong_password_is_rejected(client, make_user) -> None:
    user = make_user()

    response = client.post(f"{API}/auth/login", json={"email": user.email, "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Incorrect email or password"}


def test_oauth_form_token_endpoint(client, make_user) -> None:
    user = make_user()

    response = client.post(
        f"{API}/auth/token", data={"username": user.email, "password": "Secret123!"}
    )

    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


def test_refresh_issues_new_tokens(client, make_user) -> None:
    make_user(email="refresh@example.com")
    tokens = client.post(
        f"{API}/auth/login", json={"email": "refresh@example.com", "password": "Secret123!"}
    ).json()["data"]

    refreshed = client.post(f"{API}/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    misuse = client.post(f"{API}/auth/refresh", json={"refresh_token": tokens["access_token"]})

    assert refreshed.status_code == 200
    assert refreshed.json()["data"]["user"]["email"] == "refresh@example.com"
    assert misuse.status_code == 401


def test_profile_update_and_directory(client, make_user, headers_for) -> None:
    investor = make_user("Ivy Investor", profile_type=ProfileType.INVESTOR)
    startup = make_user("Sam Startup")

    updated = client.put(
        f"{API}/users/me",
        json={"company": "Acme Ventures", "location": "Paris"},
        headers=headers_for(investor),
    )
    directory = client.get(
        f"{API}/users", params={"profile_type": "INVESTOR"}, headers=headers_for(startup)
    )
    profile = client.get(f"{API}/users/{investor.id}", headers=headers_for(startup))

    assert updated.status_code == 200
    assert updated.json()["data"]["company"] == "Acme Ventures"
    assert [item["name"] for item in directory.json()["data"]] == ["Ivy Investor"]
    assert "email" not in profile.json()["data"]
    assert client.get(f"{API}/users/999", headers=headers_for(startup)).status_code == 404
