"""Integration tests for the notification REST endpoints."""

from __future__ import annotations

from app.domain.entities import ProfileType

API = "/api/v1"


def _notify(client, admin_headers, user_id: int, **overrides):
    payload = {"user_id": user_id, "title": "Heads up", "body": "Something happened"}
    payload.update(overrides)
    response = client.post(f"{API}/notifications", json=payload, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_offline_user_sees_unread_count(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()

    created = _notify(client, headers_for(admin), member.id)

    count = client.get(f"{API}/notifications/unread/count", headers=headers_for(member))
    assert count.status_code == 200
    assert count.json() == {
        "success": True,
        "data": {"count": 1},
        "message": None,
        "error": None,
        "meta": None,
    }

    listing = client.get(f"{API}/notifications", headers=headers_for(member)).json()
    assert listing["success"] is True
    assert [item["id"] for item in listing["data"]] == [created["id"]]
    assert listing["data"][0]["is_read"] is False
    assert listing["meta"]["total"] == 1


def test_mark_all_read_reports_count(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()
    for index in range(5):
        _notify(client, headers_for(admin), member.id, title=f"Item {index}")

    response = client.put(f"{API}/notifications/read-all", headers=headers_for(member))

    assert response.status_code == 200
    assert response.json()["data"] == {"count": 5}
    count = client.get(f"{API}/notifications/unread/count", headers=headers_for(member))
    assert count.json()["data"] == {"count": 0}


def test_cannot_delete_someone_elses_notification(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    owner = make_user()
    intruder = make_user()
    created = _notify(client, headers_for(admin), owner.id)

    response = client.delete(f"{API}/notifications/{created['id']}", headers=headers_for(intruder))

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Notification not found"}
    kept = client.get(f"{API}/notifications/{created['id']}", headers=headers_for(owner))
    assert kept.status_code == 200
    assert kept.json()["data"] == created


def test_mark_read_twice_and_delete(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()
    created = _notify(client, headers_for(admin), member.id)
    url = f"{API}/notifications/{created['id']}"

    first = client.put(f"{url}/read", headers=headers_for(member))
    second = client.put(f"{url}/read", headers=headers_for(member))

    assert first.status_code == second.status_code == 200
    assert first.json()["data"]["is_read"] is True
    assert second.json()["data"]["read_at"] == first.json()["data"]["read_at"]

    deleted = client.delete(url, headers=headers_for(member))
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Notification deleted"
    assert client.get(url, headers=headers_for(member)).status_code == 404


def test_list_filters_by_read_state_and_category(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()
    system = _notify(client, headers_for(admin), member.id)
    match = _notify(
        client,
        headers_for(admin),
        member.id,
        category="OPPORTUNITY_MATCH",
        title="New matching opportunity",
        data={"opportunity_id": 4},
    )
    client.put(f"{API}/notifications/{system['id']}/read", headers=headers_for(member))

    unread = client.get(
        f"{API}/notifications", params={"read": "false"}, headers=headers_for(member)
    ).json()
    matches = client.get(
        f"{API}/notifications",
        params={"category": "OPPORTUNITY_MATCH"},
        headers=headers_for(member),
    ).json()
    page = client.get(
        f"{API}/notifications", params={"limit": 1, "page": 2}, headers=headers_for(member)
    ).json()

    assert [item["id"] for item in unread["data"]] == [match["id"]]
    assert matches["data"][0]["data"] == {"opportunity_id": 4}
    assert page["meta"] == {
        "page": 2,
        "limit": 1,
        "total": 2,
        "total_pages": 2,
        "has_next": False,
        "has_prev": True,
    }


def test_admin_endpoint_rejects_members_and_unknown_users(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()
    payload = {"user_id": member.id, "title": "Hi", "body": "There"}

    forbidden = client.post(f"{API}/notifications", json=payload, headers=headers_for(member))
    missing = client.post(
        f"{API}/notifications", json={**payload, "user_id": 999}, headers=headers_for(admin)
    )

    assert forbidden.status_code == 403
    assert missing.status_code == 404
    assert missing.json()["success"] is False


def test_requests_without_credentials_are_rejected(client) -> None:
    response = client.get(f"{API}/notifications")

    assert response.status_code == 401
    assert response.json()["success"] is False


def test_validation_errors_use_the_envelope(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)

    response = client.post(
        f"{API}/notifications", json={"user_id": 1}, headers=headers_for(admin)
    )

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Invalid request"
    assert body["details"]


def test_admin_purge_keeps_unread_notifications(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()
    admin_headers = headers_for(admin)
    _notify(client, admin_headers, member.id, title="Old news")
    client.put(f"{API}/notifications/read-all", headers=headers_for(member))
    _notify(client, admin_headers, member.id, title="Still unread")

    forbidden = client.post(
        f"{API}/admin/notifications/purge", json={"max_age_days": 0}, headers=headers_for(member)
    )
    purged = client.post(
        f"{API}/admin/notifications/purge", json={"max_age_days": 0}, headers=admin_headers
    )

    assert forbidden.status_code == 403
    assert purged.json()["data"] == {"count": 1}
    remaining = client.get(f"{API}/notifications", headers=headers_for(member)).json()["data"]
    assert [item["title"] for item in remaining] == ["Still unread"]


def test_search_treats_wildcards_literally(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()
    _notify(client, headers_for(admin), member.id, title="Grant covers 50% of costs")
    _notify(client, headers_for(admin), member.id, title="Weekly digest")

    def titles(term: str) -> list[str]:
        response = client.get(
            f"{API}/notifications", params={"search": term}, headers=headers_for(member)
        )
        return [item["title"] for item in response.json()["data"]]

    assert titles("50%") == ["Grant covers 50% of costs"]
    assert titles("%") == ["Grant covers 50% of costs"]
    assert titles("_") == []
