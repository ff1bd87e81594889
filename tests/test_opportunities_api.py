"""Tests for opportunities, applications and the notifications they raise."""

from __future__ import annotations

from app.domain.entities import ProfileType

API = "/api/v1"
OPPORTUNITY = {
    "title": "Seed funding for fintech",
    "description": "We invest in early stage fintech companies across Europe.",
    "type": "FUNDING",
    "budget": "50k-200k",
    "tags": ["fintech", "seed"],
}
APPLICATION = {"cover_letter": "We are a payments startup with strong traction."}


def _publish(client, headers, **overrides) -> dict:
    response = client.post(f"{API}/opportunities", json={**OPPORTUNITY, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _notifications(client, headers) -> list[dict]:
    return client.get(f"{API}/notifications", headers=headers).json()["data"]


def test_applying_notifies_the_author(client, make_user, headers_for) -> None:
    author = make_user("Ivy Investor", profile_type=ProfileType.INVESTOR)
    applicant = make_user("Sam Startup")
    opportunity = _publish(client, headers_for(author))

    response = client.post(
        f"{API}/opportunities/{opportunity['id']}/apply",
        json=APPLICATION,
        headers=headers_for(applicant),
    )

    assert response.status_code == 201
    application = response.json()["data"]
    assert application["status"] == "PENDING"
    [notification] = _notifications(client, headers_for(author))
    assert notification["title"] == "New application received"
    assert notification["category"] == "APPLICATION_UPDATE"
    assert notification["data"]["application_id"] == application["id"]
    assert "Sam Startup" in notification["body"]


def test_application_rules(client, make_user, headers_for) -> None:
    author = make_user(profile_type=ProfileType.INVESTOR)
    applicant = make_user()
    opportunity = _publish(client, headers_for(author))
    url = f"{API}/opportunities/{opportunity['id']}/apply"

    own = client.post(url, json=APPLICATION, headers=headers_for(author))
    first = client.post(url, json=APPLICATION, headers=headers_for(applicant))
    duplicate = client.post(url, json=APPLICATION, headers=headers_for(applicant))

    assert own.status_code == 400
    assert first.status_code == 201
    assert duplicate.status_code == 409

    client.put(
        f"{API}/opportunities/{opportunity['id']}",
        json={"status": "CLOSED"},
        headers=headers_for(author),
    )
    late = client.post(url, json=APPLICATION, headers=headers_for(make_user()))
    assert late.status_code == 400


def test_reviewing_an_application_notifies_the_applicant(client, make_user, headers_for) -> None:
    author = make_user(profile_type=ProfileType.INVESTOR)
    applicant = make_user()
    opportunity = _publish(client, headers_for(author))
    application = client.post(
        f"{API}/opportunities/{opportunity['id']}/apply",
        json=APPLICATION,
        headers=headers_for(applicant),
    ).json()["data"]
    status_url = f"{API}/opportunities/applications/{application['id']}/status"

    forbidden = client.put(status_url, json={"status": "ACCEPTED"}, headers=headers_for(applicant))
    accepted = client.put(status_url, json={"status": "ACCEPTED"}, headers=headers_for(author))

    assert forbidden.status_code == 403
    assert accepted.status_code == 200
    assert accepted.json()["data"]["status"] == "ACCEPTED"
    [notification] = _notifications(client, headers_for(applicant))
    assert notification["title"] == "Application update"
    assert "accepted" in notification["body"]
    assert notification["data"]["status"] == "ACCEPTED"

    mine = client.get(f"{API}/opportunities/applications/mine", headers=headers_for(applicant))
    received = client.get(
        f"{API}/opportunities/{opportunity['id']}/applications", headers=headers_for(author)
    )
    assert [item["id"] for item in mine.json()["data"]] == [application["id"]]
    assert received.json()["meta"]["total"] == 1


def test_only_the_author_can_edit_or_delete(client, make_user, headers_for) -> None:
    author = make_user()
    other = make_user()
    opportunity = _publish(client, headers_for(author))
    url = f"{API}/opportunities/{opportunity['id']}"

    assert client.put(url, json={"budget": "1M"}, headers=headers_for(other)).status_code == 403
    assert client.delete(url, headers=headers_for(other)).status_code == 403

    edited = client.put(url, json={"budget": "1M"}, headers=headers_for(author))
    assert edited.json()["data"]["budget"] == "1M"
    assert edited.json()["data"]["tags"] == ["fintech", "seed"]

    assert client.delete(url, headers=headers_for(author)).status_code == 200
    assert client.get(url, headers=headers_for(author)).status_code == 404


def test_browse_filters_and_search(client, make_user, headers_for) -> None:
    author = make_user()
    _publish(client, headers_for(author))
    talent = _publish(
        client,
        headers_for(author),
        title="Looking for a CTO",
        description="Technical cofounder wanted for a climate startup.",
        type="TALENT",
    )

    by_type = client.get(
        f"{API}/opportunities", params={"type": "TALENT"}, headers=headers_for(author)
    ).json()
    by_text = client.get(
        f"{API}/opportunities", params={"search": "climate"}, headers=headers_for(author)
    ).json()

    assert [item["id"] for item in by_type["data"]] == [talent["id"]]
    assert [item["id"] for item in by_text["data"]] == [talent["id"]]
