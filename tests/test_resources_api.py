"""Tests for the shared resource library."""

from __future__ import annotations

API = "/api/v1"
RESOURCE = {
    "title": "Business plan template",
    "description": "A complete business plan template with worked examples.",
    "type": "TEMPLATE",
    "url": "https://example.com/business-plan.docx",
    "tags": ["planning", "finance"],
}


def _publish(client, headers, **overrides) -> dict:
    response = client.post(f"{API}/resources", json={**RESOURCE, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _ids(response) -> list[int]:
    return [item["id"] for item in response.json()["data"]]


def test_publish_and_read_counts_views(client, make_user, headers_for) -> None:
    author = make_user()
    reader = make_user()
    resource = _publish(client, headers_for(author))

    assert resource["view_count"] == 0
    assert resource["tags"] == ["planning", "finance"]
    assert resource["is_premium"] is False

    first = client.get(f"{API}/resources/{resource['id']}", headers=headers_for(reader))
    second = client.get(f"{API}/resources/{resource['id']}", headers=headers_for(reader))

    assert first.json()["data"]["view_count"] == 1
    assert second.json()["data"]["view_count"] == 2
    assert client.get(f"{API}/resources/999", headers=headers_for(reader)).status_code == 404


def test_only_the_author_can_edit_or_delete(client, make_user, headers_for) -> None:
    author = make_user()
    other = make_user()
    resource = _publish(client, headers_for(author))
    url = f"{API}/resources/{resource['id']}"

    assert client.put(url, json={"is_premium": True}, headers=headers_for(other)).status_code == 403
    assert client.delete(url, headers=headers_for(other)).status_code == 403

    edited = client.put(
        url, json={"is_premium": True, "tags": ["finance", "pitch"]}, headers=headers_for(author)
    ).json()["data"]
    assert edited["is_premium"] is True
    assert edited["tags"] == ["finance", "pitch"]
    assert edited["title"] == RESOURCE["title"]

    untouched_tags = client.put(
        url, json={"title": "Business plan kit"}, headers=headers_for(author)
    ).json()["data"]
    assert untouched_tags["tags"] == ["finance", "pitch"]

    assert client.delete(url, headers=headers_for(author)).status_code == 200
    assert client.get(url, headers=headers_for(author)).status_code == 404


def test_browse_filters(client, make_user, headers_for) -> None:
    author = make_user()
    other = make_user()
    template = _publish(client, headers_for(author))
    guide = _publish(
        client,
        headers_for(other),
        title="Guide to seed fundraising",
        description="Step by step guide to raising a seed round in Europe.",
        type="GUIDE",
        tags=["fundraising"],
        is_premium=True,
    )
    headers = headers_for(author)

    assert _ids(client.get(f"{API}/resources", params={"type": "GUIDE"}, headers=headers)) == [
        guide["id"]
    ]
    assert _ids(
        client.get(f"{API}/resources", params={"tag": "plan"}, headers=headers)
    ) == [template["id"]]
    assert _ids(
        client.get(f"{API}/resources", params={"search": "seed round"}, headers=headers)
    ) == [guide["id"]]
    assert _ids(
        client.get(f"{API}/resources", params={"is_premium": "false"}, headers=headers)
    ) == [template["id"]]
    assert _ids(client.get(f"{API}/resources", headers=headers)) == [guide["id"], template["id"]]


def test_by_author_and_popular_listings(client, make_user, headers_for) -> None:
    author = make_user()
    reader = make_user()
    quiet = _publish(client, headers_for(author))
    viewed = _publish(
        client,
        headers_for(reader),
        title="Pitch deck checklist",
        description="Everything investors expect to see in a pitch deck.",
        type="TOOL",
    )
    for _ in range(3):
        client.get(f"{API}/resources/{viewed['id']}", headers=headers_for(author))

    mine = client.get(f"{API}/resources/author/{author.id}", headers=headers_for(reader))
    popular = client.get(f"{API}/resources/popular", headers=headers_for(reader))
    missing = client.get(f"{API}/resources/author/999", headers=headers_for(reader))

    assert _ids(mine) == [quiet["id"]]
    assert mine.json()["meta"]["total"] == 1
    assert _ids(popular) == [viewed["id"], quiet["id"]]
    assert popular.json()["data"][0]["view_count"] == 3
    assert missing.status_code == 404


def test_resource_payload_validation(client, make_user, headers_for) -> None:
    author = make_user()

    short = client.post(
        f"{API}/resources",
        json={**RESOURCE, "description": "Too short"},
        headers=headers_for(author),
    )
    unknown_type = client.post(
        f"{API}/resources", json={**RESOURCE, "type": "PODCAST"}, headers=headers_for(author)
    )

    assert short.status_code == 422
    assert unknown_type.status_code == 422
