"""HTTP tests for the /phones resource, backed by the in-memory repository."""

from datetime import timedelta
from email.utils import format_datetime, parsedate_to_datetime

import pytest

from phone_catalog.config import get_settings

MISSING_ID = "65f0c0ffee0000000000abcd"

VALID_BODY = {
    "title": "Galaxy S24",
    "brand": "Samsung",
    "description": "Compact Android flagship",
}


async def _create(client, **overrides) -> dict:
    response = await client.post("/phones", json={**VALID_BODY, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


# ── Create ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_returns_full_record_with_links(client):
    data = await _create(client)

    assert data["title"] == "Galaxy S24"
    assert data["hasBookmark"] is False
    assert data["imageUrl"].startswith("https://")
    assert "lastModified" in data
    assert data["_links"] == {
        "self": {"href": f"http://test/phones/{data['id']}"},
        "collection": {"href": "http://test/phones"},
    }


@pytest.mark.asyncio
async def test_create_then_read_round_trip(client):
    created = await _create(client, title="  Pixel 9  ")

    response = await client.get(f"/phones/{created['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Pixel 9"
    assert data["brand"] == VALID_BODY["brand"]
    assert data["description"] == VALID_BODY["description"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "message"),
    [
        ({"title": "X", "description": "Y"}, "brand is required"),
        ({**VALID_BODY, "title": "   "}, "title must be a non-empty string"),
        ({**VALID_BODY, "description": 42}, "description must be a non-empty string"),
        ({**VALID_BODY, "hasBookmark": "yes"}, "hasBookmark must be a boolean"),
    ],
)
async def test_create_validation_errors(client, repository, body, message):
    response = await client.post("/phones", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert len(repository) == 0


@pytest.mark.asyncio
async def test_create_with_malformed_json(client):
    response = await client.post(
        "/phones", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Malformed JSON body"}


@pytest.mark.asyncio
async def test_create_with_blank_image_url_gets_placeholder(client):
    data = await _create(client, imageUrl="", reviews="")

    assert data["imageUrl"].startswith("https://")
    assert "reviews" not in data


# ── Collection ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_seed_enforces_floor_and_list_is_unpaginated(client):
    response = await client.post("/phones/seed", json={"amount": 3})
    assert response.status_code == 201
    assert response.json()["count"] == 5

    listing = await client.get("/phones")
    assert listing.status_code == 200
    data = listing.json()
    assert len(data["items"]) == 5
    assert "pagination" not in data
    assert data["_links"] == {
        "self": {"href": "http://test/phones"},
        "collection": {"href": "http://test/phones"},
    }


@pytest.mark.asyncio
async def test_seed_without_body_uses_default(client):
    response = await client.post("/phones/seed")
    assert response.status_code == 201
    assert response.json()["count"] == 10


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b'{"amount": 1e400}', b'{"amount": "lots"}'])
async def test_seed_with_unusable_amount_uses_default(client, body):
    response = await client.post(
        "/phones/seed", content=body, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 201
    assert response.json()["count"] == 10


@pytest.mark.asyncio
async def test_seed_amount_is_capped(client, repository, monkeypatch):
    monkeypatch.setattr(get_settings(), "seed_max_amount", 12)

    response = await client.post("/phones/seed", json={"amount": 10**12})

    assert response.status_code == 201
    assert response.json()["count"] == 12
    assert len(repository) == 12


@pytest.mark.asyncio
async def test_seed_replaces_existing_phones(client, repository):
    created = await _create(client)
    await client.post("/phones/seed", json={"amount": 6})

    assert len(repository) == 6
    assert (await client.get(f"/phones/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_list_items_are_minimal_projection(client):
    created = await _create(client, reviews="Great")
    data = (await client.get("/phones")).json()

    assert data["items"] == [
        {
            "id": created["id"],
            "title": created["title"],
            "brand": created["brand"],
            "_links": {
                "self": {"href": f"http://test/phones/{created['id']}"},
                "collection": {"href": "http://test/phones"},
            },
        }
    ]


@pytest.mark.asyncio
async def test_paginated_listing(client):
    await client.post("/phones/seed", json={"amount": 7})

    data = (await client.get("/phones", params={"page": 2, "limit": 3})).json()

    assert len(data["items"]) == 3
    assert data["pagination"] == {
        "page": 2,
        "limit": 3,
        "count": 3,
        "totalItems": 7,
        "totalPages": 3,
    }
    assert data["_links"] == {
        "self": {"href": "http://test/phones?page=2&limit=3"},
        "collection": {"href": "http://test/phones"},
        "next": {"href": "http://test/phones?page=3&limit=3"},
        "prev": {"href": "http://test/phones?page=1&limit=3"},
    }


@pytest.mark.asyncio
async def test_huge_limit_returns_a_page(client):
    await client.post("/phones/seed", json={"amount": 5})

    response = await client.get(
        "/phones", params={"limit": "100000000000000000000", "page": "3"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["items"] == []
    assert data["pagination"]["totalItems"] == 5


@pytest.mark.asyncio
async def test_bad_pagination_params_clamp(client):
    await client.post("/phones/seed", json={"amount": 5})

    data = (await client.get("/phones", params={"page": "zero", "limit": "-2"})).json()

    assert data["pagination"]["page"] == 1
    assert data["pagination"]["limit"] == 1
    assert len(data["items"]) == 1


@pytest.mark.asyncio
async def test_brand_filter_is_exact(client):
    await _create(client, brand="Apple", title="iPhone 15")
    await _create(client, brand="Pineapple", title="Pine 1")
    await _create(client, brand="APPLE", title="iPhone SE")

    data = (await client.get("/phones", params={"brand": "apple"})).json()

    assert sorted(item["title"] for item in data["items"]) == ["iPhone 15", "iPhone SE"]
    assert all(item["brand"].lower() == "apple" for item in data["items"])
    assert data["_links"]["self"]["href"] == "http://test/phones?brand=apple"


@pytest.mark.asyncio
async def test_q_filter_matches_title_brand_or_description(client):
    await _create(client, title="Zoom Master", brand="Sony", description="plain")
    await _create(client, title="Plain", brand="Zoomers", description="plain")
    await _create(client, title="Plain", brand="Nokia", description="10x ZOOM lens")
    await _create(client, title="Other", brand="Nokia", description="nothing")

    data = (await client.get("/phones", params={"q": "zoom", "limit": 10})).json()

    assert data["pagination"]["totalItems"] == 3
    assert data["_links"]["self"]["href"] == "http://test/phones?q=zoom&page=1&limit=10"


@pytest.mark.asyncio
async def test_q_with_regex_characters_is_literal(client):
    await _create(client, title="Phone (2024)")
    await _create(client, title="Phone 2024")

    data = (await client.get("/phones", params={"q": "(2024)"})).json()

    assert [item["title"] for item in data["items"]] == ["Phone (2024)"]


# ── Detail / conditional GET ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_detail_sets_last_modified(client):
    created = await _create(client)
    response = await client.get(f"/phones/{created['id']}")

    assert response.status_code == 200
    assert response.headers["Last-Modified"].endswith("GMT")


@pytest.mark.asyncio
async def test_conditional_get(client):
    created = await _create(client)
    first = await client.get(f"/phones/{created['id']}")
    last_modified = first.headers["Last-Modified"]

    same = await client.get(
        f"/phones/{created['id']}", headers={"If-Modified-Since": last_modified}
    )
    assert same.status_code == 304
    assert same.content == b""

    earlier = parsedate_to_datetime(last_modified) - timedelta(seconds=1)
    older = await client.get(
        f"/phones/{created['id']}",
        headers={"If-Modified-Since": format_datetime(earlier, usegmt=True)},
    )
    assert older.status_code == 200
    assert older.json()["id"] == created["id"]


@pytest.mark.asyncio
async def test_garbage_if_modified_since_is_ignored(client):
    created = await _create(client)
    response = await client.get(
        f"/phones/{created['id']}", headers={"If-Modified-Since": "yesterday-ish"}
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_detail_bad_and_missing_ids(client):
    bad = await client.get("/phones/not-an-id")
    assert bad.status_code == 400
    assert bad.json() == {"error": "Invalid id format"}

    missing = await client.get(f"/phones/{MISSING_ID}")
    assert missing.status_code == 404
    assert missing.json() == {"error": f"Phone with id '{MISSING_ID}' not found"}


# ── Replace ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_put_replaces_and_is_idempotent(client, repository):
    created = await _create(client, reviews="Keep me")
    body = {"title": "New", "brand": "Brand", "description": "Desc"}

    first = await client.put(f"/phones/{created['id']}", json=body)
    state_one = repository.stored(created["id"])
    second = await client.put(f"/phones/{created['id']}", json=body)
    state_two = repository.stored(created["id"])

    assert first.status_code == second.status_code == 200
    assert second.json()["reviews"] == "Keep me"
    state_one.last_modified = state_two.last_modified
    assert state_one == state_two


@pytest.mark.asyncio
async def test_put_with_blank_optionals_keeps_stored_values(client):
    created = await _create(client, imageUrl="https://img.test/a.png", reviews="Keep me")

    response = await client.put(
        f"/phones/{created['id']}",
        json={**VALID_BODY, "title": "Renamed", "imageUrl": "", "reviews": ""},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["imageUrl"] == "https://img.test/a.png"
    assert data["reviews"] == "Keep me"


@pytest.mark.asyncio
async def test_put_requires_all_fields(client):
    created = await _create(client)
    response = await client.put(f"/phones/{created['id']}", json={"title": "Only"})

    assert response.status_code == 400
    assert response.json() == {"error": "brand is required"}


@pytest.mark.asyncio
async def test_put_unknown_and_malformed_ids(client):
    assert (await client.put(f"/phones/{MISSING_ID}", json=VALID_BODY)).status_code == 404
    assert (await client.put("/phones/xyz", json=VALID_BODY)).status_code == 400


# ── Patch ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_patch_updates_supplied_fields(client):
    created = await _create(client)
    response = await client.patch(
        f"/phones/{created['id']}", json={"hasBookmark": True, "reviews": "Superb"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["hasBookmark"] is True
    assert data["reviews"] == "Superb"
    assert data["title"] == created["title"]


@pytest.mark.asyncio
async def test_empty_patch_is_rejected(client, repository):
    created = await _create(client)
    before = repository.stored(created["id"])

    response = await client.patch(f"/phones/{created['id']}", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "No valid fields to patch"}
    assert repository.stored(created["id"]) == before


@pytest.mark.asyncio
async def test_patch_with_only_unknown_fields_is_rejected(client):
    created = await _create(client)
    response = await client.patch(f"/phones/{created['id']}", json={"color": "red"})
    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "message"),
    [
        ({"title": ""}, "title must be a non-empty string"),
        ({"title": "ok", "brand": None}, "brand must be a non-empty string"),
        ({"hasBookmark": 1}, "hasBookmark must be a boolean"),
    ],
)
async def test_patch_rejects_invalid_fields(client, repository, body, message):
    created = await _create(client)
    before = repository.stored(created["id"])

    response = await client.patch(f"/phones/{created['id']}", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert repository.stored(created["id"]) == before


@pytest.mark.asyncio
async def test_patch_missing_phone(client):
    response = await client.patch(f"/phones/{MISSING_ID}", json={"title": "x"})
    assert response.status_code == 404


# ── Delete ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_then_delete_again(client):
    created = await _create(client)

    first = await client.delete(f"/phones/{created['id']}")
    assert first.status_code == 204
    assert first.content == b""

    second = await client.delete(f"/phones/{created['id']}")
    assert second.status_code == 404


@pytest.mark.asyncio
async def test_delete_malformed_id(client):
    response = await client.delete("/phones/123")
    assert response.status_code == 400


# ── Options ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_options_list_allowed_methods(client):
    collection = await client.options("/phones")
    assert collection.status_code == 204
    assert collection.headers["Allow"] == "GET, POST, OPTIONS"

    item = await client.options(f"/phones/{MISSING_ID}")
    assert item.status_code == 204
    assert item.headers["Allow"] == "GET, PUT, PATCH, DELETE, OPTIONS"
