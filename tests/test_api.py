"""HTTP tests driving the FastAPI app through httpx."""

import pytest


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_health_probes(client):
    health = await client.get("/health")
    ready = await client.get("/ready")
    live = await client.get("/live")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert ready.json() == {"status": "ready"}
    assert live.json() == {"status": "alive"}


# ═══════════════════════════════════════════════════════════════════════════════
# USERS AND AUTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_user_hides_password(client):
    response = await client.post(
        "/api/users",
        json={"username": "alice", "email": "alice@example.com", "password": "password123"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice"
    assert body["role"] == "AUTHOR"
    assert body["active"] is True
    assert "password" not in body


async def test_duplicate_username_returns_conflict(client):
    payload = {"username": "alice", "email": "alice@example.com", "password": "password123"}
    await client.post("/api/users", json=payload)

    response = await client.post("/api/users", json={**payload, "email": "alice2@example.com"})

    assert response.status_code == 409
    assert response.json() == {
        "error": {
            "code": "DUPLICATE_USERNAME",
            "message": "Username 'alice' is already taken",
            "details": {"field": "username", "value": "alice"},
        }
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "a!", "email": "x@example.com", "password": "password123"},
        {"username": "valid_name", "email": "not-an-email", "password": "password123"},
        {"username": "valid_name", "email": "x@example.com", "password": "short"},
    ],
    ids=["bad-username", "bad-email", "short-password"],
)
async def test_invalid_user_payload_returns_400(client, payload):
    response = await client.post("/api/users", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_user_lookups(client):
    created = (
        await client.post(
            "/api/users",
            json={"username": "TestUser", "email": "t@example.com", "password": "password123"},
        )
    ).json()

    by_id = await client.get(f"/api/users/{created['id']}")
    by_name = await client.get("/api/users/username/TestUser")
    wrong_case = await client.get("/api/users/username/testuser")
    missing = await client.get("/api/users/0")

    assert by_id.json()["username"] == "TestUser"
    assert by_name.json()["id"] == created["id"]
    assert wrong_case.status_code == 404
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"


async def test_list_users_is_paginated(client, register_and_login):
    await register_and_login("first")
    await register_and_login("second")

    response = await client.get("/api/users", params={"page": 1, "per_page": 1})

    body = response.json()
    assert response.status_code == 200
    assert len(body["data"]) == 1
    assert body["pagination"]["total"] == 2
    assert body["pagination"]["total_pages"] == 2


async def test_login_rejects_wrong_password(client, register_and_login):
    await register_and_login("alice", role="AUTHOR")

    response = await client.post(
        "/api/auth/login",
        json={"username": "alice", "password": "wrong-password"},
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid username or password"


# ═══════════════════════════════════════════════════════════════════════════════
# CONTENT TYPES
# ═══════════════════════════════════════════════════════════════════════════════


BLOG_TYPE = {
    "name": "Blog Post",
    "api_identifier": "blog_post",
    "description": "Long-form articles",
    "field_definitions": '{"fields": [{"name": "title", "type": "text", "required": true, "validations": {}}]}',
}


async def test_create_content_type_requires_auth(client):
    response = await client.post("/api/content-types", json=BLOG_TYPE)

    assert response.status_code == 401


async def test_content_type_lifecycle(client, register_and_login):
    admin, headers = await register_and_login("admin", role="ADMIN")

    created = await client.post("/api/content-types", json=BLOG_TYPE, headers=headers)
    assert created.status_code == 201
    content_type = created.json()
    assert content_type["created_by_id"] == admin["id"]
    assert content_type["version"] == 1

    duplicate = await client.post(
        "/api/content-types",
        json={**BLOG_TYPE, "api_identifier": "other"},
        headers=headers,
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_NAME"

    by_identifier = await client.get("/api/content-types/api/blog_post")
    assert by_identifier.json()["id"] == content_type["id"]

    deactivated = await client.post(
        f"/api/content-types/{content_type['id']}/deactivate",
        headers=headers,
    )
    assert deactivated.status_code == 200
    assert deactivated.json()["active"] is False
    assert deactivated.json()["name"] == "Blog Post"

    active = await client.get("/api/content-types")
    assert active.json() == []


async def test_deactivate_requires_editor(client, register_and_login):
    _admin, admin_headers = await register_and_login("admin", role="ADMIN")
    _author, author_headers = await register_and_login("writer", role="AUTHOR")
    content_type = (
        await client.post("/api/content-types", json=BLOG_TYPE, headers=admin_headers)
    ).json()

    forbidden = await client.post(
        f"/api/content-types/{content_type['id']}/deactivate",
        headers=author_headers,
    )
    missing = await client.post("/api/content-types/999/deactivate", headers=admin_headers)

    assert forbidden.status_code == 403
    assert missing.status_code == 404


@pytest.mark.parametrize("api_identifier", ["Blog", "blog-post", "_blog", "blog_", "b"])
async def test_invalid_api_identifier_rejected(client, register_and_login, api_identifier):
    _admin, headers = await register_and_login("admin", role="ADMIN")

    response = await client.post(
        "/api/content-types",
        json={**BLOG_TYPE, "api_identifier": api_identifier},
        headers=headers,
    )

    assert response.status_code == 400


# ═══════════════════════════════════════════════════════════════════════════════
# CONTENT
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def blog(client, register_and_login):
    author, headers = await register_and_login("author", role="AUTHOR")
    content_type = (await client.post("/api/content-types", json=BLOG_TYPE, headers=headers)).json()
    return author, headers, content_type


async def test_content_create_publish_and_list(client, blog):
    author, headers, content_type = blog

    created = await client.post(
        "/api/contents",
        json={
            "content_type_id": content_type["id"],
            "slug": "hello-world",
            "content_data": '{"title": "Hello"}',
            "metadata": '{"seo": {}}',
        },
        headers=headers,
    )
    assert created.status_code == 201
    content = created.json()
    assert content["status"] == "DRAFT"
    assert content["author_id"] == author["id"]
    assert content["metadata"] == '{"seo": {}}'

    published = await client.post(f"/api/contents/{content['id']}/publish", headers=headers)
    assert published.status_code == 200
    assert published.json()["status"] == "PUBLISHED"
    assert published.json()["publish_date"] is not None

    listed = await client.get(f"/api/contents/published/{content_type['id']}")
    assert [item["slug"] for item in listed.json()] == ["hello-world"]

    fetched = await client.get(f"/api/contents/{content['id']}")
    assert fetched.json()["status"] == "PUBLISHED"


async def test_duplicate_slug_returns_conflict(client, blog):
    _author, headers, content_type = blog
    payload = {"content_type_id": content_type["id"], "slug": "hello", "content_data": "{}"}
    await client.post("/api/contents", json=payload, headers=headers)

    response = await client.post("/api/contents", json=payload, headers=headers)

    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Slug 'hello' is already used"


async def test_publish_blank_content_returns_400(client, blog):
    _author, headers, content_type = blog
    content = (
        await client.post(
            "/api/contents",
            json={"content_type_id": content_type["id"], "slug": "blank", "content_data": "   "},
            headers=headers,
        )
    ).json()

    response = await client.post(f"/api/contents/{content['id']}/publish", headers=headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "EMPTY_CONTENT"
    assert (await client.get(f"/api/contents/{content['id']}")).json()["status"] == "DRAFT"


async def test_search_content(client, blog):
    _author, headers, content_type = blog
    for slug, data in (("one", '{"t": "Alpha"}'), ("two", '{"t": "Beta"}')):
        await client.post(
            "/api/contents",
            json={"content_type_id": content_type["id"], "slug": slug, "content_data": data},
            headers=headers,
        )

    response = await client.get("/api/contents/search", params={"q": "alpha"})

    assert [item["slug"] for item in response.json()] == ["one"]


async def test_unknown_content_returns_404(client):
    assert (await client.get("/api/contents/12345")).status_code == 404


# ═══════════════════════════════════════════════════════════════════════════════
# MEDIA
# ═══════════════════════════════════════════════════════════════════════════════


async def test_media_upload_and_queries(client, register_and_login):
    uploader, headers = await register_and_login("uploader", role="AUTHOR")
    for path, mime in (("uploads/a.jpg", "image/jpeg"), ("uploads/b.pdf", "application/pdf")):
        response = await client.post(
            "/api/media",
            json={
                "filename": path.rsplit("/", 1)[-1],
                "file_path": path,
                "mime_type": mime,
                "file_size": 2048,
            },
            headers=headers,
        )
        assert response.status_code == 201

    by_uploader = await client.get("/api/media", params={"uploader_id": uploader["id"]})
    images = await client.get("/api/media", params={"mime_prefix": "image/"})
    neither = await client.get("/api/media")

    assert len(by_uploader.json()) == 2
    assert [m["file_path"] for m in images.json()] == ["uploads/a.jpg"]
    assert neither.status_code == 400

    media_id = by_uploader.json()[0]["id"]
    assert (await client.get(f"/api/media/{media_id}")).json()["uploader_id"] == uploader["id"]
    assert (await client.get("/api/media/999")).status_code == 404


async def test_duplicate_file_path_and_negative_size(client, register_and_login):
    _uploader, headers = await register_and_login("uploader", role="AUTHOR")
    payload = {"filename": "a.jpg", "file_path": "uploads/a.jpg", "mime_type": "image/jpeg", "file_size": 1}
    await client.post("/api/media", json=payload, headers=headers)

    duplicate = await client.post("/api/media", json=payload, headers=headers)
    negative = await client.post(
        "/api/media",
        json={**payload, "file_path": "uploads/b.jpg", "file_size": -1},
        headers=headers,
    )

    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_FILE_PATH"
    assert negative.status_code == 400
