# tests/blogs/test_blog_routes.py
"""Tests for the /blogs endpoints."""

from collections.abc import Callable, Coroutine
from typing import Any
from uuid import UUID, uuid4

from httpx import AsyncClient


type SignupFn = Callable[..., Coroutine[Any, Any, tuple[str, UUID]]]
type BearerFn = Callable[[str], dict[str, str]]

ENVELOPE_KEYS = {"docs", "totalDocs", "limit", "page", "totalPages", "hasNextPage", "hasPrevPage"}


async def _create(
    client: AsyncClient,
    headers: dict[str, str],
    title: str,
    **extra: object,
) -> dict:
    response = await client.post(
        "/blogs",
        json={"title": title, "body": "Some body text", **extra},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _publish(client: AsyncClient, headers: dict[str, str], blog_id: str) -> dict:
    response = await client.patch(f"/blogs/{blog_id}/publish", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateBlog:
    """Tests for POST /blogs."""

    async def test_creates_draft(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, user_id = await signup()

        blog = await _create(client, bearer(token), "First post", tags="python, api")

        assert blog["state"] == "draft"
        assert blog["author"] == str(user_id)
        assert blog["read_count"] == 0
        assert blog["reading_time"] == 1
        assert blog["tags"] == ["python", "api"]

    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.post("/blogs", json={"title": "T", "body": "b"})

        assert response.status_code == 401
        assert response.json() == {"message": "Not authenticated"}

    async def test_rejects_bad_token(self, client: AsyncClient, bearer: BearerFn) -> None:
        response = await client.post("/blogs", json={"title": "T", "body": "b"}, headers=bearer("junk"))

        assert response.status_code == 401

    async def test_missing_body(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, _ = await signup()

        response = await client.post("/blogs", json={"title": "T"}, headers=bearer(token))

        assert response.status_code == 400
        assert response.json() == {"message": "title and body are required"}

    async def test_duplicate_title(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        alice, _ = await signup()
        bob, _ = await signup(email="bob@example.com", first_name="Bob", last_name="Jones")
        await _create(client, bearer(alice), "Taken")

        response = await client.post(
            "/blogs",
            json={"title": "Taken", "body": "b"},
            headers=bearer(bob),
        )



    async def test_title_too_long(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, _ = await signup()

        response = await client.post(
            "/blogs",
            json={"title": "x" * 256, "body": "b"},
            headers=bearer(token),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"
        assert response.json()["errors"][0]["field"] == "title"

    async def test_update_description_too_long(
        self,
        client: AsyncClient,
        signup: SignupFn,
        bearer: BearerFn,
    ) -> None:
        token, _ = await signup()
        blog = await _create(client, bearer(token), "Fine")

        response = await client.put(
            f"/blogs/{blog['id']}",
            json={"description": "d" * 501},
            headers=bearer(token),
        )

        assert response.status_code == 400


class TestGetBlog:
    """Tests for GET /blogs/{blog_id}."""

    async def test_draft_visibility(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        alice, _ = await signup()
        bob, _ = await signup(email="bob@example.com", first_name="Bob", last_name="Jones")
        blog = await _create(client, bearer(alice), "Secret")

        anonymous = await client.get(f"/blogs/{blog['id']}")
        stranger = await client.get(f"/blogs/{blog['id']}", headers=bearer(bob))
        owner = await client.get(f"/blogs/{blog['id']}", headers=bearer(alice))

        assert anonymous.status_code == 403
        assert stranger.status_code == 403
        assert owner.status_code == 200
        assert owner.json()["read_count"] == 3

    async def test_published_counts_reads(
        self,
        client: AsyncClient,
        signup: SignupFn,
        bearer: BearerFn,
    ) -> None:
        token, user_id = await signup()
        blog = await _create(client, bearer(token), "Public")
        await _publish(client, bearer(token), blog["id"])

        first = await client.get(f"/blogs/{blog['id']}")
        second = await client.get(f"/blogs/{blog['id']}")

        assert first.json()["read_count"] == 1
        body = second.json()
        assert body["read_count"] == 2
        assert body["author"] == {
            "id": str(user_id),
            "first_name": "Alice",
            "last_name": "Smith",
            "email": "alice@example.com",
        }

    async def test_invalid_token_reads_as_anonymous(
        self,
        client: AsyncClient,
        signup: SignupFn,
        bearer: BearerFn,
    ) -> None:
        token, _ = await signup()
        blog = await _create(client, bearer(token), "Public")
        await _publish(client, bearer(token), blog["id"])

        response = await client.get(f"/blogs/{blog['id']}", headers=bearer("junk"))

        assert response.status_code == 200

    async def test_invalid_id(self, client: AsyncClient) -> None:
        response = await client.get("/blogs/not-a-uuid")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid id"}

    async def test_unknown_id(self, client: AsyncClient) -> None:
        response = await client.get(f"/blogs/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Blog not found"}


class TestListBlogs:
    """Tests for GET /blogs and GET /blogs/me/list."""

    async def test_public_and_owner_listings(
        self,
        client: AsyncClient,
        signup: SignupFn,
        bearer: BearerFn,
    ) -> None:
        token, _ = await signup()
        headers = bearer(token)
        for index in range(30):
            blog = await _create(client, headers, f"Post {index}")
            if index < 20:
                await _publish(client, headers, blog["id"])

        public = await client.get("/blogs")
        mine = await client.get("/blogs/me/list", headers=headers)
        drafts = await client.get("/blogs/me/list", params={"state": "draft"}, headers=headers)

        public_body = public.json()
        assert set(public_body) == ENVELOPE_KEYS
        assert public_body["totalDocs"] == 20
        assert len(public_body["docs"]) == 20
        assert public_body["limit"] == 20
        assert public_body["totalPages"] == 1
        assert public_body["hasNextPage"] is False
        assert all(doc["state"] == "published" for doc in public_body["docs"])

        assert mine.json()["totalDocs"] == 30
        assert mine.json()["hasNextPage"] is True
        assert drafts.json()["totalDocs"] == 10

    async def test_huge_page_is_empty(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, _ = await signup()
        blog = await _create(client, bearer(token), "Only one")
        await _publish(client, bearer(token), blog["id"])

        response = await client.get("/blogs", params={"page": "1e20"})

        assert response.status_code == 200
        body = response.json()
        assert body["docs"] == []
        assert body["totalDocs"] == 1
        assert body["hasNextPage"] is False

    async def test_owner_listing_requires_token(self, client: AsyncClient) -> None:
        response = await client.get("/blogs/me/list")

        assert response.status_code == 401

    async def test_invalid_state(self, client: AsyncClient) -> None:
        response = await client.get("/blogs", params={"state": "archived"})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid state, expected one of: draft, published"}

    async def test_query_parameters(
        self,
        client: AsyncClient,
        signup: SignupFn,
        bearer: BearerFn,
    ) -> None:
        token, user_id = await signup()
        headers = bearer(token)
        for title, tags in (("Async Python", "python"), ("Rust ownership", "rust"), ("Go channels", "go")):
            blog = await _create(client, headers, title, tags=tags)
            await _publish(client, headers, blog["id"])

        by_tags = await client.get("/blogs", params={"tags": "rust,go", "sort": "title"})
        by_author = await client.get("/blogs", params={"author": str(user_id), "limit": "2", "page": "2"})
        by_search = await client.get("/blogs", params={"q": "smith"})
        garbage = await client.get("/blogs", params={"page": "abc", "limit": "-5", "author": "nope"})

        assert {doc["title"] for doc in by_tags.json()["docs"]} == {"Rust ownership", "Go channels"}
        assert by_author.json()["page"] == 2
        assert len(by_author.json()["docs"]) == 1
        assert by_search.json()["totalDocs"] == 3
        assert garbage.status_code == 200
        assert garbage.json()["page"] == 1
        assert garbage.json()["limit"] == 1
        assert garbage.json()["totalDocs"] == 3


class TestMutations:
    """Tests for PUT, PATCH and DELETE on /blogs/{blog_id}."""

    async def test_update(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, _ = await signup()
        blog = await _create(client, bearer(token), "Old title")

        response = await client.put(
            f"/blogs/{blog['id']}",
            json={"title": "New title", "body": " ".join(["word"] * 401)},
            headers=bearer(token),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "New title"
        assert body["reading_time"] == 3
        assert body["state"] == "draft"

    async def test_update_by_stranger(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        alice, _ = await signup()
        bob, _ = await signup(email="bob@example.com", first_name="Bob", last_name="Jones")
        blog = await _create(client, bearer(alice), "Alice's")

        response = await client.put(f"/blogs/{blog['id']}", json={"title": "Bob's"}, headers=bearer(bob))

        assert response.status_code == 403

    async def test_update_unknown(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, _ = await signup()

        response = await client.put(f"/blogs/{uuid4()}", json={"title": "x"}, headers=bearer(token))

        assert response.status_code == 404

    async def test_update_title_taken(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, _ = await signup()
        await _create(client, bearer(token), "One")
        second = await _create(client, bearer(token), "Two")

        response = await client.put(f"/blogs/{second['id']}", json={"title": "One"}, headers=bearer(token))

        assert response.status_code == 409
        assert response.json() == {"message": "Title already used"}

    async def test_publish_twice(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        token, _ = await signup()
        blog = await _create(client, bearer(token), "Draft")

        first = await _publish(client, bearer(token), blog["id"])
        second = await _publish(client, bearer(token), blog["id"])

        assert first["state"] == second["state"] == "published"

    async def test_delete(self, client: AsyncClient, signup: SignupFn, bearer: BearerFn) -> None:
        alice, _ = await signup()
        bob, _ = await signup(email="bob@example.com", first_name="Bob", last_name="Jones")
        blog = await _create(client, bearer(alice), "Short lived")

        forbidden = await client.delete(f"/blogs/{blog['id']}", headers=bearer(bob))
        deleted = await client.delete(f"/blogs/{blog['id']}", headers=bearer(alice))
        again = await client.delete(f"/blogs/{blog['id']}", headers=bearer(alice))

        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Deleted"}
        assert again.status_code == 404
