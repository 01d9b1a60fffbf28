"""End-to-end tests for the category, tag and health endpoints."""

from uuid import uuid4

import pytest


class TestCategoriesApi:
    @pytest.mark.asyncio
    async def test_create_requires_authentication(self, client):
        response = await client.post("/categories", json={"name": "Fantasy"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts_ignoring_case(self, client, sign_up):
        _, headers = await sign_up()

        first = await client.post("/categories", json={"name": "Fantasy"}, headers=headers)
        second = await client.post("/categories", json={"name": "fantasy"}, headers=headers)

        assert first.status_code == 201
        assert second.status_code == 409
        listed = (await client.get("/categories")).json()["categories"]
        assert [c["name"] for c in listed] == ["Fantasy"]

    @pytest.mark.asyncio
    async def test_invalid_name_is_a_bad_request(self, client, sign_up):
        _, headers = await sign_up()

        response = await client.post("/categories", json={"name": "!"}, headers=headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_rename_and_fetch(self, client, sign_up):
        _, headers = await sign_up()
        created = (
            await client.post("/categories", json={"name": "Fantasy"}, headers=headers)
        ).json()

        renamed = await client.put(
            f"/categories/{created['id']}", json={"name": "Epic Fantasy"}, headers=headers
        )
        fetched = await client.get(f"/categories/{created['id']}")

        assert renamed.status_code == 200
        assert fetched.json()["name"] == "Epic Fantasy"
        assert fetched.json()["post_count"] == 0

    @pytest.mark.asyncio
    async def test_category_with_posts_cannot_be_deleted(self, client, sign_up):
        _, headers = await sign_up()
        category = (
            await client.post("/categories", json={"name": "Fantasy"}, headers=headers)
        ).json()
        await client.post(
            "/posts",
            json={
                "title": "Dragons of the North",
                "content": "Dragons are rarely seen this far north.",
                "category_id": category["id"],
            },
            headers=headers,
        )

        response = await client.delete(f"/categories/{category['id']}", headers=headers)

        assert response.status_code == 409
        assert response.json()["detail"] == "Category has associated posts"
        fetched = (await client.get(f"/categories/{category['id']}")).json()
        assert fetched["post_count"] == 1

    @pytest.mark.asyncio
    async def test_delete_unused_category(self, client, sign_up):
        _, headers = await sign_up()
        category = (
            await client.post("/categories", json={"name": "Fantasy"}, headers=headers)
        ).json()

        response = await client.delete(f"/categories/{category['id']}", headers=headers)

        assert response.status_code == 204
        assert (await client.get(f"/categories/{category['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_missing_category_is_not_found(self, client):
        response = await client.get(f"/categories/{uuid4()}")

        assert response.status_code == 404


class TestTagsApi:
    @pytest.mark.asyncio
    async def test_create_tags_reuses_existing(self, client, sign_up):
        _, headers = await sign_up()

        first = await client.post("/tags", json={"names": ["magic"]}, headers=headers)
        second = await client.post(
            "/tags", json={"names": ["MAGIC", "adventure"]}, headers=headers
        )

        assert first.status_code == 201
        by_name = {tag["name"]: tag["id"] for tag in second.json()["tags"]}
        assert by_name["magic"] == first.json()["tags"][0]["id"]
        assert len((await client.get("/tags")).json()["tags"]) == 2

    @pytest.mark.asyncio
    async def test_empty_names_are_rejected(self, client, sign_up):
        _, headers = await sign_up()

        response = await client.post("/tags", json={"names": []}, headers=headers)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_deleting_a_tag_removes_it_from_posts(self, client, sign_up):
        _, headers = await sign_up()
        magic = (
            await client.post("/tags", json={"names": ["magic"]}, headers=headers)
        ).json()["tags"][0]
        post = (
            await client.post(
                "/posts",
                json={
                    "title": "Spellbound",
                    "content": "A story about magic and its price.",
                    "status": "published",
                    "tag_ids": [magic["id"]],
                },
                headers=headers,
            )
        ).json()

        response = await client.delete(f"/tags/{magic['id']}", headers=headers)

        assert response.status_code == 204
        assert (await client.get(f"/posts/{post['id']}")).json()["tags"] == []
        assert (await client.get("/tags")).json()["tags"] == []

    @pytest.mark.asyncio
    async def test_delete_missing_tag_is_not_found(self, client, sign_up):
        _, headers = await sign_up()

        response = await client.delete(f"/tags/{uuid4()}", headers=headers)

        assert response.status_code == 404


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
