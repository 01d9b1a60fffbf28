"""End-to-end tests for the post endpoints."""

from uuid import uuid4

import pytest


async def create_post(client, headers, **fields):
    body = {
        "title": "Dragons of the North",
        "content": "Dragons are rarely seen this far north of the wall.",
        "status": "published",
        **fields,
    }
    response = await client.post("/posts", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreatePost:
    @pytest.mark.asyncio
    async def test_create_requires_authentication(self, client):
        response = await client.post(
            "/posts", json={"title": "Anonymous", "content": "Nobody signed in here."}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token_is_rejected(self, client):
        response = await client.post(
            "/posts",
            json={"title": "Forged", "content": "This token was never issued."},
            headers={"Authorization": "Bearer forged"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_post_with_category_and_tags(self, client, sign_up):
        user, headers = await sign_up("Ada")
        category = (
            await client.post("/categories", json={"name": "Fantasy"}, headers=headers)
        ).json()
        tags = (
            await client.post(
                "/tags", json={"names": ["Magic", "dragons"]}, headers=headers
            )
        ).json()["tags"]

        post = await create_post(
            client,
            headers,
            category_id=category["id"],
            tag_ids=[tag["id"] for tag in tags],
        )

        assert post["author"] == {"id": str(user.id), "name": "Ada"}
        assert post["category"]["name"] == "Fantasy"
        assert [tag["name"] for tag in post["tags"]] == ["dragons", "magic"]
        assert post["reading_time"] == 1
        assert post["created_at"] == post["updated_at"]

    @pytest.mark.asyncio
    async def test_unknown_category_is_a_bad_request(self, client, sign_up):
        _, headers = await sign_up()

        response = await client.post(
            "/posts",
            json={
                "title": "Lost",
                "content": "This category does not exist.",
                "category_id": str(uuid4()),
            },
            headers=headers,
        )

        assert response.status_code == 400
        assert "Category not found" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_tag_is_a_bad_request(self, client, sign_up):
        _, headers = await sign_up()

        response = await client.post(
            "/posts",
            json={
                "title": "Mislabelled",
                "content": "This tag does not exist anywhere.",
                "tag_ids": [str(uuid4())],
            },
            headers=headers,
        )

        assert response.status_code == 400


class TestListPosts:
    @pytest.mark.asyncio
    async def test_filters_by_category_tag_and_both(self, client, sign_up):
        _, headers = await sign_up()
        fantasy = (
            await client.post("/categories", json={"name": "Fantasy"}, headers=headers)
        ).json()
        dragons, magic = (
            await client.post(
                "/tags", json={"names": ["magic", "dragons"]}, headers=headers
            )
        ).json()["tags"]

        both = await create_post(
            client, headers, category_id=fantasy["id"], tag_ids=[magic["id"]]
        )
        category_only = await create_post(
            client, headers, category_id=fantasy["id"], tag_ids=[dragons["id"]]
        )
        tag_only = await create_post(client, headers, tag_ids=[magic["id"]])
        await create_post(
            client,
            headers,
            category_id=fantasy["id"],
            tag_ids=[magic["id"]],
            status="draft",
        )

        async def listed(**params):
            response = await client.get("/posts", params=params)
            assert response.status_code == 200
            return {post["id"] for post in response.json()["posts"]}

        assert await listed() == {both["id"], category_only["id"], tag_only["id"]}
        assert await listed(category_id=fantasy["id"]) == {
            both["id"],
            category_only["id"],
        }
        assert await listed(tag_id=magic["id"]) == {both["id"], tag_only["id"]}
        assert await listed(category_id=fantasy["id"], tag_id=magic["id"]) == {
            both["id"]
        }
        assert await listed(tag_id=str(uuid4())) == set()

    @pytest.mark.asyncio
    async def test_malformed_filter_is_rejected(self, client):
        response = await client.get("/posts", params={"category_id": "fantasy"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_drafts_are_listed_for_their_author_only(self, client, sign_up):
        _, ada = await sign_up("Ada")
        _, eve = await sign_up("Eve")
        draft = await create_post(client, ada, status="draft")

        mine = await client.get("/posts/drafts", headers=ada)
        theirs = await client.get("/posts/drafts", headers=eve)

        assert [p["id"] for p in mine.json()["posts"]] == [draft["id"]]
        assert theirs.json()["posts"] == []
        assert (await client.get("/posts/drafts")).status_code == 401


class TestSinglePost:
    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, client):
        response = await client.get(f"/posts/{uuid4()}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_draft_is_hidden_from_other_readers(self, client, sign_up):
        _, ada = await sign_up("Ada")
        _, eve = await sign_up("Eve")
        draft = await create_post(client, ada, status="draft")

        assert (await client.get(f"/posts/{draft['id']}", headers=ada)).status_code == 200
        assert (await client.get(f"/posts/{draft['id']}", headers=eve)).status_code == 404
        assert (await client.get(f"/posts/{draft['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_author_updates_content_and_reading_time(self, client, sign_up):
        _, headers = await sign_up()
        post = await create_post(client, headers)

        response = await client.put(
            f"/posts/{post['id']}",
            json={"content": " ".join(["word"] * 450)},
            headers=headers,
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["reading_time"] == 3
        assert updated["title"] == post["title"]
        assert updated["created_at"] == post["created_at"]

    @pytest.mark.asyncio
    async def test_other_user_cannot_update_or_delete(self, client, sign_up):
        _, ada = await sign_up("Ada")
        _, eve = await sign_up("Eve")
        post = await create_post(client, ada)

        update = await client.put(
            f"/posts/{post['id']}", json={"title": "Hijacked"}, headers=eve
        )
        delete = await client.delete(f"/posts/{post['id']}", headers=eve)

        assert update.status_code == 403
        assert delete.status_code == 403
        fetched = (await client.get(f"/posts/{post['id']}")).json()
        assert fetched["title"] == post["title"]

    @pytest.mark.asyncio
    async def test_changing_author_is_a_bad_request(self, client, sign_up):
        _, headers = await sign_up()
        post = await create_post(client, headers)

        response = await client.put(
            f"/posts/{post['id']}",
            json={"author_id": str(uuid4())},
            headers=headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_author_deletes_post(self, client, sign_up):
        _, headers = await sign_up()
        post = await create_post(client, headers)

        response = await client.delete(f"/posts/{post['id']}", headers=headers)

        assert response.status_code == 204
        assert (await client.get(f"/posts/{post['id']}")).status_code == 404
