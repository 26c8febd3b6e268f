"""End-to-end tests for notification endpoints."""

import pytest


async def seed_answer_notifications(api, count: int):
    """Bob answers ``count`` of Alice's questions."""
    _, alice_headers = await api.register("alice")
    _, bob_headers = await api.register("bob")
    for i in range(count):
        created = await api.client.post(
            "/questions",
            json={"title": f"A rather long question title number {i}", "description": "D"},
            headers=alice_headers,
        )
        await api.client.post(
            f"/questions/{created.json()['id']}/answers",
            json={"content": "An answer"},
            headers=bob_headers,
        )
    return alice_headers, bob_headers


class TestNotificationEndpoints:
    """Listing, counting and reading notifications."""

    @pytest.mark.asyncio
    async def test_list_shows_sender_and_truncated_title(self, api):
        # Arrange
        alice_headers, _ = await seed_answer_notifications(api, 1)

        # Act
        response = await api.client.get("/notifications", headers=alice_headers)

        # Assert
        assert response.status_code == 200
        (notification,) = response.json()["notifications"]
        assert notification["sender"]["username"] == "bob"
        assert notification["read"] is False
        assert notification["question"]["title"] == (
            "A rather long question title number 0"
        )
        assert notification["message"] == (
            'bob answered your question: "A rather long question title n..."'
        )

    @pytest.mark.asyncio
    async def test_unread_count_and_read_all(self, api):
        alice_headers, _ = await seed_answer_notifications(api, 3)

        before = await api.client.get("/notifications/unread-count", headers=alice_headers)
        marked = await api.client.put("/notifications/read-all", headers=alice_headers)
        after = await api.client.get("/notifications/unread-count", headers=alice_headers)

        assert before.json() == {"count": 3}
        assert marked.status_code == 200
        assert marked.json()["updated"] == 3
        assert after.json() == {"count": 0}

    @pytest.mark.asyncio
    async def test_mark_one_read(self, api):
        alice_headers, bob_headers = await seed_answer_notifications(api, 2)
        listing = await api.client.get("/notifications", headers=alice_headers)
        notification_id = listing.json()["notifications"][0]["id"]

        denied = await api.client.put(
            f"/notifications/{notification_id}/read", headers=bob_headers
        )
        allowed = await api.client.put(
            f"/notifications/{notification_id}/read", headers=alice_headers
        )
        count = await api.client.get("/notifications/unread-count", headers=alice_headers)

        assert denied.status_code == 401
        assert allowed.status_code == 200
        assert allowed.json()["read"] is True
        assert count.json() == {"count": 1}

    @pytest.mark.asyncio
    async def test_requires_auth(self, api):
        response = await api.client.get("/notifications")

        assert response.status_code == 401
