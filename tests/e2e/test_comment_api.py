"""End-to-end tests for the comment API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from threadline.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


def _post(client: TestClient, post_id: str = "my-first-post", **overrides):
    body = {
        "content": "Great post",
        "author_name": "Alice",
        "author_email": "alice@example.com",
    }
    body.update(overrides)
    return client.post(f"/posts/{post_id}/comments", json=body)


class TestCommentAPI:
    """End-to-end tests for posting and listing comments."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_comment(self, client):
        """POST should return the created comment without the email."""
        # Act
        response = _post(client, author_website="https://alice.dev")

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["content"] == "Great post"
        assert data["post_id"] == "my-first-post"
        assert data["parent_id"] is None
        assert data["author_website"] == "https://alice.dev"
        assert data["is_privileged"] is False
        assert "author_email" not in data

    def test_created_comments_are_listed_flat(self, client):
        """GET should list every comment of the post, replies included."""
        # Arrange
        root = _post(client).json()
        reply = _post(
            client, content="Thanks", author_name="Bob", parent_id=root["comment_id"]
        ).json()
        _post(client, post_id="another-post")

        # Act
        response = client.get("/posts/my-first-post/comments")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [c["comment_id"] for c in data["comments"]] == [
            root["comment_id"],
            reply["comment_id"],
        ]
        assert data["comments"][1]["parent_id"] == root["comment_id"]

    def test_owner_email_gets_badge(self, client):
        response = _post(client, author_email="owner@example.com")

        assert response.json()["is_privileged"] is True

    def test_unknown_parent_is_404(self, client):
        response = _post(client, parent_id=str(uuid4()))

        assert response.status_code == 404
        assert "Parent comment not found" in response.json()["detail"]

    def test_malformed_parent_is_400(self, client):
        response = _post(client, parent_id="not-a-uuid")

        assert response.status_code == 400

    def test_parent_on_other_post_is_400(self, client):
        parent = _post(client, post_id="another-post").json()

        response = _post(client, parent_id=parent["comment_id"])

        assert response.status_code == 400
        assert "does not belong" in response.json()["detail"]

    def test_content_over_limit_is_422(self, client):
        response = _post(client, content="x" * 1001)

        assert response.status_code == 422

    def test_missing_email_is_422(self, client):
        response = client.post(
            "/posts/my-first-post/comments",
            json={"content": "Hi", "author_name": "Alice"},
        )

        assert response.status_code == 422

    def test_empty_post_lists_nothing(self, client):
        response = client.get("/posts/nothing-here/comments")

        assert response.json() == {
            "post_id": "nothing-here",
            "comments": [],
            "total": 0,
        }
