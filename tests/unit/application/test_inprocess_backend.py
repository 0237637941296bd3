"""Unit tests for InProcessCommentBackend."""

from uuid import uuid4

import pytest

from threadline.domain.error import BackendError
from threadline.domain.repository import CommentBackend
from threadline.domain.value import CommentId, PostId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

POST_ID = PostId("my-first-post")


class TestInProcessCommentBackend:
    """Tests for the in-process backend."""

    @pytest.mark.asyncio
    async def test_insert_then_query(self, unit_env):
        """Inserted comments are listed oldest first, replies included."""
        # Arrange
        backend = await unit_env.get(CommentBackend)
        root = await backend.insert_comment(
            post_id=POST_ID,
            content="Root",
            author_name="Alice",
            author_email="alice@example.com",
        )

        # Act
        reply = await backend.insert_comment(
            post_id=POST_ID,
            content="Reply",
            author_name="Bob",
            author_email="bob@example.com",
            parent_id=root.id,
            author_website="https://bob.dev",
        )
        records = await backend.query_comments(POST_ID)

        # Assert
        assert [r.id for r in records] == [root.id, reply.id]
        assert records[1].parent_id == root.id
        assert records[1].author_website == "https://bob.dev"

    @pytest.mark.asyncio
    async def test_domain_errors_become_backend_errors(self, unit_env):
        """An unknown parent is reported as a BackendError."""
        backend = await unit_env.get(CommentBackend)

        with pytest.raises(BackendError, match="Parent comment not found"):
            await backend.insert_comment(
                post_id=POST_ID,
                content="Reply",
                author_name="Bob",
                author_email="bob@example.com",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        """The stored record requires content."""
        backend = await unit_env.get(CommentBackend)

        with pytest.raises(BackendError):
            await backend.insert_comment(
                post_id=POST_ID,
                content="",
                author_name="Alice",
                author_email="alice@example.com",
            )
