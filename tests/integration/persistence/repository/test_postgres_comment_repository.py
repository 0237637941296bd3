"""Integration tests for PostgresCommentRepository.

Requires a migrated PostgreSQL database (see DATABASE__URL).
"""

from uuid import uuid4

import pytest

from threadline.domain.repository import CommentRepository
from threadline.domain.value import PostId
from tests.conftest import make_record
from tests.harness import create_env_fixture

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


class TestPostgresCommentRepository:
    """Tests against a real database."""

    @pytest.mark.asyncio
    async def test_save_and_list(self, integration_env):
        """Saved comments are listed oldest first, without the email."""
        # Arrange
        repo = await integration_env.get(CommentRepository)
        post_id = f"post-{uuid4()}"
        root = make_record("root", minutes=1, post_id=post_id)
        reply = make_record("reply", minutes=2, parent=root, post_id=post_id)

        # Act
        await repo.save(reply, "bob@example.com")
        await repo.save(root, "alice@example.com")
        comments = await repo.find_by_post(PostId(post_id))

        # Assert
        assert [c.id for c in comments] == [root.id, reply.id]
        assert comments[1].parent_id == root.id

    @pytest.mark.asyncio
    async def test_orphan_reply_can_be_stored(self, integration_env):
        """parent_id is not a foreign key."""
        repo = await integration_env.get(CommentRepository)
        post_id = f"post-{uuid4()}"
        missing = make_record("missing", post_id=post_id)
        orphan = make_record("orphan", minutes=1, parent=missing, post_id=post_id)

        await repo.save(orphan, "bob@example.com")

        found = await repo.find_by_id(orphan.id)
        assert found is not None
        assert found.parent_id == missing.id
