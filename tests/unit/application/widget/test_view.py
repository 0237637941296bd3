"""Unit tests for CommentView."""

from datetime import datetime, timedelta, timezone

from threadline.application.widget import (
    CommentSectionState,
    CommentView,
    LoadStatus,
    format_comment_date,
)
from threadline.domain.service import build_comment_tree
from threadline.domain.value import PostId
from tests.conftest import make_record


def _chain(length: int):
    """Records forming a single reply chain, root first."""
    records = [make_record("depth 0", minutes=0)]
    for depth in range(1, length):
        records.append(
            make_record(f"depth {depth}", minutes=depth, parent=records[-1])
        )
    return records


class TestRender:
    """Tests for forest rendering."""

    def test_reply_offered_below_max_depth_only(self):
        """Depths 0-2 can be replied to, depth 3 and deeper cannot."""
        # Arrange
        view = CommentView(max_reply_depth=3)
        forest = build_comment_tree(_chain(5))

        # Act
        items = view.render(forest)

        # Assert
        flags = []
        item = items[0]
        while True:
            flags.append((item.depth, item.can_reply))
            if not item.replies:
                break
            item = item.replies[0]
        assert flags == [(0, True), (1, True), (2, True), (3, False), (4, False)]

    def test_existing_deep_replies_still_rendered(self):
        """Comments past the reply limit are shown, not truncated."""
        view = CommentView(max_reply_depth=1)
        forest = build_comment_tree(_chain(3))

        items = view.render(forest)

        assert items[0].replies[0].replies[0].content == "depth 2"

    def test_reply_form_open_only_under_selected_comment(self):
        """Only the comment being replied to shows the open form."""
        # Arrange
        view = CommentView()
        a = make_record("A", minutes=1)
        b = make_record("B", minutes=2)

        # Act
        items = view.render(build_comment_tree([a, b]), replying_to=a.id)

        # Assert
        open_forms = {item.content: item.reply_form_open for item in items}
        assert open_forms == {"A": True, "B": False}

    def test_reply_form_not_opened_beyond_max_depth(self):
        """A stale reply slot on a too-deep comment should not open a form."""
        view = CommentView(max_reply_depth=1)
        records = _chain(2)

        items = view.render(build_comment_tree(records), replying_to=records[1].id)

        assert items[0].replies[0].reply_form_open is False

    def test_author_fields(self):
        """Website links the author; the privileged flag shows the badge."""
        view = CommentView()
        record = make_record(
            author_name="Owner",
            author_website="https://owner.dev",
            is_privileged=True,
        )

        item = view.render(build_comment_tree([record]))[0]

        assert item.author_name == "Owner"
        assert item.author_url == "https://owner.dev"
        assert item.is_privileged is True
        assert item.comment_id == str(record.id)


class TestFormatCommentDate:
    """Tests for format_comment_date."""

    def test_afternoon(self):
        value = datetime(2025, 1, 5, 15, 4, tzinfo=timezone.utc)

        assert format_comment_date(value) == "January 5, 2025 at 03:04 PM"

    def test_uses_record_timezone(self):
        """The time is shown in the timestamp's own offset."""
        value = datetime(2025, 12, 31, 9, 30, tzinfo=timezone(timedelta(hours=-5)))

        assert format_comment_date(value) == "December 31, 2025 at 09:30 AM"


class TestRenderSection:
    """Tests for whole-section rendering."""

    def _state(self, **kwargs) -> CommentSectionState:
        return CommentSectionState(post_id=PostId("my-first-post"), **kwargs)

    def test_loading(self):
        view = CommentView()

        section = view.render_section(self._state(status=LoadStatus.LOADING))

        assert section.status_message == "Loading comments..."

    def test_empty_list(self):
        view = CommentView()

        section = view.render_section(self._state(status=LoadStatus.LOADED))

        assert section.heading == "0 Comments"
        assert section.status_message == "No comments yet."
        assert section.comments == []

    def test_failed_fetch_replaces_list(self):
        """A fetch error is shown inline instead of the comments."""
        view = CommentView()
        forest = build_comment_tree([make_record()])

        section = view.render_section(
            self._state(
                status=LoadStatus.FAILED, error="Network down", forest=forest, total=1
            )
        )

        assert section.status_message == "Network down"
        assert section.error == "Network down"
        assert section.comments == []

    def test_heading_counts_replies(self):
        """The heading uses the total node count."""
        view = CommentView()
        a = make_record("A", minutes=1)
        b = make_record("B", minutes=2, parent=a)

        section = view.render_section(
            self._state(
                status=LoadStatus.LOADED, forest=build_comment_tree([a, b]), total=2
            )
        )

        assert section.heading == "2 Comments"
        assert section.status_message is None
        assert len(section.comments) == 1

    def test_submitting_disables_button(self):
        view = CommentView()

        idle = view.render_section(self._state(status=LoadStatus.LOADED))
        busy = view.render_section(
            self._state(status=LoadStatus.LOADED, submitting=True)
        )

        assert (idle.submit_label, idle.submit_disabled) == ("Post Comment", False)
        assert (busy.submit_label, busy.submit_disabled) == ("Posting...", True)
