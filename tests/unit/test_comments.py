"""Tests for the consume-once comment index."""

import pytest

from classdoc.core import CommentBlock, CommentKind
from classdoc.extraction.comments import CommentIndex


def _block(text: str, start: int, end: int) -> CommentBlock:
    return CommentBlock(kind=CommentKind.BLOCK, text=text, start_offset=start, end_offset=end)


class TestCommentIndex:
    """Tests for CommentIndex."""

    @pytest.fixture
    def index(self) -> CommentIndex:
        index = CommentIndex()
        index.add(_block("* class doc ", 0, 20))
        index.add(_block(" plain block ", 30, 45))
        index.add(_block("* first member ", 50, 70))
        return index

    def test_line_comments_are_not_indexed(self):
        index = CommentIndex()
        index.add(CommentBlock(kind=CommentKind.LINE, text=" note", start_offset=0, end_offset=7))

        assert len(index) == 0

    def test_class_lookup_picks_nearest_preceding(self, index: CommentIndex):
        comment = index.nearest_for_class(46)

        assert comment is not None
        assert comment.text == " plain block "

    def test_class_lookup_allows_touching_comment(self, index: CommentIndex):
        comment = index.nearest_for_class(20)

        assert comment is not None
        assert comment.text == "* class doc "

    def test_class_lookup_does_not_claim(self, index: CommentIndex):
        found = index.nearest_for_class(100)

        assert found is not None
        assert index.claim_for_member(100) is found

    def test_member_lookup_requires_doc_marker(self, index: CommentIndex):
        comment = index.claim_for_member(46)

        assert comment is not None
        assert comment.text == "* class doc "

    def test_member_lookup_is_strictly_before(self, index: CommentIndex):
        assert index.claim_for_member(20) is None

    def test_member_claims_are_consumed_once(self, index: CommentIndex):
        first = index.claim_for_member(100)
        second = index.claim_for_member(100)
        third = index.claim_for_member(100)

        assert first is not None and first.text == "* first member "
        assert second is not None and second.text == "* class doc "
        assert third is None

    def test_claimed_comments_stay_visible_to_class_lookup(self, index: CommentIndex):
        claimed = index.claim_for_member(100)

        assert index.nearest_for_class(100) is claimed

    def test_invalid_offsets_rejected(self):
        with pytest.raises(ValueError):
            _block("* x", 10, 5)
