"""Comment index with consume-once association semantics."""

from classdoc.core import CommentBlock, CommentKind


class CommentIndex:
    """
    Ordered collection of block comments collected during tree building.

    Comments are identified by their position in the index. Claiming a
    comment marks it as used by a member declaration; claimed comments
    are skipped by member lookups but remain visible to the class lookup,
    since class and member comments are independent pools.
    """

    def __init__(self) -> None:
        self._comments: list[CommentBlock] = []
        self._claimed: set[int] = set()

    def add(self, comment: CommentBlock) -> None:
        """Index a comment. Line comments are ignored."""
        if comment.kind != CommentKind.BLOCK:
            return
        self._comments.append(comment)

    def __len__(self) -> int:
        return len(self._comments)

    def nearest_for_class(self, class_start: int) -> CommentBlock | None:
        """
        Nearest comment ending at or before the class node's start.

        Ignores claims and does not claim the result.
        """
        index = self._nearest_preceding(
            lambda c: c.end_offset <= class_start,
            include_claimed=True,
        )
        return self._comments[index] if index is not None else None

    def claim_for_member(self, member_start: int) -> CommentBlock | None:
        """
        Claim the nearest unclaimed JSDoc comment ending before a member.

        The claimed comment can never be returned for another member.
        """
        index = self._nearest_preceding(
            lambda c: c.end_offset < member_start and c.is_doc_comment,
            include_claimed=False,
        )
        if index is None:
            return None
        self._claimed.add(index)
        return self._comments[index]

    def _nearest_preceding(self, predicate, include_claimed: bool) -> int | None:
        """Index of the matching comment with the greatest end offset (last seen wins ties)."""
        best: int | None = None
        for index, comment in enumerate(self._comments):
            if not include_claimed and index in self._claimed:
                continue
            if not predicate(comment):
                continue
            if best is None or comment.end_offset >= self._comments[best].end_offset:
                best = index
        return best
