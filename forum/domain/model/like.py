"""Like entity.

A like associates a user with a comment. At most one like exists per
(comment, user) pair; liking is a toggle.
"""

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, UserId


class Like(DomainModel):
    """Like on a comment by a user."""

    comment_id: CommentId
    user_id: UserId
