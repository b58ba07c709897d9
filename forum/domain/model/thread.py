"""Thread entities.

Threads are top-level discussion topics. A thread's id, owner and date are
fixed at creation.
"""

from datetime import datetime

from forum.domain.model.comment import CommentDetail
from forum.domain.model.common import PayloadEntity
from forum.domain.value import ThreadId, UserId


class NewThread(PayloadEntity):
    """Payload for creating a thread, owner merged in from the authenticated user."""

    ERROR_PREFIX = "NEW_THREAD"
    REQUIRED = {"title": str, "body": str, "owner": str}

    title: str
    body: str
    owner: UserId


class AddedThread(PayloadEntity):
    """Result of creating a thread."""

    ERROR_PREFIX = "ADDED_THREAD"
    REQUIRED = {"id": str, "title": str, "owner": str}

    id: ThreadId
    title: str
    owner: UserId


class Thread(PayloadEntity):
    """Persisted thread."""

    ERROR_PREFIX = "THREAD"
    REQUIRED = {
        "id": str,
        "title": str,
        "body": str,
        "owner": str,
        "date": datetime,
    }

    id: ThreadId
    title: str
    body: str
    owner: UserId
    date: datetime


class ThreadDetail(PayloadEntity):
    """Thread view with its comments, replies and like counts."""

    ERROR_PREFIX = "THREAD_DETAIL"
    REQUIRED = {
        "id": str,
        "title": str,
        "body": str,
        "owner": str,
        "date": datetime,
    }
    OPTIONAL = {"comments": (list, tuple)}

    id: ThreadId
    title: str
    body: str
    owner: UserId
    date: datetime
    comments: tuple[CommentDetail, ...] = ()
