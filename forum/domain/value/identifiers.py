"""Strongly typed identifiers for forum entities.

Identifiers are opaque strings such as ``thread-1f3a...`` or ``user-123``.
NewType keeps them from being mixed up in signatures.
"""

from typing import NewType

UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)
