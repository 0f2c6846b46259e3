"""Strongly typed identifiers for academy entities.

The academy database uses auto-increment integer keys.
"""

from typing import NewType

UserId = NewType("UserId", int)
EventId = NewType("EventId", int)
CommentId = NewType("CommentId", int)
