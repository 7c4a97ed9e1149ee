"""
Timeline node data model for the rate-limited log cache.

Each LogEntry is one occurrence of a printed message. Entries form a
singly-linked chain in arrival order; an entry's `next` attribute is the
only strong reference to the entry after it.
"""

from typing import Optional


class LogEntry:
    """
    Node in the log cache timeline.

    Attributes:
        content: Message text used as the deduplication key
        timestamp: Time the message was printed, in whole seconds
        next: Following entry in arrival order (owned by this entry)
    """

    __slots__ = ('content', 'timestamp', 'next', '__weakref__')

    def __init__(self, content: str, timestamp: int, next: Optional['LogEntry'] = None):
        self.content = content
        self.timestamp = timestamp
        self.next = next

    def __repr__(self) -> str:
        return f"LogEntry(content={self.content!r}, timestamp={self.timestamp})"
