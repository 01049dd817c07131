"""
Tag sinks receive tags from the scanner as they are found.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from .tags import Tag


@runtime_checkable
class TagSink(Protocol):
    """Anything that accepts tags in document order."""

    def emit(self, tag: Tag) -> None: ...


class ListSink:
    """Collects emitted tags in a list."""

    def __init__(self) -> None:
        self.tags: list[Tag] = []

    def emit(self, tag: Tag) -> None:
        self.tags.append(tag)


class CallbackSink:
    """Forwards each emitted tag to a callable."""

    def __init__(self, callback: Callable[[Tag], None]):
        self.callback = callback

    def emit(self, tag: Tag) -> None:
        self.callback(tag)
