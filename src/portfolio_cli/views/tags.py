"""Technologies tag editor."""

from __future__ import annotations

from collections.abc import Iterable

ACCEPT_KEYS = frozenset({"enter", "\r", "\n"})


class TagEditor:
    """Ordered list of unique technology labels plus a pending input buffer.

    Matching is exact and case-sensitive. Insertion order is kept.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._tags: list[str] = []
        self.buffer = ""
        for tag in initial:
            self.add(tag)
        self.buffer = ""

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def add(self, text: str | None = None) -> bool:
        """Append *text* (or the buffer) if it is non-blank and new.

        Clears the buffer only when something was appended.
        """
        value = (self.buffer if text is None else text).strip()
        if not value or value in self._tags:
            return False
        self._tags.append(value)
        self.buffer = ""
        return True

    def remove(self, tag: str) -> bool:
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        return True

    def handle_key(self, key: str) -> bool:
        """Handle a key typed in the tag input.

        Returns ``True`` when the key was consumed; an accept key adds the
        buffer and must not reach the form as a submit.
        """
        if key.lower() in ACCEPT_KEYS:
            self.add()
            return True
        return False
