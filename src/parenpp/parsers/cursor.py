"""
Parenpp QUOTED TEXT CURSOR
--------------------------
A read head over a line of text that never stops inside a quoted string.

Three quote styles are understood:
- "..." and '...' where a backslash escapes the following character
- `...` with no escape processing

Every time the head moves it swallows a maximal run of adjacent quoted spans,
so `front` and `empty` always describe a position outside any quote. The
position before that swallowing is remembered as `start`, which lets
`text_until` hand the quoted text back to whoever asks for it.
"""

from typing import Iterable

QUOTE_STYLES = (('"', True), ("'", True), ("`", False))


class QuotedText:
    """
    Cursor over `text`.

    start:  offset before quote skipping was applied
    offset: current read head (always outside quotes)
    """

    __slots__ = ("text", "start", "offset")

    def __init__(self, text: str, offset: int = 0):
        self.text = text
        self.start = offset
        self.offset = offset
        self._skip_quotes()

    def __repr__(self) -> str:
        return f"QuotedText(start={self.start}, offset={self.offset}, len={len(self.text)})"

    @property
    def empty(self) -> bool:
        return self.offset >= len(self.text)

    @property
    def front(self) -> str:
        if self.empty:
            raise IndexError("front of exhausted QuotedText")
        return self.text[self.offset]

    def advance(self) -> None:
        """Step over the current character, then over any quotes that follow."""
        if self.empty:
            raise IndexError("advance past end of QuotedText")
        self.offset += 1
        self.start = self.offset
        self._skip_quotes()

    def copy(self) -> "QuotedText":
        clone = QuotedText.__new__(QuotedText)
        clone.text = self.text
        clone.start = self.start
        clone.offset = self.offset
        return clone

    def anchored(self) -> "QuotedText":
        """A cursor at the same position whose skipped quotes count as already read."""
        return QuotedText(self.text, self.offset)

    def find_among(self, chars: Iterable[str]) -> "QuotedText":
        """
        Returns a new cursor at the first unquoted occurrence of any of `chars`,
        or an exhausted cursor if there is none.
        """
        found = self.copy()
        while not found.empty and found.front not in chars:
            found.advance()
        return found

    def text_until(self, other: "QuotedText") -> str:
        """
        Text from this cursor's start up to `other`'s read head.

        ie. foo"test"bar
        from   ^ to ^ is the "same" position, but yields '"test"'
        """
        if other.text is not self.text:
            raise ValueError("cursors do not share the same text")
        if other.offset < self.start:
            raise ValueError(
                f"cursor at {other.offset} lies before start {self.start}"
            )
        return self.text[self.start:other.offset]

    def _skip_quotes(self) -> None:
        while any(self._skip_quoted(marker, escapes) for marker, escapes in QUOTE_STYLES):
            pass

    def _skip_quoted(self, marker: str, escapes: bool) -> bool:
        text = self.text
        end = len(text)
        pos = self.offset
        if pos >= end or text[pos] != marker:
            return False

        pos += 1  # opening marker
        while pos < end and text[pos] != marker:
            if escapes and text[pos] == "\\":
                pos += 1
            if pos < end:
                pos += 1
        if pos < end:
            pos += 1  # closing marker

        self.offset = pos
        return True
