"""
Parenpp OUTPUT BUFFER
---------------------
Append-only text sink that knows the length of its current line in O(1).
"""

from io import StringIO


class OutputBuffer:
    """Accumulates rendered text for a single prettyprint call."""

    def __init__(self):
        self._stream = StringIO()
        self._last_linebreak = 0

    def write(self, text: str) -> None:
        self._stream.write(text)

    def newline(self) -> None:
        self._stream.write("\n")
        self._last_linebreak = self._stream.tell()

    @property
    def current_line_length(self) -> int:
        return self._stream.tell() - self._last_linebreak

    def getvalue(self) -> str:
        return self._stream.getvalue()
