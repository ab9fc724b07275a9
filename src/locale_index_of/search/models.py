"""Search data models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Grapheme:
    """A user-perceived character and where it starts in the original string.

    ``offset`` is a Python string index (code points), so
    ``source[offset:offset + len(text)] == text`` always holds.
    """

    offset: int
    text: str

    @property
    def end(self) -> int:
        return self.offset + len(self.text)
