"""src/urlkit/utils/string_buffer.py

Small fluent string builder used to reassemble URLs.
"""

from typing import List, Optional


class StringBuffer:
    """Accumulates string fragments, optionally appending on a condition."""

    __slots__ = ("_parts",)

    def __init__(self, initial: Optional[str] = None):
        self._parts: List[str] = []
        if initial:
            self._parts.append(initial)

    @classmethod
    def create(cls, initial: Optional[str] = None) -> "StringBuffer":
        """Alternative constructor allowing a chained build expression."""
        return cls(initial)

    def append(self, value: Optional[str]) -> "StringBuffer":
        """Append ``value``; ``None`` and empty strings are ignored."""
        if value:
            self._parts.append(value)
        return self

    def append_if(self, condition: bool, value: Optional[str]) -> "StringBuffer":
        """Append ``value`` only when ``condition`` is true."""
        if condition:
            self.append(value)
        return self

    def to_string(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)
