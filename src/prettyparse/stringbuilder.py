"""StringBuilder for O(n) output accumulation.

Renderers append fragments to a list and join once at the end instead of
concatenating strings repeatedly.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with an indentation level.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<pp-text>").append("hi").append("</pp-text>")
            >>> sb.build()
            '<pp-text>hi</pp-text>'

    """

    __slots__ = ("_parts", "_indent", "_indent_unit")

    def __init__(self, indent_unit: str = "  ") -> None:
        self._parts: list[str] = []
        self._indent = 0
        self._indent_unit = indent_unit

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append an indented line followed by a newline."""
        if s:
            self._parts.append(self._indent_unit * self._indent)
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def indent(self) -> StringBuilder:
        self._indent += 1
        return self

    def dedent(self) -> StringBuilder:
        if self._indent > 0:
            self._indent -= 1
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
