"""
Source text representation

Tree-sitter reports byte offsets into the UTF-8 encoding; the standardized
AST reports character offsets. SourceText converts between the two.
"""

from bisect import bisect_right
from dataclasses import dataclass, field


@dataclass
class SourceText:
    """
    Source text handed to the parser.

    Attributes:
        content: Decoded source text
        name: Diagnostic label (file path or "<anonymous>")
        encoding: Encoding used to produce the parser input
    """

    content: str
    name: str = "<anonymous>"
    encoding: str = "utf-8"
    _encoded: bytes = field(init=False, repr=False)
    _char_starts: list[int] | None = field(init=False, repr=False, default=None)
    _line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self):
        self._encoded = self.content.encode(self.encoding)

        self._line_starts = [0]
        newline = self._encoded.find(b"\n")
        while newline != -1:
            self._line_starts.append(newline + 1)
            newline = self._encoded.find(b"\n", newline + 1)

        if len(self._encoded) != len(self.content):
            # Byte offset of every character start, for bisecting
            starts = []
            offset = 0
            for ch in self.content:
                starts.append(offset)
                offset += len(ch.encode(self.encoding))
            self._char_starts = starts

    @property
    def encoded(self) -> bytes:
        """Parser input"""
        return self._encoded

    @property
    def is_ascii(self) -> bool:
        """True when byte and character offsets coincide"""
        return self._char_starts is None

    def __len__(self) -> int:
        return len(self.content)

    def char_offset(self, byte_offset: int) -> int:
        """
        Convert a byte offset to a character offset.

        Args:
            byte_offset: Offset into the encoded source

        Returns:
            Offset into content
        """
        if self._char_starts is None:
            return byte_offset
        if byte_offset >= len(self._encoded):
            return len(self.content)
        return bisect_right(self._char_starts, byte_offset) - 1

    def location(self, byte_offset: int) -> tuple[int, int]:
        """
        Line/column of a byte offset.

        Lines are split on "\\n" only, matching tree-sitter rows.

        Returns:
            (line, column): 1-indexed line, 0-indexed character column
        """
        row = bisect_right(self._line_starts, byte_offset) - 1
        return row + 1, self.char_offset(byte_offset) - self.char_offset(self._line_starts[row])

    def text(self, start_byte: int, end_byte: int) -> str:
        """Get source text between two byte offsets"""
        return self._encoded[start_byte:end_byte].decode(self.encoding)

    def fragment(self, start_byte: int, end_byte: int, limit: int = 80) -> str:
        """
        Get a single-line snippet for diagnostics.

        Args:
            start_byte: Start byte offset
            end_byte: End byte offset
            limit: Max characters kept

        Returns:
            Snippet with newlines collapsed, truncated with "..."
        """
        snippet = " ".join(self.text(start_byte, end_byte).split())
        if len(snippet) > limit:
            snippet = snippet[: limit - 3] + "..."
        return snippet
