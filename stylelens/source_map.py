"""
Source position mapping.

Adapters report spans as character offsets into the original document text. tree-sitter
reports byte offsets, so `SourceText` converts those before building a `SourceRange`.
"""

import bisect
from typing import List, Tuple

from .models import SourceRange


class SourceText:
    def __init__(self, file_id: str, text: str):
        self.file_id = file_id
        self.text = text
        self.data = text.encode('utf-8')
        self._ascii = len(self.data) == len(text)
        self._line_starts: List[int] = [0]
        for index, char in enumerate(text):
            if char == '\n':
                self._line_starts.append(index + 1)

    def char_offset(self, byte_offset: int) -> int:
        if self._ascii:
            return byte_offset
        return len(self.data[:byte_offset].decode('utf-8'))

    def position(self, offset: int) -> Tuple[int, int]:
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def span(self, start: int, end: int) -> SourceRange:
        """SourceRange for the character span [start, end)."""
        start_line, start_col = self.position(start)
        end_line, end_col = self.position(end)
        return SourceRange(self.file_id, start_line, start_col, end_line, end_col)

    def byte_span(self, start_byte: int, end_byte: int) -> SourceRange:
        return self.span(self.char_offset(start_byte), self.char_offset(end_byte))

    def slice_bytes(self, start_byte: int, end_byte: int) -> str:
        return self.data[start_byte:end_byte].decode('utf-8')
