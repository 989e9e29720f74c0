"""
Svelte Adapter
Reads markup outside <script>/<style>. Every `{...}` expression or block tag is blanked
before parsing; attribute values that contained one are dynamic and skipped.
"""

from typing import List, Tuple

from .errors import ParseError
from .models import ComponentDocument, Dialect
from .template_adapter import TemplateAdapter, blank_spans, protected_spans

QUOTES = '"\'`'


def _closing_brace(text: str, start: int) -> int:
    depth = 0
    quote = None
    index = start
    while index < len(text):
        char = text[index]
        if quote:
            if char == '\\':
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in QUOTES:
            quote = char
        elif char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return -1


def expression_spans(document: ComponentDocument) -> List[Tuple[int, int]]:
    text = document.text
    skip_to = dict(protected_spans(text))
    spans = []
    index = 0
    while index < len(text):
        if index in skip_to:
            index = skip_to[index]
            continue
        if text[index] == '{':
            end = _closing_brace(text, index)
            if end < 0:
                line = text.count('\n', 0, index)
                raise ParseError(document.file_id, f"unclosed '{{' on line {line + 1}")
            spans.append((index, end + 1))
            index = end + 1
            continue
        index += 1
    return spans


class SvelteAdapter(TemplateAdapter):
    dialect = Dialect.SVELTE

    def mask_expressions(self, document: ComponentDocument) -> str:
        return blank_spans(document.text, expression_spans(document))

    def is_dynamic_value(self, raw_value: str) -> bool:
        return '{' in raw_value
