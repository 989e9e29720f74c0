"""
HTML-grammar Template Adapter
Shared tree-sitter HTML walking for the single-file-component dialects (Vue, Svelte).

Template expressions (`{{ ... }}`, `{...}`) are not HTML, so each dialect blanks them out
before parsing. Blanking keeps every character and newline position, which means offsets in
the parsed tree are offsets into the original text.
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

import tree_sitter_html
from tree_sitter import Language, Parser

from .adapter_base import DialectAdapter, UsageLists, walk
from .errors import ParseError
from .models import ComponentDocument
from .source_map import SourceText
from .style_objects import declaration_text_declarations

logger = logging.getLogger(__name__)

HTML_LANGUAGE = Language(tree_sitter_html.language())

# Regions whose braces belong to another language
PROTECTED_REGION = re.compile(
    r'<!--.*?-->|<(script|style)\b[^>]*>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)

RAW_TEXT_ELEMENTS = ('script_element', 'style_element')


def protected_spans(text: str) -> List[Tuple[int, int]]:
    return [(match.start(), match.end()) for match in PROTECTED_REGION.finditer(text)]


def blank_spans(text: str, spans: Iterable[Tuple[int, int]]) -> str:
    """Replace every non-newline character inside the spans with '_'."""
    chars = list(text)
    for start, end in spans:
        for index in range(start, end):
            if chars[index] != '\n':
                chars[index] = '_'
    return ''.join(chars)


class TemplateAdapter(DialectAdapter):
    class_attribute = 'class'
    bound_style_attributes: Tuple[str, ...] = ()
    # end tags the HTML grammar could not match count as a parse failure
    strict_end_tags = True

    def mask_expressions(self, document: ComponentDocument) -> str:
        return document.text

    def template_roots(self, root) -> List:
        return [root]

    def is_dynamic_value(self, raw_value: str) -> bool:
        return False

    def bound_style_declarations(self, raw_value: str):
        return None

    def parse(self, document: ComponentDocument):
        masked = self.mask_expressions(document)
        source = SourceText(document.file_id, masked)
        tree = Parser(HTML_LANGUAGE).parse(source.data)
        root = tree.root_node
        if root.has_error or (self.strict_end_tags and _has_erroneous_end_tag(root)):
            raise ParseError(document.file_id, f"invalid {self.dialect.value} markup")
        return source, root

    def extract_usages(self, document: ComponentDocument) -> UsageLists:
        source, root = self.parse(document)
        usages, inline_styles = [], []
        for template in self.template_roots(root):
            for attribute in walk(template, skip_types=RAW_TEXT_ELEMENTS):
                if attribute.type != 'attribute':
                    continue
                self._read_attribute(document, source, attribute, usages, inline_styles)
        logger.debug(f"{document.file_id}: {len(usages)} class usages, {len(inline_styles)} inline styles")
        return usages, inline_styles

    def _read_attribute(self, document, source, attribute, usages, inline_styles) -> None:
        name_node = value_node = None
        for child in attribute.named_children:
            if child.type == 'attribute_name':
                name_node = child
            elif child.type in ('attribute_value', 'quoted_attribute_value'):
                value_node = child
        if name_node is None or value_node is None:
            return

        start = source.char_offset(value_node.start_byte)
        end = source.char_offset(value_node.end_byte)
        if value_node.type == 'quoted_attribute_value':
            start, end = start + 1, end - 1
        name_start = source.char_offset(attribute.start_byte)
        name = document.text[name_start:source.char_offset(name_node.end_byte)]
        raw_value = document.text[start:end]
        location = source.span(start, end)
        attribute_range = source.span(name_start, source.char_offset(attribute.end_byte))

        if name == self.class_attribute:
            if self.is_dynamic_value(raw_value):
                return
            usage = self.class_usage(document, raw_value, location, name, attribute_range)
            if usage:
                usages.append(usage)
            return

        declarations: Optional[list] = None
        if name == self.style_attribute:
            if self.is_dynamic_value(raw_value):
                return
            declarations = declaration_text_declarations(raw_value)
        elif name in self.bound_style_attributes:
            declarations = self.bound_style_declarations(raw_value)
        else:
            return
        usage = self.inline_style_usage(document, declarations, location, name, attribute_range)
        if usage:
            inline_styles.append(usage)


def _has_erroneous_end_tag(root) -> bool:
    return any(node.type == 'erroneous_end_tag' for node in walk(root))
