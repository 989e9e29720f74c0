"""
JSX/TSX Adapter
Extracts literal `className="..."` and `style={{...}}` usages from React-style components
using the tree-sitter TSX grammar (which also accepts plain JSX).
"""

import logging

import tree_sitter_typescript
from tree_sitter import Language, Parser

from .adapter_base import DialectAdapter, UsageLists, walk
from .errors import ParseError
from .models import ComponentDocument, Dialect
from .source_map import SourceText
from .style_objects import object_declarations

logger = logging.getLogger(__name__)

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())


class JSXAdapter(DialectAdapter):
    class_attribute = 'className'

    def __init__(self, dialect: Dialect = Dialect.TSX):
        self.dialect = dialect

    def extract_usages(self, document: ComponentDocument) -> UsageLists:
        source = SourceText(document.file_id, document.text)
        # Parser instances are not shared between threads
        tree = Parser(TSX_LANGUAGE).parse(source.data)
        if tree.root_node.has_error:
            raise ParseError(document.file_id, f"invalid {self.dialect.value.upper()} syntax")

        usages, inline_styles = [], []
        for attribute in walk(tree.root_node):
            if attribute.type != 'jsx_attribute':
                continue
            parts = attribute.named_children
            if len(parts) < 2 or parts[0].type != 'property_identifier':
                continue
            name = parts[0].text.decode('utf-8')
            value = parts[1]
            attribute_range = source.byte_span(attribute.start_byte, attribute.end_byte)

            if name == self.class_attribute and value.type == 'string':
                start, end = value.start_byte + 1, value.end_byte - 1
                usage = self.class_usage(document, source.slice_bytes(start, end),
                                         source.byte_span(start, end), name, attribute_range)
                if usage:
                    usages.append(usage)

            elif name == self.style_attribute and value.type == 'jsx_expression':
                inner = [child for child in value.named_children if child.type != 'comment']
                if len(inner) != 1 or inner[0].type != 'object':
                    continue
                usage = self.inline_style_usage(
                    document, object_declarations(inner[0]),
                    source.byte_span(value.start_byte + 1, value.end_byte - 1),
                    name, attribute_range)
                if usage:
                    inline_styles.append(usage)

        logger.debug(f"{document.file_id}: {len(usages)} class usages, {len(inline_styles)} inline styles")
        return usages, inline_styles
