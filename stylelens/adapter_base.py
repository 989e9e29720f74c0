"""
Dialect Adapter Interface
Every component dialect is read by one DialectAdapter variant. The aggregator only ever
talks to this interface, so new dialects plug in through `dialects.register_adapter`.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Tuple

from .models import ComponentDocument, Dialect, InlineStyleUsage, SourceRange, StyleUsage
from .normalizer import declarations_to_style_string, normalize_class_string
from .style_objects import Declarations

UsageLists = Tuple[List[StyleUsage], List[InlineStyleUsage]]


def walk(root, skip_types: Iterable[str] = ()) -> Iterator:
    """Pre-order traversal of a tree-sitter node in document order."""
    skip = set(skip_types)
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in skip:
            continue
        yield node
        stack.extend(reversed(node.children))


class DialectAdapter(ABC):
    dialect: Dialect
    class_attribute = 'class'
    style_attribute = 'style'

    @abstractmethod
    def extract_usages(self, document: ComponentDocument) -> UsageLists:
        """Return (class usages, inline style usages); raise ParseError if the text does not parse."""

    def class_usage(self, document: ComponentDocument, raw_value: str, location: SourceRange,
                    attribute_name: str, attribute_range: SourceRange) -> Optional[StyleUsage]:
        class_string = normalize_class_string(raw_value)
        if not class_string:
            return None
        return StyleUsage(
            class_string=class_string,
            location=location,
            source_file=document.file_id,
            raw_value=raw_value,
            attribute_name=attribute_name,
            attribute_range=attribute_range,
            dialect=document.dialect,
        )

    def inline_style_usage(self, document: ComponentDocument, declarations: Optional[Declarations],
                           location: SourceRange, attribute_name: str,
                           attribute_range: SourceRange) -> Optional[InlineStyleUsage]:
        if not declarations:
            return None
        return InlineStyleUsage(
            style_string=declarations_to_style_string(declarations),
            location=location,
            source_file=document.file_id,
            attribute_name=attribute_name,
            attribute_range=attribute_range,
            dialect=document.dialect,
        )
