"""
Inline style readers shared by the dialect adapters.

Object literals (`{ backgroundColor: 'red', padding: 4 }`) are read from tree-sitter
JavaScript/TSX nodes; declaration strings (`color: red; margin: 0`) are read with tinycss2.
Both return a list of (property, value) pairs, or None when the style is not fully literal.
"""

from typing import List, Optional, Tuple

import tinycss2
import tree_sitter_javascript
from tree_sitter import Language, Parser

from .normalizer import camel_to_kebab, collapse_whitespace, format_style_value

JS_LANGUAGE = Language(tree_sitter_javascript.language())

Declarations = List[Tuple[str, str]]


def _string_contents(node) -> str:
    # string nodes include their quotes
    return node.text.decode('utf-8')[1:-1]


def _property_name(key) -> Optional[str]:
    if key is None:
        return None
    if key.type == 'property_identifier':
        return camel_to_kebab(key.text.decode('utf-8'))
    if key.type == 'string':
        return camel_to_kebab(_string_contents(key))
    return None


def object_declarations(object_node) -> Optional[Declarations]:
    """Read a style object literal; any spread, shorthand, computed key or non-literal value rejects it."""
    declarations: Declarations = []
    for entry in object_node.named_children:
        if entry.type == 'comment':
            continue
        if entry.type != 'pair':
            return None
        name = _property_name(entry.child_by_field_name('key'))
        value = entry.child_by_field_name('value')
        if name is None or value is None:
            return None
        if value.type == 'string':
            text = format_style_value(_string_contents(value))
        elif value.type == 'number':
            text = format_style_value(value.text.decode('utf-8'), numeric=True)
        else:
            return None
        if text:
            declarations.append((name, text))
    return declarations


def expression_declarations(expression: str) -> Optional[Declarations]:
    """Parse a bare JavaScript expression (e.g. a Vue `:style` binding) as a style object."""
    tree = Parser(JS_LANGUAGE).parse(f"({expression})".encode('utf-8'))
    if tree.root_node.has_error:
        return None
    statements = tree.root_node.named_children
    if len(statements) != 1 or statements[0].type != 'expression_statement':
        return None
    node = statements[0].named_children[0] if statements[0].named_children else None
    while node is not None and node.type == 'parenthesized_expression':
        inner = [child for child in node.named_children if child.type != 'comment']
        node = inner[0] if len(inner) == 1 else None
    if node is None or node.type != 'object':
        return None
    return object_declarations(node)


def declaration_text_declarations(text: str) -> Optional[Declarations]:
    """Read a static `style="..."` attribute value."""
    declarations: Declarations = []
    for decl in tinycss2.parse_declaration_list(text, skip_comments=True, skip_whitespace=True):
        if decl.type != 'declaration':
            return None
        value = collapse_whitespace(tinycss2.serialize(decl.value))
        if not value:
            continue
        if decl.important:
            value += ' !important'
        declarations.append((decl.lower_name, value))
    return declarations
