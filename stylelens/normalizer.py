"""
Normalizer Module
Canonical comparison keys for class attributes and inline style declarations.
"""

import re

_WHITESPACE = re.compile(r'\s+')
_CAMEL_HUMP = re.compile(r'([A-Z])')


def normalize_class_string(raw: str) -> str:
    """Trim, split on whitespace runs, sort and rejoin with single spaces."""
    stripped = raw.strip()
    if not stripped:
        return ''
    return ' '.join(sorted(_WHITESPACE.split(stripped)))


def normalize_style_string(raw: str) -> str:
    """Split on ';', drop empty declarations, sort and rejoin with '; '."""
    declarations = [decl.strip() for decl in raw.split(';')]
    return '; '.join(sorted(decl for decl in declarations if decl))


def collapse_whitespace(raw: str) -> str:
    """Collapse whitespace runs without reordering tokens."""
    return _WHITESPACE.sub(' ', raw.strip())


def camel_to_kebab(name: str) -> str:
    # backgroundColor -> background-color, WebkitTransition -> -webkit-transition
    return _CAMEL_HUMP.sub(lambda m: '-' + m.group(1).lower(), name)


def format_style_value(text: str, numeric: bool = False) -> str:
    """Serialize a literal style value as written; numbers get a px unit."""
    text = text.strip()
    return f"{text}px" if numeric else text


def declarations_to_style_string(declarations) -> str:
    """Build a normalized style string from (property, value) pairs."""
    return normalize_style_string('; '.join(f"{prop}: {value}" for prop, value in declarations))
