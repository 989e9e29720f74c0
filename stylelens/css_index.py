"""
CSS Definition Index
Collects the class selectors defined across a set of stylesheets.

The default "regex" scan matches `.name` anywhere in the text, including comments and
values such as `0.5rem`. Over-matching only hides "undefined class" reports, never adds them.
The "selectors" scan reads selector preludes with tinycss2 instead.
"""

import logging
import re
from typing import Iterable, Set

import tinycss2

from .models import StylesheetDocument

logger = logging.getLogger(__name__)

CLASS_SELECTOR = re.compile(r'\.([a-zA-Z0-9_-]+)')

SCAN_MODES = ('regex', 'selectors')


def scan_class_names(css_content: str) -> Set[str]:
    return set(CLASS_SELECTOR.findall(css_content))


def _selector_classes(tokens, found: Set[str]) -> None:
    previous = None
    for token in tokens:
        if token.type == 'ident' and previous is not None \
                and previous.type == 'literal' and previous.value == '.':
            found.add(token.value)
        if token.type == 'function':
            _selector_classes(token.arguments, found)
        elif token.type in ('[] block', '() block'):
            _selector_classes(token.content, found)
        previous = token


def _collect_rules(rules, found: Set[str]) -> None:
    for rule in rules:
        if rule.type == 'qualified-rule':
            _selector_classes(rule.prelude, found)
            # nested rules sit beside declarations in the block
            _collect_rules(tinycss2.parse_blocks_contents(rule.content, skip_comments=True,
                                                          skip_whitespace=True), found)
        elif rule.type == 'at-rule' and rule.content is not None:
            _collect_rules(tinycss2.parse_rule_list(rule.content, skip_comments=True,
                                                    skip_whitespace=True), found)


def parse_class_selectors(css_content: str) -> Set[str]:
    found: Set[str] = set()
    stylesheet = tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True)
    _collect_rules(stylesheet, found)
    return found


def build_defined_class_set(stylesheet_documents: Iterable[StylesheetDocument],
                            mode: str = 'regex') -> Set[str]:
    """Union of class names defined by every readable stylesheet."""
    if mode not in SCAN_MODES:
        raise ValueError(f"Unknown CSS scan mode {mode!r}; expected one of {SCAN_MODES}")
    scan = scan_class_names if mode == 'regex' else parse_class_selectors
    defined: Set[str] = set()
    for document in stylesheet_documents:
        if document.read_error is not None or document.text is None:
            logger.error(f"Error reading CSS file {document.file_id}: {document.read_error or 'no content'}")
            continue
        try:
            defined |= scan(document.text)
        except Exception as e:
            logger.error(f"Error scanning CSS file {document.file_id}: {str(e)}", exc_info=True)
    logger.info(f"Indexed {len(defined)} defined classes")
    return defined
