"""
Vue SFC Adapter
Reads the top-level <template> block of a single-file component.
"""

import logging
import re

from .models import ComponentDocument, Dialect
from .style_objects import expression_declarations
from .template_adapter import TemplateAdapter, blank_spans, protected_spans

logger = logging.getLogger(__name__)

INTERPOLATION = re.compile(r'\{\{.*?\}\}', re.DOTALL)


class VueAdapter(TemplateAdapter):
    dialect = Dialect.VUE
    bound_style_attributes = (':style', 'v-bind:style')
    # the Vue compiler accepts nesting the HTML grammar closes early, e.g. <p><div></div></p>
    strict_end_tags = False

    def mask_expressions(self, document: ComponentDocument) -> str:
        text = document.text
        protected = protected_spans(text)

        def is_protected(offset):
            return any(start <= offset < end for start, end in protected)

        spans = [(m.start(), m.end()) for m in INTERPOLATION.finditer(text) if not is_protected(m.start())]
        return blank_spans(text, spans)

    def template_roots(self, root):
        roots = []
        for node in root.named_children:
            if node.type != 'element':
                continue
            start_tag = node.named_children[0] if node.named_children else None
            if start_tag is None or start_tag.type != 'start_tag':
                continue
            tag_name = next((c for c in start_tag.named_children if c.type == 'tag_name'), None)
            if tag_name is None or tag_name.text.decode('utf-8').lower() != 'template':
                continue
            lang = _attribute_value(start_tag, 'lang')
            if lang and lang.lower() != 'html':
                logger.debug(f"Skipping <template lang=\"{lang}\"> block")
                continue
            roots.append(node)
        return roots[:1]

    def bound_style_declarations(self, raw_value: str):
        return expression_declarations(raw_value)


def _attribute_value(start_tag, name: str):
    for attribute in start_tag.named_children:
        if attribute.type != 'attribute':
            continue
        parts = attribute.named_children
        if not parts or parts[0].text.decode('utf-8') != name:
            continue
        for part in parts[1:]:
            if part.type == 'attribute_value':
                return part.text.decode('utf-8')
            if part.type == 'quoted_attribute_value':
                return part.text.decode('utf-8')[1:-1]
    return None
