"""
Adapter registry and per-document extraction outcomes.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .adapter_base import DialectAdapter
from .errors import ParseError
from .jsx_adapter import JSXAdapter
from .models import ComponentDocument, Dialect, InlineStyleUsage, StyleUsage
from .svelte_adapter import SvelteAdapter
from .vue_adapter import VueAdapter

logger = logging.getLogger(__name__)

_ADAPTERS: Dict[Dialect, DialectAdapter] = {
    Dialect.JSX: JSXAdapter(Dialect.JSX),
    Dialect.TSX: JSXAdapter(Dialect.TSX),
    Dialect.VUE: VueAdapter(),
    Dialect.SVELTE: SvelteAdapter(),
}


def register_adapter(dialect: Dialect, adapter: DialectAdapter) -> None:
    _ADAPTERS[dialect] = adapter


def get_adapter(dialect: Dialect) -> DialectAdapter:
    try:
        return _ADAPTERS[dialect]
    except KeyError:
        raise ValueError(f"No adapter registered for dialect {dialect!r}") from None


def class_attribute_for(dialect: Dialect) -> str:
    """Attribute name a dialect uses for classes (`className` for JSX/TSX, `class` otherwise)."""
    return get_adapter(dialect).class_attribute


@dataclass
class ExtractionOutcome:
    file_id: str
    usages: List[StyleUsage] = field(default_factory=list)
    inline_styles: List[InlineStyleUsage] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_adapter(document: ComponentDocument) -> ExtractionOutcome:
    """Extract one document; read and parse failures become a failed outcome."""
    if document.read_error is not None or document.text is None:
        reason = f"read error: {document.read_error or 'no content'}"
        logger.warning(f"Skipping {document.file_id}: {reason}")
        return ExtractionOutcome(document.file_id, error=reason)
    try:
        usages, inline_styles = get_adapter(document.dialect).extract_usages(document)
    except ParseError as e:
        logger.warning(f"Skipping {document.file_id}: parse error: {e.message}")
        return ExtractionOutcome(document.file_id, error=f"parse error: {e.message}")
    except Exception as e:
        logger.error(f"Adapter failed on {document.file_id}: {str(e)}", exc_info=True)
        return ExtractionOutcome(document.file_id, error=f"adapter error: {str(e)}")
    return ExtractionOutcome(document.file_id, usages, inline_styles)
