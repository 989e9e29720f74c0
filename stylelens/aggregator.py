"""
Workspace Aggregator
Runs the dialect adapters over every component document and folds their usages into
duplicate groups, undefined-class records and class heat buckets.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .config import AnalysisConfig
from .css_index import build_defined_class_set
from .dialects import ExtractionOutcome, run_adapter
from .models import (ClassHeatEntry, ComponentDocument, DuplicateGroup, InlineStyleUsage,
                     Report, SkippedDocument, StyleUsage, StylesheetDocument, UndefinedClassRecord)

logger = logging.getLogger(__name__)

HEAT_BUCKETS = ('hot', 'warm', 'normal')


class WorkspaceAggregator:
    """Accumulates one analysis run. Create a new aggregator per run."""

    def __init__(self, config: AnalysisConfig, defined_classes: Set[str]):
        self.config = config
        self.defined_classes = defined_classes
        self.usages_by_class: Dict[str, List[StyleUsage]] = {}
        self.usages_by_style: Dict[str, List[InlineStyleUsage]] = {}
        self.undefined_classes: List[UndefinedClassRecord] = []
        self.class_counts: Counter = Counter()
        self.skipped: List[SkippedDocument] = []
        self._reported: Set[Tuple[str, str, int]] = set()

    def fold(self, outcome: ExtractionOutcome) -> None:
        """Merge one document's outcome. Failed outcomes leave every index untouched."""
        if not outcome.ok:
            self.skipped.append(SkippedDocument(outcome.file_id, outcome.error))
            return
        is_utility = self.config.classifier.is_utility_class
        for usage in outcome.usages:
            self.usages_by_class.setdefault(usage.class_string, []).append(usage)
            for class_name in usage.tokens:
                if is_utility(class_name):
                    continue
                self.class_counts[class_name] += 1
                key = (class_name, usage.source_file, usage.location.start_line)
                if class_name not in self.defined_classes and key not in self._reported:
                    self._reported.add(key)
                    self.undefined_classes.append(
                        UndefinedClassRecord(usage.source_file, class_name, usage.location))
        for usage in outcome.inline_styles:
            self.usages_by_style.setdefault(usage.style_string, []).append(usage)

    def _groups(self, kind: str, index: Dict[str, list]) -> List[DuplicateGroup]:
        groups = [
            DuplicateGroup(kind, key, list(usages), self.config.severity(len(usages)))
            for key, usages in index.items() if len(usages) > 1
        ]
        # stable: ties keep first-encountered order
        return sorted(groups, key=lambda group: -group.count)

    def heat(self) -> Dict[str, List[ClassHeatEntry]]:
        ranked = sorted(self.class_counts.items(), key=lambda item: -item[1])
        buckets = {}
        start = 0
        for bucket, size in zip(HEAT_BUCKETS, self.config.heat_slices):
            buckets[bucket] = [ClassHeatEntry(name, count) for name, count in ranked[start:start + size]]
            start += size
        return buckets

    def report(self) -> Report:
        duplicates = self._groups('class', self.usages_by_class)
        inline_duplicates = self._groups('style', self.usages_by_style)
        summary = {'critical': 0, 'warning': 0, 'normal': 0}
        for group in duplicates + inline_duplicates:
            summary[group.severity] += 1
        recommendations = [group for group in duplicates
                           if group.count >= self.config.recommendation_threshold]
        return Report(
            duplicates=duplicates,
            inline_style_duplicates=inline_duplicates,
            undefined_classes=list(self.undefined_classes),
            duplicate_summary=summary,
            class_heat=self.heat(),
            recommendations=recommendations,
            skipped_documents=list(self.skipped),
        )


def extract_all(documents: Sequence[ComponentDocument], max_workers: int = 1) -> List[ExtractionOutcome]:
    """Run adapters over documents, returning outcomes in input order."""
    if max_workers <= 1 or len(documents) <= 1:
        return [run_adapter(document) for document in documents]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(run_adapter, documents))


def analyze(component_documents: Sequence[ComponentDocument],
            stylesheet_documents: Sequence[StylesheetDocument],
            config: Optional[AnalysisConfig] = None) -> Report:
    """Analyze a workspace. Repeated runs over the same input produce identical reports."""
    config = config or AnalysisConfig()
    logger.info(f"Analyzing {len(component_documents)} components against "
                f"{len(stylesheet_documents)} stylesheets")
    defined_classes = build_defined_class_set(stylesheet_documents, mode=config.css_scan_mode)

    # canonical enumeration order decides duplicate tie-breaks
    documents = sorted(component_documents, key=lambda document: document.file_id)
    aggregator = WorkspaceAggregator(config, defined_classes)
    for outcome in extract_all(documents, config.max_workers):
        aggregator.fold(outcome)

    report = aggregator.report()
    logger.info(f"Found {len(report.duplicates)} duplicate class groups, "
                f"{len(report.inline_style_duplicates)} duplicate inline styles, "
                f"{len(report.undefined_classes)} undefined classes")
    return report


def find_document_duplicates(document: ComponentDocument,
                             config: Optional[AnalysisConfig] = None) -> List[StyleUsage]:
    """Class usages whose normalized key appears at least twice within a single document."""
    config = config or AnalysisConfig()
    if document.text is not None and document.text.count('\n') + 1 > config.max_document_lines:
        logger.debug(f"Skipping {document.file_id}: longer than {config.max_document_lines} lines")
        return []
    outcome = run_adapter(document)
    if not outcome.ok:
        return []
    counts = Counter(usage.class_string for usage in outcome.usages)
    return [usage for usage in outcome.usages if counts[usage.class_string] > 1]
