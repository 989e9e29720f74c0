"""
Analysis configuration.
Built once by the host and passed into every analysis call.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

from tailwind.classifier import UtilityClassifier
from tailwind.vocabulary import load_utility_vocabulary

from .css_index import SCAN_MODES


@dataclass
class AnalysisConfig:
    classifier: UtilityClassifier = field(default_factory=UtilityClassifier)
    critical_threshold: int = 5
    warning_threshold: int = 3
    recommendation_threshold: int = 5
    heat_slices: Tuple[int, int, int] = (5, 10, 15)
    css_scan_mode: str = 'regex'
    max_workers: int = 1
    max_document_lines: int = 2000

    def __post_init__(self):
        if self.css_scan_mode not in SCAN_MODES:
            raise ValueError(f"css_scan_mode must be one of {SCAN_MODES}, got {self.css_scan_mode!r}")
        if self.max_workers < 1:
            raise ValueError('max_workers must be at least 1')
        if len(self.heat_slices) != 3:
            raise ValueError('heat_slices needs exactly three bucket sizes')

    @classmethod
    def from_vocabulary_file(cls, path: Optional[Union[str, Path]] = None, **overrides) -> 'AnalysisConfig':
        return cls(classifier=UtilityClassifier(load_utility_vocabulary(path)), **overrides)

    def severity(self, count: int) -> str:
        if count >= self.critical_threshold:
            return 'critical'
        if count >= self.warning_threshold:
            return 'warning'
        return 'normal'
