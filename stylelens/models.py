"""
Style Usage Models
Value types shared by the dialect adapters, the aggregator and the refactor planner.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Dict, List, Optional, Tuple, Union


class Dialect(Enum):
    JSX = 'jsx'
    TSX = 'tsx'
    VUE = 'vue'
    SVELTE = 'svelte'

    @classmethod
    def from_path(cls, path: Union[str, PurePath]) -> Optional['Dialect']:
        """Infer the dialect from a file extension, or None for non-component files."""
        suffix = PurePath(str(path)).suffix.lower().lstrip('.')
        for dialect in cls:
            if dialect.value == suffix:
                return dialect
        return None


@dataclass(frozen=True)
class SourceRange:
    """0-based, end-exclusive span inside one file."""
    file: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def to_dict(self) -> Dict:
        return {
            'start': {'line': self.start_line, 'character': self.start_col},
            'end': {'line': self.end_line, 'character': self.end_col},
        }


@dataclass(frozen=True)
class ComponentDocument:
    file_id: str
    dialect: Dialect
    text: Optional[str] = None
    read_error: Optional[str] = None


@dataclass(frozen=True)
class StylesheetDocument:
    file_id: str
    text: Optional[str] = None
    read_error: Optional[str] = None


@dataclass(frozen=True)
class StyleUsage:
    class_string: str
    location: SourceRange
    source_file: str
    raw_value: str
    attribute_name: str
    attribute_range: SourceRange
    dialect: Dialect

    @property
    def tokens(self) -> List[str]:
        return self.class_string.split()


@dataclass(frozen=True)
class InlineStyleUsage:
    style_string: str
    location: SourceRange
    source_file: str
    attribute_name: str
    attribute_range: SourceRange
    dialect: Dialect


Usage = Union[StyleUsage, InlineStyleUsage]


@dataclass
class DuplicateGroup:
    kind: str  # 'class' or 'style'
    key: str
    occurrences: List[Usage] = field(default_factory=list)
    severity: str = 'normal'

    @property
    def count(self) -> int:
        return len(self.occurrences)

    def to_dict(self) -> Dict:
        key_name = 'classString' if self.kind == 'class' else 'styleString'
        return {
            key_name: self.key,
            'count': self.count,
            'severity': self.severity,
            'fullLocations': [
                {'filePath': usage.source_file, 'location': usage.location.to_dict()}
                for usage in self.occurrences
            ],
        }


@dataclass(frozen=True)
class UndefinedClassRecord:
    source_file: str
    class_name: str
    location: SourceRange

    def to_dict(self) -> Dict:
        return {
            'filePath': self.source_file,
            'className': self.class_name,
            'location': self.location.to_dict(),
        }


@dataclass(frozen=True)
class ClassHeatEntry:
    class_name: str
    occurrence_count: int

    def to_dict(self) -> Dict:
        return {'className': self.class_name, 'count': self.occurrence_count}


@dataclass(frozen=True)
class SkippedDocument:
    file_id: str
    reason: str

    def to_dict(self) -> Dict:
        return {'filePath': self.file_id, 'reason': self.reason}


@dataclass
class Report:
    duplicates: List[DuplicateGroup] = field(default_factory=list)
    inline_style_duplicates: List[DuplicateGroup] = field(default_factory=list)
    undefined_classes: List[UndefinedClassRecord] = field(default_factory=list)
    duplicate_summary: Dict[str, int] = field(
        default_factory=lambda: {'critical': 0, 'warning': 0, 'normal': 0})
    class_heat: Dict[str, List[ClassHeatEntry]] = field(
        default_factory=lambda: {'hot': [], 'warm': [], 'normal': []})
    recommendations: List[DuplicateGroup] = field(default_factory=list)
    skipped_documents: List[SkippedDocument] = field(default_factory=list)

    def find_group(self, key: str, kind: str = 'class') -> Optional[DuplicateGroup]:
        groups = self.duplicates if kind == 'class' else self.inline_style_duplicates
        for group in groups:
            if group.key == key:
                return group
        return None

    def to_dict(self) -> Dict:
        """Convert the report to the camelCase shape consumed by hosts."""
        return {
            'duplicates': [group.to_dict() for group in self.duplicates],
            'inlineStyleDuplicates': [group.to_dict() for group in self.inline_style_duplicates],
            'undefinedClasses': [record.to_dict() for record in self.undefined_classes],
            'duplicateSummary': dict(self.duplicate_summary),
            'classHeat': {
                bucket: [entry.to_dict() for entry in entries]
                for bucket, entries in self.class_heat.items()
            },
            'recommendations': [group.to_dict() for group in self.recommendations],
            'skippedDocuments': [skipped.to_dict() for skipped in self.skipped_documents],
        }


@dataclass(frozen=True)
class RefactorEdit:
    source_file: str
    location: SourceRange
    replacement_attribute_text: str

    def to_dict(self) -> Dict:
        return {
            'filePath': self.source_file,
            'location': self.location.to_dict(),
            'replacement': self.replacement_attribute_text,
        }


@dataclass
class RefactorPlan:
    new_class_name: str
    css_rule: str
    edits: List[RefactorEdit]
    target_file: str

    def files(self) -> Tuple[str, ...]:
        seen = dict.fromkeys(edit.source_file for edit in self.edits)
        return tuple(seen)

    def to_dict(self) -> Dict:
        return {
            'newClassName': self.new_class_name,
            'cssRule': self.css_rule,
            'targetFile': self.target_file,
            'edits': [edit.to_dict() for edit in self.edits],
        }
