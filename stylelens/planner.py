"""
Refactor Planner
Turns a duplicate group into one CSS rule plus the attribute edits that point every
occurrence at it. Pure computation; hosts apply the edits and write the rule.
"""

import logging
import re

from .dialects import class_attribute_for
from .errors import InvalidNameError
from .models import DuplicateGroup, RefactorEdit, RefactorPlan
from .normalizer import collapse_whitespace

logger = logging.getLogger(__name__)

CLASS_NAME_PATTERN = re.compile(r'[a-z0-9_-]+')


def validate_class_name(new_class_name: str) -> str:
    if not isinstance(new_class_name, str) or not CLASS_NAME_PATTERN.fullmatch(new_class_name):
        raise InvalidNameError(new_class_name)
    return new_class_name


def create_css_rule(class_name: str, utility_classes: str) -> str:
    """`.name { @apply <utilities>; }` keeping the utilities in their written order."""
    return f"\n.{class_name} {{\n  @apply {collapse_whitespace(utility_classes)};\n}}\n"


def create_declaration_rule(class_name: str, style_string: str) -> str:
    lines = [f"  {declaration.strip()};" for declaration in style_string.split(';') if declaration.strip()]
    body = '\n'.join(lines)
    return f"\n.{class_name} {{\n{body}\n}}\n"


def _edits(group: DuplicateGroup, new_class_name: str):
    return [
        RefactorEdit(
            source_file=usage.source_file,
            location=usage.attribute_range,
            replacement_attribute_text=f'{class_attribute_for(usage.dialect)}="{new_class_name}"',
        )
        for usage in group.occurrences
    ]


def _check_group(group: DuplicateGroup, kind: str) -> None:
    if group.kind != kind:
        raise ValueError(f"Expected a {kind!r} duplicate group, got {group.kind!r}")
    if not group.occurrences:
        raise ValueError(f"Duplicate group {group.key!r} has no occurrences")


def _check_target(target_file: str) -> None:
    if not target_file:
        raise ValueError("A resolved target stylesheet is required to plan a refactor")


def plan_refactor(group: DuplicateGroup, new_class_name: str, target_file: str) -> RefactorPlan:
    """
    Plan replacing a repeated class combination with one semantic class.

    `target_file` is the stylesheet the caller already resolved to receive the rule.
    """
    validate_class_name(new_class_name)
    _check_target(target_file)
    _check_group(group, 'class')
    # first occurrence's text, as written, not the sorted key
    css_rule = create_css_rule(new_class_name, group.occurrences[0].raw_value)
    plan = RefactorPlan(new_class_name, css_rule, _edits(group, new_class_name), target_file)
    logger.info(f"Planned .{new_class_name} for {group.count} occurrences of '{group.key}'")
    return plan


def plan_inline_style_extraction(group: DuplicateGroup, new_class_name: str,
                                 target_file: str) -> RefactorPlan:
    """Plan moving a repeated inline style object into a class rule."""
    validate_class_name(new_class_name)
    _check_target(target_file)
    _check_group(group, 'style')
    css_rule = create_declaration_rule(new_class_name, group.key)
    plan = RefactorPlan(new_class_name, css_rule, _edits(group, new_class_name), target_file)
    logger.info(f"Planned .{new_class_name} for {group.count} inline styles '{group.key}'")
    return plan
