#!/usr/bin/env python3
"""
StyleLens
Command line entry point: analyze a project for duplicated and undefined styling, or plan
the refactor of one duplicate group.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from stylelens.aggregator import analyze
from stylelens.config import AnalysisConfig
from stylelens.errors import InvalidNameError, NoDefinitionTarget
from stylelens.planner import plan_inline_style_extraction, plan_refactor
from utils import file_utils

logger = logging.getLogger('stylelens')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='stylelens', description=__doc__.strip().splitlines()[0])
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    def add_common(sub):
        sub.add_argument('path', type=Path, help='project root')
        sub.add_argument('--vocabulary', type=Path, default=None,
                         help='utility vocabulary JSON ({"classes": [...]})')
        sub.add_argument('--workers', type=int, default=1, help='parallel extraction workers')
        sub.add_argument('--css-mode', choices=('regex', 'selectors'), default='regex',
                         help='how stylesheets are scanned for class definitions')

    add_common(subparsers.add_parser('analyze', help='print the analysis report as JSON'))
    plan = subparsers.add_parser('plan', help='print a refactor plan for one duplicate group')
    add_common(plan)
    plan.add_argument('--key', required=True, help='normalized key of the duplicate group')
    plan.add_argument('--name', required=True, help='new class name')
    plan.add_argument('--inline', action='store_true', help='the key is an inline style group')
    return parser


def run_analysis(args):
    config = AnalysisConfig.from_vocabulary_file(args.vocabulary, max_workers=args.workers,
                                                 css_scan_mode=args.css_mode)
    files = file_utils.collect_files(args.path)
    components = file_utils.load_component_documents(files['components'], args.path)
    stylesheets = file_utils.load_stylesheet_documents(files['stylesheets'], args.path)
    return analyze(components, stylesheets, config)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    report = run_analysis(args)
    if args.command == 'analyze':
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    kind = 'style' if args.inline else 'class'
    group = report.find_group(args.key, kind)
    if group is None:
        print(f"No duplicate {kind} group with key {args.key!r}", file=sys.stderr)
        return 2
    try:
        target = file_utils.find_target_stylesheet(args.path)
        target_id = file_utils.file_id(target, file_utils.normalize_path(args.path))
        planner = plan_inline_style_extraction if args.inline else plan_refactor
        plan = planner(group, args.name, target_file=target_id)
    except (InvalidNameError, NoDefinitionTarget) as e:
        print(str(e), file=sys.stderr)
        return 2
    print(json.dumps(plan.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
