"""
Web Interface for Style Analysis
JSON API over the analysis engine: hosts post document contents, the API returns
reports and refactor plans.
"""

import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, jsonify, request

from stylelens.aggregator import analyze
from stylelens.config import AnalysisConfig
from stylelens.errors import InvalidNameError
from stylelens.models import ComponentDocument, Dialect, StylesheetDocument
from stylelens.planner import plan_inline_style_extraction, plan_refactor

logger = logging.getLogger(__name__)


class RequestError(Exception):
    pass


def _document_items(payload, key):
    items = payload.get(key, [])
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise RequestError(f"'{key}' must be a list of objects")
    return items


def parse_documents(payload):
    """Build documents from `{components: [{fileId, text}], stylesheets: [...]}`."""
    if not isinstance(payload, dict):
        raise RequestError('Request body must be a JSON object')
    components = []
    for item in _document_items(payload, 'components'):
        file_id = item.get('fileId')
        dialect = Dialect.from_path(file_id or '')
        if dialect is None:
            raise RequestError(f"Cannot infer dialect for {file_id!r}")
        components.append(ComponentDocument(file_id, dialect, item.get('text'),
                                            read_error=item.get('readError')))
    stylesheets = [
        StylesheetDocument(item.get('fileId'), item.get('text'), read_error=item.get('readError'))
        for item in _document_items(payload, 'stylesheets')
    ]
    return components, stylesheets


def create_app(config: AnalysisConfig = None) -> Flask:
    app = Flask(__name__)
    app.config['ANALYSIS_CONFIG'] = config or AnalysisConfig.from_vocabulary_file()

    @app.errorhandler(RequestError)
    def handle_request_error(e):
        return jsonify({'error': str(e)}), 400

    @app.route('/api/analyze', methods=['POST'])
    def analyze_documents():
        """Analyze posted documents and return the report."""
        components, stylesheets = parse_documents(request.get_json(silent=True))
        report = analyze(components, stylesheets, app.config['ANALYSIS_CONFIG'])
        return jsonify(report.to_dict())

    @app.route('/api/plan', methods=['POST'])
    def plan_documents():
        """Analyze posted documents, then plan the refactor of one duplicate group."""
        payload = request.get_json(silent=True)
        components, stylesheets = parse_documents(payload)
        target = payload.get('target')
        if not target:
            return jsonify({'error': 'A target stylesheet is required'}), 400
        kind = payload.get('kind', 'class')
        if kind not in ('class', 'style'):
            raise RequestError(f"Unknown group kind {kind!r}")

        report = analyze(components, stylesheets, app.config['ANALYSIS_CONFIG'])
        group = report.find_group(payload.get('key', ''), kind)
        if group is None:
            return jsonify({'error': f"No duplicate {kind} group with key {payload.get('key')!r}"}), 404
        planner = plan_refactor if kind == 'class' else plan_inline_style_extraction
        try:
            plan = planner(group, payload.get('name', ''), target_file=target)
        except InvalidNameError as e:
            return jsonify({'error': str(e)}), 400
        return jsonify(plan.to_dict())

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True)
