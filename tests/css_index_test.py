import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from stylelens.css_index import build_defined_class_set, scan_class_names, parse_class_selectors
from stylelens.models import StylesheetDocument

SAMPLE_CSS = """
/* .commented { } */
.card { padding: 1rem; }
.btn-primary:hover, a.link_text { margin: 0.5rem; }
@media (min-width: 600px) {
  .wide { display: block; }
}
ul li:not(.hidden) { color: red; }
"""


def test_regex_scan_over_matches():
    classes = scan_class_names(SAMPLE_CSS)
    assert {'card', 'btn-primary', 'link_text', 'wide', 'hidden'} <= classes
    # comments and decimal values are matched on purpose
    assert 'commented' in classes
    assert '5rem' in classes


def test_selector_scan_reads_selectors_only():
    classes = parse_class_selectors(SAMPLE_CSS)
    assert classes == {'card', 'btn-primary', 'link_text', 'wide', 'hidden'}


def test_build_defined_class_set_unions_documents():
    documents = [
        StylesheetDocument('a.css', '.card { }'),
        StylesheetDocument('b.css', '.btn { } .card:hover { }'),
    ]
    assert build_defined_class_set(documents) == {'card', 'btn'}


def test_read_failure_is_isolated():
    documents = [
        StylesheetDocument('broken.css', read_error='permission denied'),
        StylesheetDocument('ok.css', '.card { }'),
    ]
    assert build_defined_class_set(documents) == {'card'}


def test_selector_mode():
    documents = [StylesheetDocument('a.css', '/* .ghost */ .card { }')]
    assert build_defined_class_set(documents, mode='selectors') == {'card'}
    assert build_defined_class_set(documents) == {'ghost', 'card'}


def test_unknown_mode():
    with pytest.raises(ValueError):
        build_defined_class_set([], mode='strict')


def test_no_stylesheets():
    assert build_defined_class_set([]) == set()
