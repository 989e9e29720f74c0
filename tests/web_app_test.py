import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from stylelens.config import AnalysisConfig
from tailwind.classifier import UtilityClassifier
from web.app import create_app

COMPONENTS = [
    {'fileId': 'src/A.jsx', 'text': 'export const A = () => <div className="card shadow-box" />;\n'},
    {'fileId': 'src/B.vue', 'text': '<template>\n  <div class="shadow-box card"></div>\n</template>\n'},
]
STYLESHEETS = [{'fileId': 'src/index.css', 'text': '.card { }'}]


@pytest.fixture
def client():
    app = create_app(AnalysisConfig(classifier=UtilityClassifier({'flex'})))
    app.config['TESTING'] = True
    return app.test_client()


def test_analyze(client):
    response = client.post('/api/analyze', json={'components': COMPONENTS, 'stylesheets': STYLESHEETS})
    assert response.status_code == 200
    data = response.get_json()
    assert data['duplicates'][0]['classString'] == 'card shadow-box'
    assert data['duplicates'][0]['count'] == 2
    assert {record['className'] for record in data['undefinedClasses']} == {'shadow-box'}


def test_analyze_rejects_unknown_dialect(client):
    response = client.post('/api/analyze', json={'components': [{'fileId': 'a.py', 'text': ''}]})
    assert response.status_code == 400
    assert 'error' in response.get_json()


@pytest.mark.parametrize('payload', [
    {'components': ['x']},
    {'stylesheets': [42]},
    {'components': 'a.vue'},
])
def test_analyze_rejects_non_object_documents(client, payload):
    response = client.post('/api/analyze', json=payload)
    assert response.status_code == 400
    assert 'must be a list of objects' in response.get_json()['error']


def test_analyze_rejects_non_json(client):
    response = client.post('/api/analyze', data='nope')
    assert response.status_code == 400


def test_plan(client):
    response = client.post('/api/plan', json={
        'components': COMPONENTS, 'stylesheets': STYLESHEETS,
        'key': 'card shadow-box', 'name': 'panel', 'kind': 'class', 'target': 'src/index.css',
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data['targetFile'] == 'src/index.css'
    assert [edit['replacement'] for edit in data['edits']] == ['className="panel"', 'class="panel"']


def test_plan_invalid_name(client):
    response = client.post('/api/plan', json={
        'components': COMPONENTS, 'key': 'card shadow-box', 'name': 'Panel!', 'target': 'src/index.css',
    })
    assert response.status_code == 400


def test_plan_requires_target(client):
    response = client.post('/api/plan', json={
        'components': COMPONENTS, 'key': 'card shadow-box', 'name': 'panel',
    })
    assert response.status_code == 400


def test_plan_unknown_group(client):
    response = client.post('/api/plan', json={
        'components': COMPONENTS, 'key': 'nothing', 'name': 'panel', 'target': 'src/index.css',
    })
    assert response.status_code == 404
