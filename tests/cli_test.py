import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import main
from utils import file_utils
from stylelens.errors import NoDefinitionTarget, ReadError

BUTTON_JSX = 'export const Button = () => <button className="px-4 py-2 btn-ghost">Go</button>;\n'
LINK_TSX = 'export const Link = () => <a className="py-2 px-4 btn-ghost">Go</a>;\n'


@pytest.fixture
def project(tmp_path):
    (tmp_path / 'src').mkdir()
    (tmp_path / 'src' / 'Button.jsx').write_text(BUTTON_JSX, encoding='utf-8')
    (tmp_path / 'src' / 'Link.tsx').write_text(LINK_TSX, encoding='utf-8')
    (tmp_path / 'src' / 'index.css').write_text('@tailwind base;\n', encoding='utf-8')
    (tmp_path / 'node_modules').mkdir()
    (tmp_path / 'node_modules' / 'Dep.jsx').write_text(BUTTON_JSX, encoding='utf-8')
    return tmp_path


def test_collect_files(project):
    files = file_utils.collect_files(project)
    assert [path.name for path in files['components']] == ['Button.jsx', 'Link.tsx']
    assert [path.name for path in files['stylesheets']] == ['index.css']


def test_load_component_documents(project):
    files = file_utils.collect_files(project)
    documents = file_utils.load_component_documents(files['components'], project)
    assert [document.file_id for document in documents] == ['src/Button.jsx', 'src/Link.tsx']
    assert documents[0].text == BUTTON_JSX


def test_unreadable_document(project):
    missing = project / 'src' / 'Missing.vue'
    documents = file_utils.load_component_documents([missing], project)
    assert documents[0].read_error is not None
    assert documents[0].text is None


def test_read_document_text_raises_read_error(project):
    bad = project / 'src' / 'Bad.vue'
    bad.write_bytes(b'<template><div class="\xff"></div></template>')
    with pytest.raises(ReadError) as excinfo:
        file_utils.read_document_text(bad, 'src/Bad.vue')
    assert excinfo.value.file_id == 'src/Bad.vue'
    assert 'utf-8' in excinfo.value.message


def test_undecodable_stylesheet_keeps_read_error(project):
    bad = project / 'src' / 'bad.css'
    bad.write_bytes(b'.card { content: "\xff"; }')
    documents = file_utils.load_stylesheet_documents([bad], project)
    assert documents[0].file_id == 'src/bad.css'
    assert documents[0].text is None
    assert 'utf-8' in documents[0].read_error


def test_find_target_stylesheet(project):
    assert file_utils.find_target_stylesheet(project) == (project / 'src' / 'index.css').resolve()


def test_find_target_stylesheet_missing(tmp_path):
    with pytest.raises(NoDefinitionTarget):
        file_utils.find_target_stylesheet(tmp_path)


def test_analyze_command(project, capsys):
    assert main.main(['analyze', str(project)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['duplicates'][0]['classString'] == 'btn-ghost px-4 py-2'
    assert data['duplicates'][0]['count'] == 2
    # px-4 and py-2 come from the packaged vocabulary
    assert [record['className'] for record in data['undefinedClasses']] == ['btn-ghost', 'btn-ghost']


def test_plan_command(project, capsys):
    code = main.main(['plan', str(project), '--key', 'btn-ghost px-4 py-2', '--name', 'ghost-button'])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data['targetFile'] == 'src/index.css'
    assert data['cssRule'] == '\n.ghost-button {\n  @apply px-4 py-2 btn-ghost;\n}\n'
    assert len(data['edits']) == 2


def test_plan_command_invalid_name(project, capsys):
    assert main.main(['plan', str(project), '--key', 'btn-ghost px-4 py-2', '--name', 'Ghost']) == 2


def test_plan_command_unknown_key(project, capsys):
    assert main.main(['plan', str(project), '--key', 'nope', '--name', 'ghost']) == 2


def test_plan_command_without_stylesheet(project, capsys):
    (project / 'src' / 'index.css').unlink()
    assert main.main(['plan', str(project), '--key', 'btn-ghost px-4 py-2', '--name', 'ghost']) == 2
