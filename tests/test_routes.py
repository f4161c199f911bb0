"""
Test Skill Registry REST API Routes
"""

import pytest

from agent_skills.app import create_app
from agent_skills.routes import EXTENSION_KEY


@pytest.fixture
def client(registry):
    app = create_app(registry)
    app.config['TESTING'] = True
    return app.test_client()


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok', 'name': 'test-skills', 'version': '0.1.0'}


def test_list_skills(client):
    data = client.get('/skills').get_json()
    assert data['count'] == 4
    assert [s['key'] for s in data['skills']] == ['dapp-builder', 'pr-creation', 'systematic-debugging', 'no-files']
    assert data['skills'][0]['reference_count'] == 2


def test_get_skill(client, registry):
    response = client.get('/skills/dapp-builder')
    data = response.get_json()

    assert response.status_code == 200
    assert data['name'] == 'freenet-dapp-builder'
    assert data['entry_path'] == registry.get_skill_path('dapp-builder')


def test_get_unknown_skill(client):
    response = client.get('/skills/nonexistent')
    assert response.status_code == 404
    assert 'not found' in response.get_json()['error']


def test_skill_content(client, registry):
    response = client.get('/skills/dapp-builder/content')
    assert response.status_code == 200
    assert response.mimetype == 'text/markdown'
    assert response.get_data(as_text=True) == registry.read_skill('dapp-builder')


def test_skill_content_not_found_vs_read_error(client):
    """404 for unknown skills, 500 when the file is unreadable"""
    assert client.get('/skills/nonexistent/content').status_code == 404

    response = client.get('/skills/no-files/content')
    assert response.status_code == 500
    assert response.get_json()['path'].endswith('SKILL.md')


def test_list_references(client):
    data = client.get('/skills/dapp-builder/references').get_json()
    assert [r['name'] for r in data['references']] == ['contract-patterns.md', 'ui-patterns.md']
    assert client.get('/skills/nonexistent/references').status_code == 404


def test_get_reference(client):
    response = client.get('/skills/dapp-builder/references/ui-patterns.md')
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "# UI ✓\n"

    assert client.get('/skills/dapp-builder/references/missing.md').status_code == 500
    assert client.get('/skills/nonexistent/references/ui-patterns.md').status_code == 404


def test_reference_with_nul_byte_returns_json_404(client):
    response = client.get('/skills/dapp-builder/references/a%00b.md')
    assert response.status_code == 404
    assert response.is_json
    assert 'not found' in response.get_json()['error']


def test_list_plugins(client):
    data = client.get('/plugins').get_json()
    assert [p['key'] for p in data['plugins']] == ['freenet-dapp-builder', 'freenet-core-dev', 'broken-bundle']


def test_get_plugin(client):
    assert client.get('/plugins/freenet-core-dev').get_json()['skills'] == ['pr-creation', 'systematic-debugging']
    assert client.get('/plugins/nonexistent').status_code == 404


def test_plugin_skills_report_missing(client):
    data = client.get('/plugins/broken-bundle/skills').get_json()
    assert [s['name'] for s in data['skills']] == ['freenet-pr-creation', 'freenet-systematic-debugging']
    assert data['missing'] == ['renamed-skill']
    assert data['count'] == 2


def test_reload(client, monkeypatch, catalog_file, skills_dir):
    monkeypatch.setenv('AGENT_SKILLS_CATALOG', catalog_file)
    monkeypatch.setenv('AGENT_SKILLS_DIR', skills_dir)
    monkeypatch.setenv('AGENT_SKILLS_STRICT', 'false')

    response = client.post('/skills/reload')
    assert response.status_code == 200
    assert response.get_json()['skill_count'] == 4


def test_reload_invalid_catalog_keeps_registry(client, registry, monkeypatch, tmp_path):
    bad = tmp_path / 'bad.yaml'
    bad.write_text("metadata: {}\n", encoding='utf-8')
    monkeypatch.setenv('AGENT_SKILLS_CATALOG', str(bad))

    response = client.post('/skills/reload')
    assert response.status_code == 500
    assert client.application.extensions[EXTENSION_KEY] is registry
