"""
Skill Registry REST API Routes

Provides read-only HTTP endpoints over the skill registry, plus a reload
endpoint for development. The registry is taken from
current_app.extensions['agent_skills'].
"""

import logging

from flask import Blueprint, Response, current_app, jsonify

from agent_skills.registry import CatalogValidationError, Lookup, SkillRegistry

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'agent_skills'

skills_bp = Blueprint('skills', __name__, url_prefix='/skills')
plugins_bp = Blueprint('plugins', __name__, url_prefix='/plugins')


def _registry() -> SkillRegistry:
    return current_app.extensions[EXTENSION_KEY]


def _skill_summary(key, skill):
    return {
        'key': key,
        'name': skill.name,
        'description': skill.description,
        'reference_count': len(skill.references)
    }


def _document_response(result: Lookup, what: str):
    """Markdown body when found, 404 for unknown skills, 500 for unreadable files"""
    if result.not_found:
        return jsonify({'error': f'{what} not found'}), 404
    if result.read_error:
        return jsonify({
            'error': f'Failed to read {what}: {result.error}',
            'path': result.path
        }), 500
    return Response(result.value, mimetype='text/markdown')


@skills_bp.route('', methods=['GET'])
def list_skills():
    """List all skills in catalog order"""
    registry = _registry()
    skills = [
        _skill_summary(key, registry.get_skill(key))
        for key in registry.list_skills()
    ]
    return jsonify({'skills': skills, 'count': len(skills)}), 200


@skills_bp.route('/reload', methods=['POST'])
def reload_skills():
    """
    Reload the catalog from disk.

    The new registry replaces the old one only if the catalog is valid.
    """
    try:
        registry = SkillRegistry.from_config()
    except CatalogValidationError as e:
        logger.error(f"[@skill_routes] ❌ Reload failed: {e}")
        return jsonify({'error': f'Failed to reload skills: {str(e)}'}), 500

    current_app.extensions[EXTENSION_KEY] = registry
    return jsonify({
        'message': 'Skills reloaded successfully',
        'skill_count': len(registry.list_skills()),
        'plugin_count': len(registry.list_plugins())
    }), 200


@skills_bp.route('/<skill_name>', methods=['GET'])
def get_skill(skill_name: str):
    """Get detailed information about a specific skill"""
    registry = _registry()
    skill = registry.get_skill(skill_name)

    if not skill:
        return jsonify({'error': f'Skill "{skill_name}" not found'}), 404

    return jsonify({
        'key': skill_name,
        **skill.to_dict(),
        'entry_path': registry.get_skill_path(skill_name)
    }), 200


@skills_bp.route('/<skill_name>/content', methods=['GET'])
def get_skill_content(skill_name: str):
    """Entry document of a skill"""
    result = _registry().load_skill(skill_name)
    return _document_response(result, f'Skill "{skill_name}"')


@skills_bp.route('/<skill_name>/references', methods=['GET'])
def list_references(skill_name: str):
    registry = _registry()
    skill = registry.get_skill(skill_name)

    if not skill:
        return jsonify({'error': f'Skill "{skill_name}" not found'}), 404

    references = [
        {'name': name, 'path': path}
        for name, path in zip(skill.references, registry.get_reference_paths(skill_name))
    ]
    return jsonify({'references': references, 'count': len(references)}), 200


@skills_bp.route('/<skill_name>/references/<path:reference_name>', methods=['GET'])
def get_reference(skill_name: str, reference_name: str):
    result = _registry().load_reference(skill_name, reference_name)
    if result.not_found and _registry().get_skill(skill_name):
        return jsonify({'error': f'Reference "{reference_name}" not found'}), 404
    return _document_response(result, f'Skill "{skill_name}"')


@plugins_bp.route('', methods=['GET'])
def list_plugins():
    """List all plugins in catalog order"""
    registry = _registry()
    plugins = []
    for key in registry.list_plugins():
        plugin = registry.get_plugin(key)
        plugins.append({
            'key': key,
            'name': plugin.name,
            'description': plugin.description,
            'skills': plugin.skills
        })
    return jsonify({'plugins': plugins, 'count': len(plugins)}), 200


@plugins_bp.route('/<plugin_name>', methods=['GET'])
def get_plugin(plugin_name: str):
    plugin = _registry().get_plugin(plugin_name)

    if not plugin:
        return jsonify({'error': f'Plugin "{plugin_name}" not found'}), 404

    return jsonify({'key': plugin_name, **plugin.to_dict()}), 200


@plugins_bp.route('/<plugin_name>/skills', methods=['GET'])
def get_plugin_skills(plugin_name: str):
    """
    Skills bundled by a plugin.

    Names missing from the catalog are reported under 'missing'.
    """
    registry = _registry()
    plugin = registry.get_plugin(plugin_name)

    if not plugin:
        return jsonify({'error': f'Plugin "{plugin_name}" not found'}), 404

    skills = registry.get_plugin_skills(plugin_name)
    missing = [name for name in plugin.skills if registry.get_skill(name) is None]
    return jsonify({
        'plugin': plugin_name,
        'skills': [skill.to_dict() for skill in skills],
        'missing': missing,
        'count': len(skills)
    }), 200
