"""
Skill Registry Server Application

Usage: agent-skills serve  (or: python -m agent_skills.app)

Environment Variables (optional, may be set in a .env file):
    AGENT_SKILLS_HOST - Interface to bind (default: 127.0.0.1)
    AGENT_SKILLS_PORT - Port for this server (default: 5110)
"""

import logging
from typing import Optional

from flask import Flask, jsonify

from agent_skills.config import get_registry_config, load_environment_variables
from agent_skills.registry import SkillRegistry
from agent_skills.routes import EXTENSION_KEY, plugins_bp, skills_bp

logger = logging.getLogger(__name__)


def create_app(registry: Optional[SkillRegistry] = None) -> Flask:
    """
    Create the Flask application.

    Args:
        registry: Registry to serve. Built from configuration when omitted.
    """
    app = Flask('agent-skills')

    if registry is None:
        registry = SkillRegistry.from_config()
    app.extensions[EXTENSION_KEY] = registry

    app.register_blueprint(skills_bp)
    app.register_blueprint(plugins_bp)

    @app.route('/health', methods=['GET'])
    def health():
        metadata = app.extensions[EXTENSION_KEY].metadata
        return jsonify({
            'status': 'ok',
            'name': metadata.name,
            'version': metadata.version
        }), 200

    logger.info(f"[@app] Serving {len(registry.list_skills())} skills, {len(registry.list_plugins())} plugins")
    return app


def main():
    load_environment_variables()
    config = get_registry_config()

    logging.basicConfig(
        level=config['LOG_LEVEL'],
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = create_app(SkillRegistry.from_config(config))
    app.run(host=config['HOST'], port=config['PORT'])


if __name__ == '__main__':
    main()
