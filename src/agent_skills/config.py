"""
Skill Registry Configuration

Environment variables (all optional, may be set in a .env file):
- AGENT_SKILLS_CATALOG: Path to the catalog YAML (default: bundled catalog.yaml)
- AGENT_SKILLS_DIR: Skills root directory (default: bundled skills/)
- AGENT_SKILLS_STRICT: 'true' to reject plugins naming unknown skills
- AGENT_SKILLS_LOG_LEVEL: Logging level for the CLI and server (default: INFO)
- AGENT_SKILLS_HOST / AGENT_SKILLS_PORT: HTTP server binding
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# Bundled defaults
DEFAULT_CATALOG_PATH = os.path.join(PACKAGE_DIR, 'catalog.yaml')
DEFAULT_SKILLS_DIR = os.path.join(PACKAGE_DIR, 'skills')
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 5110

TRUE_VALUES = ('true', '1', 'yes', 'on')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
DEFAULT_LOG_LEVEL = 'INFO'


def load_environment_variables(env_path: Optional[str] = None) -> Optional[str]:
    """
    Load a .env file into the environment.

    OS environment variables always take priority over the file.

    Returns:
        Path of the loaded file, or None if no file was found
    """
    if env_path is None:
        env_path = os.path.join(os.getcwd(), '.env')

    if not os.path.exists(env_path):
        logger.debug(f"[@config] No .env file at {env_path}")
        return None

    load_dotenv(env_path, override=False)
    logger.debug(f"[@config] Loaded environment from {env_path}")
    return env_path


def get_registry_config() -> Dict[str, Any]:
    """Snapshot of the registry configuration, read from the environment at call time"""
    port = os.getenv('AGENT_SKILLS_PORT', str(DEFAULT_PORT))
    try:
        port = int(port)
    except ValueError:
        logger.warning(f"[@config] Invalid AGENT_SKILLS_PORT={port!r}, using {DEFAULT_PORT}")
        port = DEFAULT_PORT

    log_level = os.getenv('AGENT_SKILLS_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        logger.warning(f"[@config] Invalid AGENT_SKILLS_LOG_LEVEL={log_level!r}, using {DEFAULT_LOG_LEVEL}")
        log_level = DEFAULT_LOG_LEVEL

    return {
        'CATALOG_PATH': os.getenv('AGENT_SKILLS_CATALOG') or DEFAULT_CATALOG_PATH,
        'SKILLS_DIR': os.getenv('AGENT_SKILLS_DIR') or DEFAULT_SKILLS_DIR,
        'STRICT': os.getenv('AGENT_SKILLS_STRICT', 'false').lower() in TRUE_VALUES,
        'LOG_LEVEL': log_level,
        'HOST': os.getenv('AGENT_SKILLS_HOST', DEFAULT_HOST),
        'PORT': port,
    }
