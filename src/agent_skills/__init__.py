"""
freenet-agent-skills

AI coding agent skills for Freenet development, with a registry exposing
skill and plugin metadata and the skill documents themselves.
"""

from .registry import (
    SkillRegistry,
    SkillCatalog,
    SkillDefinition,
    PluginDefinition,
    Lookup,
    LookupStatus,
    CatalogValidationError,
    get_skill_registry,
    reload_skill_registry
)

__version__ = '1.0.0'

__all__ = [
    'SkillRegistry',
    'SkillCatalog',
    'SkillDefinition',
    'PluginDefinition',
    'Lookup',
    'LookupStatus',
    'CatalogValidationError',
    'get_skill_registry',
    'reload_skill_registry'
]
