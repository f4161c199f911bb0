"""
Skill Registry System

This module provides skill catalog loading and lookup:
- Config Schema: Pydantic models for the catalog, skills and plugins
- Validator: YAML validation, consistency checks and export
- Lookup: Tagged results telling unknown keys from unreadable files
- Registry: Name-keyed access to metadata and skill documents
"""

from .config_schema import (
    PackageMetadata,
    SkillDefinition,
    PluginDefinition,
    SkillCatalog
)
from .lookup import Lookup, LookupStatus
from .frontmatter import parse_frontmatter, FrontmatterError
from .validator import (
    validate_catalog_yaml,
    validate_catalog_dict,
    load_catalog,
    export_catalog_yaml,
    find_dangling_plugin_skills,
    get_catalog_problems,
    CatalogValidationError
)
from .registry import SkillRegistry, get_skill_registry, reload_skill_registry

__all__ = [
    'PackageMetadata',
    'SkillDefinition',
    'PluginDefinition',
    'SkillCatalog',
    'Lookup',
    'LookupStatus',
    'parse_frontmatter',
    'FrontmatterError',
    'validate_catalog_yaml',
    'validate_catalog_dict',
    'load_catalog',
    'export_catalog_yaml',
    'find_dangling_plugin_skills',
    'get_catalog_problems',
    'CatalogValidationError',
    'SkillRegistry',
    'get_skill_registry',
    'reload_skill_registry'
]
