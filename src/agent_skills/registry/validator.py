"""
Catalog Validator

Validates catalog YAML and provides import/export functionality.
Includes plugin validation against the skills defined in the same catalog.
"""

import logging
import os
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from .config_schema import SkillCatalog

logger = logging.getLogger(__name__)


class CatalogValidationError(Exception):
    """Raised when the skill catalog is invalid"""
    pass


def _format_validation_error(e: ValidationError) -> str:
    errors = []
    for error in e.errors():
        field = " -> ".join(str(loc) for loc in error['loc'])
        errors.append(f"{field}: {error['msg']}")
    return "Validation errors:\n" + "\n".join(errors)


def _resolve_skill_paths(data: Dict[str, Any], skills_dir: str) -> Dict[str, Any]:
    """Default each skill's path to its key and anchor relative paths at skills_dir"""
    skills = data.get('skills') or {}
    if not isinstance(skills, dict):
        raise CatalogValidationError("'skills' must be a mapping of skill key to definition")

    resolved = {}
    for key, skill in skills.items():
        if not isinstance(skill, dict):
            raise CatalogValidationError(f"Skill '{key}' must be a mapping")
        skill = dict(skill)
        skill_path = skill.get('path') or str(key)
        if not os.path.isabs(skill_path):
            skill_path = os.path.join(skills_dir, skill_path)
        skill['path'] = os.path.normpath(skill_path)
        resolved[key] = skill

    return {**data, 'skills': resolved}


def find_dangling_plugin_skills(catalog: SkillCatalog) -> Dict[str, List[str]]:
    """
    Find plugin entries that name skills missing from the catalog

    Returns:
        {plugin_key: [missing skill keys]} for every plugin with problems
    """
    dangling = {}
    for plugin_key, plugin in catalog.plugins.items():
        missing = [name for name in plugin.skills if name not in catalog.skills]
        if missing:
            dangling[plugin_key] = missing
    return dangling


def validate_catalog_dict(data: Dict[str, Any], skills_dir: str, strict: bool = False) -> SkillCatalog:
    """
    Validate catalog dictionary and return SkillCatalog

    Args:
        data: Parsed catalog content
        skills_dir: Root that relative skill paths are resolved against
        strict: Reject plugins naming unknown skills instead of warning

    Raises:
        CatalogValidationError: If the catalog is invalid
    """
    skills_dir = os.path.abspath(skills_dir)
    data = _resolve_skill_paths(data, skills_dir)

    try:
        catalog = SkillCatalog(skills_dir=skills_dir, **{k: v for k, v in data.items() if k != 'skills_dir'})
    except ValidationError as e:
        raise CatalogValidationError(_format_validation_error(e)) from e

    for plugin_key, missing in find_dangling_plugin_skills(catalog).items():
        warning = f"Plugin '{plugin_key}' lists unknown skills: {', '.join(missing)}"
        if strict:
            raise CatalogValidationError(warning)
        logger.warning(f"[@catalog_validator] ⚠️ {warning}")

    return catalog


def validate_catalog_yaml(yaml_content: str, skills_dir: str, strict: bool = False) -> SkillCatalog:
    """
    Validate catalog YAML and return SkillCatalog

    Args:
        yaml_content: YAML string content
        skills_dir: Root that relative skill paths are resolved against
        strict: Reject plugins naming unknown skills instead of warning

    Returns:
        Validated SkillCatalog object

    Raises:
        CatalogValidationError: If YAML is invalid
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise CatalogValidationError(f"Invalid YAML syntax: {str(e)}") from e

    if not isinstance(data, dict):
        raise CatalogValidationError("YAML must contain a dictionary")

    return validate_catalog_dict(data, skills_dir, strict=strict)


def load_catalog(catalog_path: str, skills_dir: str, strict: bool = False) -> SkillCatalog:
    """
    Load and validate a catalog file

    Raises:
        CatalogValidationError: If the file cannot be read or is invalid
    """
    try:
        with open(catalog_path, 'r', encoding='utf-8') as f:
            yaml_content = f.read()
    except OSError as e:
        raise CatalogValidationError(f"Cannot read catalog {catalog_path}: {e}") from e

    catalog = validate_catalog_yaml(yaml_content, skills_dir, strict=strict)

    logger.info(f"[@catalog_validator] Loading catalog {catalog.metadata.name} {catalog.metadata.version} from {catalog_path}")
    for key, skill in catalog.skills.items():
        logger.info(f"[@catalog_validator]   📄 {key:25} {len(skill.references)} references")
    logger.info(f"[@catalog_validator] Total: {len(catalog.skills)} skills, {len(catalog.plugins)} plugins")

    return catalog


def get_catalog_problems(catalog: SkillCatalog) -> List[str]:
    """
    Audit the files a catalog points at

    Returns:
        List of problem descriptions (empty if everything resolves)
    """
    problems = []

    for plugin_key, missing in find_dangling_plugin_skills(catalog).items():
        for name in missing:
            problems.append(f"plugin '{plugin_key}': unknown skill '{name}'")

    for key, skill in catalog.skills.items():
        if not os.path.isfile(skill.entry_path):
            problems.append(f"skill '{key}': missing entry file {skill.entry_path}")
        for ref in skill.references:
            ref_path = os.path.join(skill.references_dir, ref)
            if not os.path.isfile(ref_path):
                problems.append(f"skill '{key}': missing reference {ref_path}")

    return problems


def export_catalog_yaml(catalog: SkillCatalog) -> str:
    """
    Export catalog to YAML string

    Skill paths under the skills root are written relative to it, so the
    output can be re-imported against a different checkout.
    """
    skills = {}
    for key, skill in catalog.skills.items():
        data = skill.to_dict()
        relative = os.path.relpath(skill.path, catalog.skills_dir)
        if not relative.startswith('..'):
            data['path'] = relative
        skills[key] = data

    data = {
        'metadata': catalog.metadata.model_dump(exclude_none=True),
        'skills': skills,
        'plugins': {key: plugin.to_dict() for key, plugin in catalog.plugins.items()},
    }

    yaml_str = yaml.dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=80
    )

    header = f"""# Skill Catalog: {catalog.metadata.name}
# Version: {catalog.metadata.version}
# Author: {catalog.metadata.author or 'unknown'}
#
# Skill paths are relative to the skills directory.
#
---
"""

    return header + yaml_str
