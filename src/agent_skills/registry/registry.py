"""
Skill Registry Service

Read-only, name-keyed access to skill and plugin metadata, and read-through
access to the skill documents on disk.

The registry wraps a SkillCatalog passed in by the caller. A process-wide
default built from the configured catalog is available via get_skill_registry().
"""

import logging
import os
from typing import Any, Dict, List, Optional

from agent_skills.config import get_registry_config
from agent_skills.registry.config_schema import (
    PackageMetadata,
    PluginDefinition,
    SkillCatalog,
    SkillDefinition,
)
from agent_skills.registry.frontmatter import FrontmatterError, parse_frontmatter
from agent_skills.registry.lookup import Lookup
from agent_skills.registry.validator import load_catalog

logger = logging.getLogger(__name__)


def _read_text(key: str, path: str) -> Lookup[str]:
    """Read a UTF-8 file exactly as stored (no newline translation)"""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return Lookup.hit(key, f.read(), path=path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.debug(f"[@registry] Failed to read {path}: {e}")
        return Lookup.failed(key, path, e)


class SkillRegistry:
    """
    Skill Registry

    Every keyed accessor comes in two flavours:
    - lookup_* / load_*: return a Lookup telling not_found from read_error
    - get_* / read_*: return the value or None
    """

    def __init__(self, catalog: SkillCatalog):
        self._catalog = catalog

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> 'SkillRegistry':
        """
        Build a registry from the configured catalog file.

        Raises:
            CatalogValidationError: If the catalog is missing or invalid
        """
        config = config or get_registry_config()
        catalog = load_catalog(
            config['CATALOG_PATH'],
            config['SKILLS_DIR'],
            strict=config.get('STRICT', False)
        )
        return cls(catalog)

    @property
    def catalog(self) -> SkillCatalog:
        return self._catalog

    @property
    def metadata(self) -> PackageMetadata:
        return self._catalog.metadata

    def get_skills_path(self) -> str:
        """Absolute path of the skills directory"""
        return self._catalog.skills_dir

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def list_skills(self) -> List[str]:
        """All skill keys, in definition order"""
        return list(self._catalog.skills)

    def lookup_skill(self, skill_name: str) -> Lookup[SkillDefinition]:
        skill = self._catalog.skills.get(skill_name)
        if skill is None:
            return Lookup.missing(skill_name)
        return Lookup.hit(skill_name, skill, path=skill.path)

    def get_skill(self, skill_name: str) -> Optional[SkillDefinition]:
        """
        Get skill metadata.

        Args:
            skill_name: Skill key (e.g., 'dapp-builder')

        Returns:
            SkillDefinition or None if not found
        """
        return self.lookup_skill(skill_name).value

    def get_skill_path(self, skill_name: str) -> Optional[str]:
        """Path of the skill's entry file, or None if the skill is unknown. No filesystem access."""
        skill = self.get_skill(skill_name)
        if skill is None:
            return None
        return skill.entry_path

    def load_skill(self, skill_name: str) -> Lookup[str]:
        """Read a skill's entry file"""
        skill_path = self.get_skill_path(skill_name)
        if skill_path is None:
            return Lookup.missing(skill_name)
        return _read_text(skill_name, skill_path)

    def read_skill(self, skill_name: str) -> Optional[str]:
        """Content of the entry file, or None if the skill is unknown or the file is unreadable"""
        return self.load_skill(skill_name).value

    def load_skill_frontmatter(self, skill_name: str) -> Lookup[Dict[str, Any]]:
        """
        Parse the YAML frontmatter of a skill's entry file.

        A malformed block is reported as a read_error carrying the FrontmatterError.
        """
        result = self.load_skill(skill_name)
        if not result.found:
            return result
        try:
            frontmatter, _ = parse_frontmatter(result.value)
        except FrontmatterError as e:
            logger.warning(f"[@registry] ⚠️ Bad frontmatter in {result.path}: {e}")
            return Lookup.failed(skill_name, result.path, e)
        return Lookup.hit(skill_name, frontmatter, path=result.path)

    # ------------------------------------------------------------------
    # References
    # ------------------------------------------------------------------

    def get_reference_paths(self, skill_name: str) -> List[str]:
        """
        Absolute paths of every reference file of a skill.

        Returns:
            Paths in catalog order; empty list if the skill is unknown
        """
        skill = self.get_skill(skill_name)
        if skill is None:
            return []
        return [os.path.join(skill.references_dir, ref) for ref in skill.references]

    def load_reference(self, skill_name: str, reference_name: str) -> Lookup[str]:
        """
        Read a file from a skill's references/ directory.

        Any file in that directory can be read, listed in the catalog or not.
        Names resolving outside the directory are not_found.
        """
        skill = self.get_skill(skill_name)
        if skill is None:
            return Lookup.missing(skill_name)

        references_dir = os.path.realpath(skill.references_dir)
        ref_path = os.path.join(skill.references_dir, reference_name)
        try:
            inside = os.path.commonpath([references_dir, os.path.realpath(ref_path)]) == references_dir
        except ValueError as e:
            # embedded NUL bytes, mixed drives
            logger.warning(f"[@registry] ⚠️ Invalid reference name {reference_name!r}: {e}")
            return Lookup.missing(skill_name)
        if not inside:
            logger.warning(f"[@registry] ⚠️ Reference '{reference_name}' escapes {skill.references_dir}")
            return Lookup.missing(skill_name)

        return _read_text(skill_name, ref_path)

    def read_reference(self, skill_name: str, reference_name: str) -> Optional[str]:
        """
        Read a specific reference file.

        Args:
            skill_name: Skill key
            reference_name: File name (e.g., 'contract-patterns.md')

        Returns:
            File content or None if not found
        """
        return self.load_reference(skill_name, reference_name).value

    # ------------------------------------------------------------------
    # Plugins
    # ------------------------------------------------------------------

    def list_plugins(self) -> List[str]:
        """All plugin keys, in definition order"""
        return list(self._catalog.plugins)

    def lookup_plugin(self, plugin_name: str) -> Lookup[PluginDefinition]:
        plugin = self._catalog.plugins.get(plugin_name)
        if plugin is None:
            return Lookup.missing(plugin_name)
        return Lookup.hit(plugin_name, plugin)

    def get_plugin(self, plugin_name: str) -> Optional[PluginDefinition]:
        return self.lookup_plugin(plugin_name).value

    def get_plugin_skills(self, plugin_name: str) -> List[SkillDefinition]:
        """
        Skill records bundled by a plugin.

        Unknown skill names are dropped (they are reported when the catalog
        is loaded). Returns an empty list if the plugin is unknown.
        """
        plugin = self.get_plugin(plugin_name)
        if plugin is None:
            return []

        skills = []
        for name in plugin.skills:
            skill = self._catalog.skills.get(name)
            if skill is None:
                logger.debug(f"[@registry] Plugin '{plugin_name}' skips unknown skill '{name}'")
                continue
            skills.append(skill)
        return skills


# Global instance
_skill_registry: Optional[SkillRegistry] = None


def get_skill_registry() -> SkillRegistry:
    """Get or create the default skill registry"""
    global _skill_registry
    if _skill_registry is None:
        _skill_registry = SkillRegistry.from_config()
    return _skill_registry


def reload_skill_registry() -> SkillRegistry:
    """Rebuild the default registry from the configured catalog (for development/hot-reload)"""
    global _skill_registry
    _skill_registry = SkillRegistry.from_config()
    return _skill_registry
