"""
Skill Catalog Schema

Pydantic models defining the structure of the skill catalog.
The catalog is loaded from YAML and describes the package metadata,
every skill (entry document + reference documents) and the plugins
that bundle skills together.
"""

import os
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEY_PATTERN = re.compile(r"^[a-z0-9-]+$")


class PackageMetadata(BaseModel):
    """Package-level metadata"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Package name")
    description: str = Field(default="", description="What this package provides")
    version: str = Field(
        default="1.0.0",
        pattern=r"^\d+\.\d+\.\d+(-[a-z0-9]+)?$",
        description="Semantic version (e.g., 1.0.0, 2.1.0-beta)"
    )
    author: Optional[str] = Field(default=None, description="Creator/owner of the package")
    license: Optional[str] = Field(default=None, description="SPDX license identifier")


class SkillDefinition(BaseModel):
    """
    A single skill

    A skill is a directory holding one entry document (read first by the
    consuming agent) and optional reference documents under references/.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display identifier")
    description: str = Field(default="", description="Free-text summary")
    path: str = Field(..., min_length=1, description="Directory containing the skill's files")
    entry_file: str = Field(
        default="SKILL.md",
        min_length=1,
        description="Filename of the primary instruction document"
    )
    references: Tuple[str, ...] = Field(
        default=(),
        description="Reference file names, relative to <path>/references"
    )

    @field_validator('references')
    @classmethod
    def validate_references(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        for ref in v:
            if not ref or os.path.isabs(ref):
                raise ValueError(f"Reference must be a relative file name: {ref!r}")
            if '..' in ref.replace('\\', '/').split('/'):
                raise ValueError(f"Reference must stay inside references/: {ref!r}")
        return v

    @property
    def entry_path(self) -> str:
        return os.path.join(self.path, self.entry_file)

    @property
    def references_dir(self) -> str:
        return os.path.join(self.path, 'references')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return self.model_dump(mode='json', exclude_none=True)


class PluginDefinition(BaseModel):
    """A named bundle of skills, installed and activated together"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display identifier")
    description: str = Field(default="", description="Free-text summary")
    skills: Tuple[str, ...] = Field(
        default=(),
        description="Skill keys bundled by this plugin"
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', exclude_none=True)


class SkillCatalog(BaseModel):
    """
    Complete skill catalog

    Root model of catalog.yaml. Skill and plugin mappings keep the order
    in which they were defined.
    """
    model_config = ConfigDict(frozen=True)

    metadata: PackageMetadata
    skills_dir: str = Field(..., min_length=1, description="Absolute skills root")
    skills: Mapping[str, SkillDefinition] = Field(default_factory=dict, validate_default=True)
    plugins: Mapping[str, PluginDefinition] = Field(default_factory=dict, validate_default=True)

    @field_validator('skills', 'plugins')
    @classmethod
    def validate_keys(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        for key in v:
            if not KEY_PATTERN.match(key):
                raise ValueError(f"Key {key!r} must be lowercase letters, digits and hyphens")
        return MappingProxyType(dict(v))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (for YAML export)"""
        return {
            'metadata': self.metadata.model_dump(exclude_none=True),
            'skills_dir': self.skills_dir,
            'skills': {key: skill.to_dict() for key, skill in self.skills.items()},
            'plugins': {key: plugin.to_dict() for key, plugin in self.plugins.items()},
        }
