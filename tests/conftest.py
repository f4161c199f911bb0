"""
Shared fixtures for the skill registry tests.

Builds a small skills tree in a temporary directory so tests never depend
on the bundled documents.
"""

import os
import sys

import pytest

# Make src/ importable without an install
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
src_dir = os.path.join(project_root, 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from agent_skills.registry import SkillRegistry, validate_catalog_yaml  # noqa: E402

CATALOG_YAML = """
metadata:
  name: test-skills
  description: Skills used by the test-suite
  version: 0.1.0
  author: tests
  license: MIT

skills:
  dapp-builder:
    name: freenet-dapp-builder
    description: Build decentralized applications
    references:
      - contract-patterns.md
      - ui-patterns.md
  pr-creation:
    name: freenet-pr-creation
    description: PR guidelines
  systematic-debugging:
    name: freenet-systematic-debugging
    description: Debugging methodology
  no-files:
    name: freenet-no-files
    description: Registered but nothing on disk

plugins:
  freenet-dapp-builder:
    name: freenet-dapp-builder
    description: dApp bundle
    skills: [dapp-builder]
  freenet-core-dev:
    name: freenet-core-dev
    description: Core development bundle
    skills: [pr-creation, systematic-debugging]
  broken-bundle:
    name: broken-bundle
    description: Lists a skill that does not exist
    skills: [pr-creation, renamed-skill, systematic-debugging]
"""

DAPP_SKILL_MD = """---
name: freenet-dapp-builder
description: Build decentralized applications
---

# dApp Builder
"""


def _write(path, content):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)


@pytest.fixture
def skills_dir(tmp_path):
    """Skills tree matching CATALOG_YAML (no-files has no directory)"""
    root = tmp_path / 'skills'
    _write(str(root / 'dapp-builder' / 'SKILL.md'), DAPP_SKILL_MD)
    _write(str(root / 'dapp-builder' / 'references' / 'contract-patterns.md'), "# Contracts\r\nmerge rules\r\n")
    _write(str(root / 'dapp-builder' / 'references' / 'ui-patterns.md'), "# UI ✓\n")
    _write(str(root / 'dapp-builder' / 'references' / 'unlisted.md'), "# Not in the catalog\n")
    _write(str(root / 'pr-creation' / 'SKILL.md'), "# PR creation\n")
    _write(str(root / 'systematic-debugging' / 'SKILL.md'), "# Debugging\n")
    _write(str(root / 'secret.txt'), "outside references\n")
    return str(root)


@pytest.fixture
def catalog_yaml():
    return CATALOG_YAML


@pytest.fixture
def catalog(skills_dir):
    return validate_catalog_yaml(CATALOG_YAML, skills_dir)


@pytest.fixture
def registry(catalog):
    return SkillRegistry(catalog)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / 'catalog.yaml'
    path.write_text(CATALOG_YAML, encoding='utf-8')
    return str(path)
