"""
Frontmatter parsing for skill documents.

A skill entry file may start with a YAML block delimited by '---' lines:

    ---
    name: freenet-dapp-builder
    description: Build decentralized applications on Freenet
    ---
    # Body...
"""

from typing import Any, Dict, Tuple

import yaml

DELIMITER = '---'
BOM = '\ufeff'


class FrontmatterError(ValueError):
    """Raised when a frontmatter block is present but malformed"""
    pass


def parse_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a document into (frontmatter, body).

    Documents without a leading '---' line return ({}, text) unchanged.
    A leading byte order mark is ignored.

    Raises:
        FrontmatterError: If the block is unterminated, not valid YAML,
            or not a mapping
    """
    content = text[len(BOM):] if text.startswith(BOM) else text
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].strip() != DELIMITER:
        return {}, text

    for index in range(1, len(lines)):
        if lines[index].strip() == DELIMITER:
            break
    else:
        raise FrontmatterError("Frontmatter block is not terminated")

    block = ''.join(lines[1:index])
    body = ''.join(lines[index + 1:])

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid frontmatter YAML: {e}") from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError("Frontmatter must be a mapping")
    return data, body
