"""
Test lookup results and frontmatter parsing
"""

import pytest

from agent_skills.registry import FrontmatterError, Lookup, LookupStatus, parse_frontmatter


def test_lookup_hit():
    result = Lookup.hit('dapp-builder', 'content', path='/x/SKILL.md')
    assert result.found
    assert result.status == LookupStatus.FOUND
    assert result.unwrap_or('default') == 'content'
    assert bool(result)


def test_lookup_missing():
    result = Lookup.missing('nonexistent')
    assert result.not_found
    assert not result
    assert result.value is None
    assert result.unwrap_or('default') == 'default'


def test_lookup_failed_keeps_cause():
    error = FileNotFoundError(2, 'No such file')
    result = Lookup.failed('dapp-builder', '/x/SKILL.md', error)

    assert result.read_error
    assert result.error is error
    assert result.path == '/x/SKILL.md'
    assert result.unwrap_or() is None


def test_status_values():
    assert LookupStatus.NOT_FOUND.value == 'not_found'
    assert LookupStatus.READ_ERROR == 'read_error'


def test_parse_frontmatter():
    meta, body = parse_frontmatter("---\nname: demo\ndescription: A demo\n---\n# Body\n")
    assert meta == {'name': 'demo', 'description': 'A demo'}
    assert body == "# Body\n"


def test_parse_without_frontmatter():
    text = "# Just a document\n---\nnot frontmatter\n"
    assert parse_frontmatter(text) == ({}, text)


def test_parse_empty_frontmatter():
    assert parse_frontmatter("---\n---\nbody") == ({}, "body")


def test_parse_frontmatter_after_byte_order_mark():
    meta, body = parse_frontmatter("\ufeff---\nname: demo\n---\nbody")
    assert meta == {'name': 'demo'}
    assert body == "body"

    text = "\ufeff# No frontmatter\n"
    assert parse_frontmatter(text) == ({}, text)


def test_parse_frontmatter_errors():
    with pytest.raises(FrontmatterError):
        parse_frontmatter("---\nname: demo\n")

    with pytest.raises(FrontmatterError):
        parse_frontmatter("---\n- a\n- b\n---\n")

    with pytest.raises(FrontmatterError):
        parse_frontmatter("---\nname: [unclosed\n---\n")
