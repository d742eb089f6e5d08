"""Unit tests for core/parse.py"""

import pytest

from mdindex.core.models import new_item
from mdindex.core.parse import extract_blocks, populate_blocks, split_frontmatter


def test_split_frontmatter_with_yaml():
    """split_frontmatter extracts YAML header and returns body."""
    fm, body = split_frontmatter("---\ntitle: Hello\n---\n# Body\n")
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_split_frontmatter_no_frontmatter():
    """split_frontmatter returns empty dict and full text when no header."""
    text = "# No frontmatter\n"
    assert split_frontmatter(text) == ({}, text)


def test_split_frontmatter_invalid_yaml():
    """Malformed YAML frontmatter raises ValueError."""
    with pytest.raises(ValueError, match="Invalid YAML frontmatter"):
        split_frontmatter("---\nkey: [unclosed\n---\nbody\n")


def test_split_frontmatter_non_mapping():
    """A YAML list is not valid frontmatter."""
    with pytest.raises(ValueError, match="expected a mapping"):
        split_frontmatter("---\n- a\n- b\n---\nbody\n")


def test_extract_blocks_from_markdown_body():
    """title and description fall back to the first heading and paragraph."""
    blocks = dict(extract_blocks("# Alpha\n\nFirst paragraph.\n\nSecond.\n"))
    assert blocks["title"] == "Alpha"
    assert blocks["description"] == "First paragraph."
    assert blocks["content"] == "# Alpha\n\nFirst paragraph.\n\nSecond."


def test_extract_blocks_frontmatter_wins():
    """Frontmatter title/description override the body and are not duplicated."""
    text = "---\ntitle: From FM\ndescription: Short\nauthor: Ann\n---\n# Body Title\n\nBody text.\n"
    pairs = extract_blocks(text)
    names = [name for name, _ in pairs]
    assert names == ["author", "title", "description", "content"]
    blocks = dict(pairs)
    assert blocks["title"] == "From FM"
    assert blocks["description"] == "Short"
    assert blocks["content"] == "# Body Title\n\nBody text."


def test_extract_blocks_lists_are_joined():
    """List-valued frontmatter becomes a comma-separated block."""
    blocks = dict(extract_blocks("---\ntags: [x, y]\n---\ntext\n"))
    assert blocks["tags"] == "x, y"


def test_extract_blocks_nested_paragraph_ignored():
    """Only top-level paragraphs are used for the description."""
    blocks = dict(extract_blocks("# T\n\n- in a list\n\nOutside.\n"))
    assert blocks["description"] == "Outside."


def test_extract_blocks_empty_document():
    """An empty source still yields the standard blocks, with empty values."""
    assert extract_blocks("") == [("title", ""), ("description", ""), ("content", "")]


def test_populate_blocks_attaches_to_item(tmp_path):
    """populate_blocks reads the source and blocks are case-insensitively reachable."""
    src = tmp_path / "document.md"
    src.write_text("---\nTags: [a]\n---\n# Guide\n\nIntro.\n", encoding="utf-8")
    item = populate_blocks(new_item(str(src)))
    assert item.get_block_value("tags") == "a"
    assert item.get_block_value("TITLE") == "Guide"
    assert item.get_block_value("description") == "Intro."
