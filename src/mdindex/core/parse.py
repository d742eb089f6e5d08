"""Frontmatter splitting and markdown-it block extraction for item sources"""

import re
from pathlib import Path
from typing import Any

import structlog
import yaml
from markdown_it import MarkdownIt

from mdindex.core.models import Item


logger = structlog.get_logger()

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
STANDARD_BLOCKS = ("title", "description", "content")


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def _block_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return "" if value is None else str(value)


def _first_inline(tokens: list, open_type: str) -> str:
    """Return the inline text following the first top-level `open_type` token."""
    for i, tok in enumerate(tokens):
        if tok.type == open_type and tok.level == 0 and i + 1 < len(tokens):
            return tokens[i + 1].content.strip()
    return ""


def extract_blocks(text: str, parser_config: str = "gfm-like") -> list[tuple[str, str]]:
    """Derive (name, value) block pairs from a markdown source.

    Frontmatter keys come first in file order, followed by the standard
    title, description and content blocks. A frontmatter title or description
    wins over the one found in the markdown body.
    """
    frontmatter, body = split_frontmatter(text)
    pairs = [
        (str(key), _block_text(value))
        for key, value in frontmatter.items()
        if str(key) and str(key).lower() not in STANDARD_BLOCKS and not isinstance(value, dict)
    ]
    tokens = _make_parser(parser_config).parse(body)

    title = _block_text(frontmatter.get("title")) or _first_inline(tokens, "heading_open")
    description = _block_text(frontmatter.get("description")) or _first_inline(tokens, "paragraph_open")
    pairs += [("title", title), ("description", description), ("content", body.strip())]
    return pairs


def populate_blocks(item: Item, parser_config: str = "gfm-like") -> Item:
    """Read the item's source file and attach the extracted blocks to it."""
    text = Path(item.path).read_text(encoding="utf-8")
    for name, value in extract_blocks(text, parser_config):
        item.add_block(name, value)
    logger.debug("parse.blocks_added", path=item.path, count=len(item.blocks))
    return item
