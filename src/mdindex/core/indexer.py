"""Repository scanning: build the item tree bottom-up from a directory on disk"""

from pathlib import Path
from typing import Optional

import structlog

from mdindex.config import Settings
from mdindex.core.models import MARKER_FILES, RENDERED_FILENAME, File, Item, new_item
from mdindex.core.parse import populate_blocks
from mdindex.errors import UnknownItemTypeError


logger = structlog.get_logger()

MD_EXTENSIONS = {'.md'}


def _ignored(path: Path, settings: Settings) -> bool:
    return path.name.startswith('.') or path.name in settings.ignore


def find_item_source(files: list[Path]) -> Optional[Path]:
    """Pick the file that defines a directory's item.

    Marker files win in marker-table order; otherwise the first markdown file
    by name, which will classify as unknown.
    """
    by_name = {p.name.lower(): p for p in files}
    for marker in MARKER_FILES:
        if marker in by_name:
            return by_name[marker]
    markdown = sorted(p for p in files if p.suffix.lower() in MD_EXTENSIONS)
    return markdown[0] if markdown else None


def _index_dir(directory: Path, settings: Settings) -> list[Item]:
    """Return the items found in directory: its own item, or its promoted children."""
    entries = sorted(p for p in directory.iterdir() if not _ignored(p, settings))
    files = [p for p in entries if p.is_file()]

    children: list[Item] = []
    # Symlinked directories are not followed.
    for sub in (p for p in entries if p.is_dir() and not p.is_symlink()):
        children.extend(_index_dir(sub, settings))

    source = find_item_source(files)
    if source is None:
        return children

    aux = [
        File(path=str(p)) for p in files
        if p != source and p.name.lower() != RENDERED_FILENAME
    ]
    try:
        item = new_item(str(source), aux, children)
    except UnknownItemTypeError as e:
        logger.warning("indexer.unknown_item", path=e.path, skipped=settings.skip_unknown)
        if settings.skip_unknown:
            return children
        item = e.item

    if settings.extract_blocks:
        try:
            populate_blocks(item, settings.parser_config)
        except (OSError, ValueError) as e:
            logger.warning("indexer.blocks_failed", path=item.path, error=str(e))

    logger.debug("indexer.item", path=item.path, type=item.type.value, children=len(children))
    return [item]


def index_top_level(root: Path, settings: Settings = None) -> list[Item]:
    """Scan root recursively and return its top-level items.

    This is a single item when root (or the only populated branch) has an
    item source, and several when root is marker-less with multiple branches.
    """
    settings = settings or Settings()
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    return _index_dir(root, settings)


def index_repository(root: Path, settings: Settings = None) -> Optional[Item]:
    """Scan root recursively and return the root item of the repository tree.

    Returns None when no item source is found. When root has no item of its
    own and several top-level items are found, the first is returned.
    """
    items = index_top_level(root, settings)
    if not items:
        logger.info("indexer.empty", root=str(root))
        return None
    if len(items) > 1:
        logger.warning(
            "indexer.multiple_roots",
            root=str(root), kept=items[0].path, dropped=[i.path for i in items[1:]],
        )
    return items[0]
