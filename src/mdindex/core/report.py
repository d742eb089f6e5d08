"""Tree consumers built on Item.walk: status rows and indented tree lines"""

from pydantic import BaseModel

from mdindex.core.models import Item, ItemType


class ItemStatus(BaseModel):
    """One row of the repository status report."""
    depth:         int
    type:          ItemType
    path:          str
    relative_path: str
    hash:          str
    rendered:      bool


def _depths(root: Item) -> dict[int, int]:
    """Map id(item) -> depth for every item under root."""
    depths = {id(root): 0}

    def visit(item: Item) -> None:
        for child in item.child_items:
            depths[id(child)] = depths[id(item)] + 1

    root.walk(visit)
    return depths


def collect_status(root: Item, base_path: str) -> list[ItemStatus]:
    """Return a status row per item in pre-order."""
    depths = _depths(root)
    rows: list[ItemStatus] = []

    def visit(item: Item) -> None:
        rows.append(ItemStatus(
            depth=depths[id(item)],
            type=item.type,
            path=item.path,
            relative_path=item.get_relative_path(base_path),
            hash=item.get_hash(),
            rendered=item.is_rendered(),
        ))

    root.walk(visit)
    return rows


def format_tree(root: Item, base_path: str) -> list[str]:
    """Indented `type  /relative/index.html` lines; rendered items are starred."""
    depths = _depths(root)
    lines: list[str] = []

    def visit(item: Item) -> None:
        marker = " *" if item.is_rendered() else ""
        indent = "  " * depths[id(item)]
        lines.append(f"{indent}{item.type.value}  {item.get_relative_path(base_path)}{marker}")

    root.walk(visit)
    return lines
