"""Item tree data model: item types, blocks, files, and the item node itself"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

from pydantic import BaseModel, Field, model_validator

from mdindex.core.utils.hashing import fingerprint
from mdindex.errors import BlockNameError, UnknownItemTypeError


RENDERED_FILENAME = "index.html"


class ItemType(str, Enum):
    """Restrict item classification to the known set of repository item types"""
    unknown = "unknown"
    document = "document"
    presentation = "presentation"
    collection = "collection"
    message = "message"
    imagegallery = "imagegallery"
    location = "location"
    comment = "comment"
    tag = "tag"
    repository = "repository"


# Marker filename (lowercase) -> item type; order doubles as discovery priority.
MARKER_FILES: dict[str, ItemType] = {
    "document.md":     ItemType.document,
    "readme.md":       ItemType.document,
    "presentation.md": ItemType.presentation,
    "collection.md":   ItemType.collection,
    "message.md":      ItemType.message,
    "imagegallery.md": ItemType.imagegallery,
    "location.md":     ItemType.location,
    "comment.md":      ItemType.comment,
    "tag.md":          ItemType.tag,
    "repository.md":   ItemType.repository,
}


def item_type_from_filename(filename: str) -> ItemType:
    """Classify a bare filename, ignoring case."""
    return MARKER_FILES.get(filename.lower(), ItemType.unknown)


def rendered_path_for(path: str) -> str:
    """Return the index.html path that sits beside the given source path."""
    return os.path.normpath(os.path.join(os.path.dirname(path), RENDERED_FILENAME))


class Block(BaseModel):
    """A named text fragment attached to an item and consumed by templates."""
    name: str = Field(..., min_length=1, description="Case-insensitive block identifier")
    value: str = ""


def new_block(name: str, value: str) -> Block:
    """Create a Block, raising BlockNameError for an empty name."""
    if not name:
        raise BlockNameError("Cannot add a block without a name")
    return Block(name=name, value=value)


class File(BaseModel):
    """An auxiliary content file owned by an item. Opaque to the item tree."""
    path: str

    @property
    def filename(self) -> str:
        return os.path.basename(self.path)


class Item(BaseModel):
    """A node in the documentation tree: one marker source file plus its files and sub-items.

    type and rendered_path are always derived from path; values passed for
    them are replaced. Use new_item to also get the unknown-type error.
    """
    path:          str = Field(..., frozen=True)
    rendered_path: str = Field(default="", frozen=True)
    type:          ItemType = Field(default=ItemType.unknown, frozen=True)
    files:         list[File] = Field(default_factory=list)
    child_items:   list["Item"] = Field(default_factory=list)
    blocks:        list[Block] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _derive_from_path(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("path"), str):
            path = data["path"]
            data = {
                **data,
                "rendered_path": rendered_path_for(path),
                "type": item_type_from_filename(os.path.basename(path)),
            }
        return data

    def get_filename(self) -> str:
        return os.path.basename(self.path)

    def get_absolute_path(self) -> str:
        return self.rendered_path

    def get_relative_path(self, base_path: str) -> str:
        """Return rendered_path relative to base_path with exactly one leading '/'.

        base_path is removed with a single first-occurrence replace, not a strict
        prefix trim, so it must be a real ancestor of rendered_path.
        """
        relative = self.rendered_path.replace(base_path, "", 1)
        return "/" + relative.lstrip("/")

    def get_hash(self) -> str:
        """Fingerprint of the source file; empty string if it cannot be read."""
        try:
            data = Path(self.path).read_bytes()
        except OSError:
            return ""
        return fingerprint(data)

    def is_rendered(self) -> bool:
        return os.path.exists(self.rendered_path)

    def get_block_value(self, name: str) -> str:
        """Return the value of the first block named `name` (any case), else ''."""
        wanted = name.lower()
        for block in self.blocks:
            if block.name.lower() == wanted:
                return block.value
        return ""

    def add_block(self, name: str, value: str) -> None:
        """Append a block. An empty name is a caller bug and raises BlockNameError."""
        self.blocks.append(new_block(name, value))

    def walk(self, visit: Callable[["Item"], None]) -> None:
        """Visit this item, then each child subtree in stored order (pre-order)."""
        visit(self)
        for child in self.child_items:
            child.walk(visit)

    def iter_items(self) -> Iterator["Item"]:
        """Yield the items of this subtree in the same order as walk()."""
        yield self
        for child in self.child_items:
            yield from child.iter_items()


def new_item(
    path: str,
    files: Optional[list[File]] = None,
    child_items: Optional[list[Item]] = None,
    ) -> Item:
    """Build an Item, classifying it by the basename of path.

    Raises UnknownItemTypeError when the filename is not a known marker; the
    populated item is still available on the error as `.item`.
    """
    item = Item(
        path=path,
        files=files or [],
        child_items=child_items or [],
    )
    if item.type == ItemType.unknown:
        raise UnknownItemTypeError(path, item)
    return item
